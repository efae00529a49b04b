"""
핵심 설정 모듈
환경 변수 기반 설정 관리
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import pytz


class Settings(BaseSettings):
    """유틸리티 라이브러리 설정"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True
    )

    # Logging Settings
    debug: bool = Field(default=False, alias="KUTILS_DEBUG")
    log_level: str = Field(default="INFO", alias="KUTILS_LOG_LEVEL")

    # Date/Time Settings
    timezone: str = Field(default="Asia/Seoul", alias="KUTILS_TIMEZONE")
    default_locale: str = Field(default="ko", alias="KUTILS_DEFAULT_LOCALE")

    # I/O Settings
    default_encoding: str = Field(default="utf-8", alias="KUTILS_DEFAULT_ENCODING")
    copy_buffer_size: int = Field(default=4096, alias="KUTILS_COPY_BUFFER_SIZE")

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        if value not in pytz.all_timezones_set:
            raise ValueError(f"알 수 없는 시간대입니다: {value}")
        return value

    @field_validator("copy_buffer_size")
    @classmethod
    def _check_buffer_size(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("버퍼 크기는 양의 정수여야 합니다")
        return value

    @property
    def tzinfo(self) -> pytz.BaseTzInfo:
        """설정된 시간대 객체 반환"""
        return pytz.timezone(self.timezone)


@lru_cache()
def get_settings() -> Settings:
    """캐시된 설정 인스턴스 반환"""
    return Settings()


# 전역 설정 인스턴스
settings = get_settings()
