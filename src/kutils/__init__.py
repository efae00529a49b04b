"""
kutils - 공통 유틸리티 라이브러리

바이트 변환, 날짜/시간, 암복호화, 다이제스트, 파일/스트림 처리,
한국 식별번호 검증, 숫자 포맷, 랜덤 문자열, 네트워크 정보 유틸리티를 제공합니다.
각 기능은 하위 모듈(kutils.files, kutils.datetime 등)에서 가져와 사용합니다.
"""

from .core.config import Settings, get_settings, settings
from .core.exceptions import BaseUtilsError
from .core.logging import setup_logging, get_logger
from .core.result import OperationResult, ResultStatus
from .binary import hex_to_bytes, bytes_to_hex
from .crypto import generate_hex_des_key, encrypt_string_by_des, decrypt_string_by_des
from .digest import HashAlgorithm, encode_password, verify_password
from .validators import is_resident_reg_number, is_biz_reg_number, is_incorp_cert_number
from .threads import TimeUnit, sleep

__version__ = "1.0.0"

__all__ = [
    # 설정/로깅
    "Settings",
    "get_settings",
    "settings",
    "setup_logging",
    "get_logger",

    # 결과/예외
    "BaseUtilsError",
    "OperationResult",
    "ResultStatus",

    # 바이트 변환
    "hex_to_bytes",
    "bytes_to_hex",

    # 암복호화
    "generate_hex_des_key",
    "encrypt_string_by_des",
    "decrypt_string_by_des",

    # 다이제스트
    "HashAlgorithm",
    "encode_password",
    "verify_password",

    # 검증
    "is_resident_reg_number",
    "is_biz_reg_number",
    "is_incorp_cert_number",

    # 스레드
    "TimeUnit",
    "sleep",
]
