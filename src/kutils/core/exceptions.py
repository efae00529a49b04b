"""
유틸리티 예외 클래스 정의
"""

from typing import Any, Dict, Optional


class BaseUtilsError(Exception):
    """유틸리티 기본 예외 클래스"""

    def __init__(
        self,
        message: str,
        error_code: str = None,
        details: Dict[str, Any] = None
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """예외를 딕셔너리로 변환"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ValidationError(BaseUtilsError):
    """검증 오류"""
    pass


class NotFoundError(BaseUtilsError):
    """리소스를 찾을 수 없음"""
    pass


class ConflictError(BaseUtilsError):
    """리소스 충돌"""
    pass


class ExternalServiceError(BaseUtilsError):
    """외부 환경(OS, 네트워크) 오류"""
    pass


class ConfigurationError(BaseUtilsError):
    """설정 오류"""
    pass


# 모듈별 예외 클래스들

class ByteConversionError(ValidationError, ValueError):
    """바이트/16진수 변환 오류"""
    pass


class DateParseError(ValidationError, ValueError):
    """날짜/시간 파싱 오류"""
    pass


class DateRangeError(ValidationError, ValueError):
    """날짜 범위 오류"""
    pass


class NumberFormatError(ValidationError, ValueError):
    """숫자 포맷 오류"""
    pass


class CryptoError(BaseUtilsError):
    """암복호화 오류"""
    pass


class DigestError(BaseUtilsError):
    """인코딩/다이제스트 오류"""
    pass


class FileOperationError(BaseUtilsError):
    """파일/디렉토리 작업 오류"""
    pass


class PathNotFoundError(FileOperationError, NotFoundError):
    """경로가 존재하지 않음"""
    pass


class InvalidPathTypeError(FileOperationError, ValidationError):
    """파일/디렉토리 타입 불일치"""
    pass


class FileAccessError(FileOperationError):
    """파일 접근 권한 또는 입출력 오류"""
    pass


class UnsupportedCopyModeError(FileOperationError, ValidationError):
    """지원하지 않는 복사 모드"""
    pass


class PathConflictError(FileOperationError, ConflictError):
    """원본과 대상 경로 충돌"""
    pass


class StreamIOError(BaseUtilsError):
    """스트림 입출력 오류"""
    pass


class NetworkLookupError(ExternalServiceError):
    """네트워크 정보 조회 오류"""
    pass


class SleepInterruptedError(BaseUtilsError):
    """스레드 대기 중단"""
    pass


# 예외 변환 헬퍼 함수들

def handle_os_error(
    operation: str,
    target: Any,
    original_error: Exception,
    error_class: type = FileAccessError
) -> BaseUtilsError:
    """OS 수준 예외를 유틸리티 예외로 변환"""

    details = {
        "operation": operation,
        "target": str(target),
        "original_error": str(original_error),
        "error_type": type(original_error).__name__
    }

    message = f"{target} 처리 중 오류가 발생하였습니다 (작업: {operation}): {original_error}"

    return error_class(
        message=message,
        details=details
    )


def handle_validation_error(
    field: str,
    value: Any,
    constraint: str,
    expected: Optional[str] = None,
    error_class: type = ValidationError
) -> BaseUtilsError:
    """검증 오류를 생성하는 헬퍼 함수"""

    details = {
        "field": field,
        "value": str(value),
        "constraint": constraint
    }

    if expected:
        details["expected"] = expected

    message = f"필드 '{field}' 검증 실패: {constraint}"

    return error_class(
        message=message,
        details=details
    )


def path_not_found(operation: str, target: Any) -> PathNotFoundError:
    """경로 미존재 오류 생성"""
    return PathNotFoundError(
        message=f"{target}가 존재하지 않습니다.",
        details={"operation": operation, "target": str(target)}
    )


def not_a_directory(operation: str, target: Any) -> InvalidPathTypeError:
    """디렉토리 아님 오류 생성"""
    return InvalidPathTypeError(
        message=f"{target}는 디렉토리가 아닙니다.",
        details={"operation": operation, "target": str(target), "expected": "directory"}
    )


def not_a_file(operation: str, target: Any) -> InvalidPathTypeError:
    """파일 아님 오류 생성"""
    return InvalidPathTypeError(
        message=f"{target}은 파일이 아닙니다.",
        details={"operation": operation, "target": str(target), "expected": "file"}
    )


def nested_path(operation: str, src: Any, dest: Any) -> PathConflictError:
    """대상이 원본의 하위 경로인 경우의 충돌 오류 생성"""
    return PathConflictError(
        message=f"{dest}는 {src}의 하위 경로입니다.",
        details={"operation": operation, "target": str(dest), "source": str(src)}
    )
