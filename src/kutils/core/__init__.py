"""
핵심 모듈

설정, 로깅, 예외, 작업 결과 타입을 제공합니다.
"""

from .config import Settings, get_settings, settings
from .result import OperationResult, ResultStatus

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "OperationResult",
    "ResultStatus",
]
