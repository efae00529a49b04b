"""
구조화된 로깅 설정
"""

from typing import Any, Dict, Optional

import structlog
from structlog.types import Processor

from .config import settings


def setup_logging() -> None:
    """로깅 설정 초기화"""

    # 프로세서 체인 구성
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    # 개발 환경에서는 컬러 출력, 그 외에는 JSON
    if settings.debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """구조화된 로거 인스턴스 반환"""
    return structlog.get_logger(name)


def log_error(error: Exception, context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """에러 로그용 컨텍스트 생성"""
    error_context = {
        "error_type": type(error).__name__,
        "error_message": str(error),
        "log_event": "error"
    }

    if context:
        error_context.update(context)

    return error_context


def log_operation(operation: str, target: Any = None, **kwargs: Any) -> Dict[str, Any]:
    """파일/스트림 작업 로그용 컨텍스트 생성"""
    return {
        "operation": operation,
        "target": None if target is None else str(target),
        "log_event": "operation",
        **kwargs
    }
