"""
작업 결과 데이터 클래스

파일/스트림 작업의 결과를 표현합니다. 결과 객체는 호출마다 새로 생성되며
생성 후에는 변경할 수 없습니다.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .exceptions import BaseUtilsError


class ResultStatus(Enum):
    """작업 결과 상태"""
    SUCCESS = ("Success", "RESULT_SUCCESS")
    FAIL = ("Fail", "RESULT_FAIL")
    TRUE = ("True", "RESULT_TRUE")
    FALSE = ("False", "RESULT_FALSE")
    EMPTY = ("Empty", "RESULT_EMPTY")

    @property
    def code(self) -> str:
        """상태 코드"""
        return self.value[0]

    @property
    def message(self) -> str:
        """기본 메시지"""
        return self.value[1]


@dataclass(frozen=True)
class OperationResult:
    """작업 결과"""
    status: ResultStatus
    operation: str
    target: Optional[str] = None
    message: str = ""
    error: Optional[BaseUtilsError] = None

    def __post_init__(self):
        if not self.message:
            object.__setattr__(self, "message", self.status.message)

    @classmethod
    def success(
        cls,
        operation: str,
        target: Any = None,
        message: Optional[str] = None
    ) -> "OperationResult":
        """성공 결과 생성"""
        return cls(
            status=ResultStatus.SUCCESS,
            operation=operation,
            target=None if target is None else str(target),
            message=message or ResultStatus.SUCCESS.message
        )

    @classmethod
    def failure(
        cls,
        operation: str,
        target: Any,
        error: BaseUtilsError
    ) -> "OperationResult":
        """실패 결과 생성"""
        return cls(
            status=ResultStatus.FAIL,
            operation=operation,
            target=None if target is None else str(target),
            message=error.message,
            error=error
        )

    @property
    def ok(self) -> bool:
        """성공 여부"""
        return self.status in (ResultStatus.SUCCESS, ResultStatus.TRUE)

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_error(self) -> None:
        """실패한 결과라면 담고 있는 예외를 발생시킵니다."""
        if self.ok:
            return
        if self.error is not None:
            raise self.error
        raise BaseUtilsError(self.message, details={"operation": self.operation, "target": self.target})

    def to_dict(self) -> Dict[str, Any]:
        """결과를 딕셔너리로 변환"""
        return {
            "status": self.status.code,
            "operation": self.operation,
            "target": self.target,
            "message": self.message,
            "error": self.error.to_dict() if self.error else None
        }
