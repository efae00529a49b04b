"""
스레드 유틸리티
"""

import threading
import time
from enum import Enum
from typing import Optional

from .core.exceptions import SleepInterruptedError


class TimeUnit(Enum):
    """시간 단위 (값은 나노초 기준 배수)"""
    NANOSECONDS = 1
    MICROSECONDS = 1_000
    MILLISECONDS = 1_000_000
    SECONDS = 1_000_000_000
    MINUTES = 60 * 1_000_000_000
    HOURS = 60 * 60 * 1_000_000_000
    DAYS = 24 * 60 * 60 * 1_000_000_000

    def to_millis(self, duration: int) -> int:
        """duration을 밀리초로 변환합니다 (0 방향으로 절삭)."""
        nanos = duration * self.value
        millis = abs(nanos) // TimeUnit.MILLISECONDS.value
        return millis if nanos >= 0 else -millis


def sleep(
    duration: int,
    unit: TimeUnit = TimeUnit.MILLISECONDS,
    cancel_event: Optional[threading.Event] = None
) -> None:
    """
    현재 스레드를 지정한 시간 동안 대기시킵니다.

    Args:
        duration: 대기 시간
        unit: 시간 단위
        cancel_event: 설정되면 대기를 중단하는 이벤트

    Raises:
        ValueError: 대기 시간이 음수인 경우
        SleepInterruptedError: cancel_event로 대기가 중단된 경우
    """
    millis = TimeUnit(unit).to_millis(duration)
    if millis < 0:
        raise ValueError(f"대기 시간은 0 이상이어야 합니다: {duration} {unit.name}")

    seconds = millis / 1000

    # 시그널로는 중단되지 않으며 cancel_event로만 중단할 수 있음
    if cancel_event is None:
        time.sleep(seconds)
        return

    if cancel_event.wait(seconds):
        raise SleepInterruptedError(
            "대기가 중단되었습니다.",
            details={"millis": millis}
        )
