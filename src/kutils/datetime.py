"""
날짜/시간 처리 유틸리티

날짜 문자열의 계산, 변환, 검증 함수들을 제공합니다.
모든 패턴은 strftime/strptime 형식을 사용하며, 현재 시각은 설정된 시간대
(기본값: Asia/Seoul) 기준으로 계산합니다.
"""

from datetime import datetime, timedelta
from typing import List, Optional, Union
import calendar
import re

from .core.config import settings
from .core.exceptions import DateParseError, DateRangeError


HOURS_24 = 24
MINUTES_60 = 60
SECONDS_60 = 60
MILLI_SECONDS_1000 = 1000

DATE_PATTERN_DASH = "%Y-%m-%d"
TIME_PATTERN = "%H:%M"
DATE_TIME_PATTERN = "%Y-%m-%d %H:%M:%S"
DATE_HMS_PATTERN = "%Y%m%d%H%M%S"
TIMESTAMP_PATTERN = "%Y-%m-%d %H:%M:%S.%f"
YEAR_PATTERN = "%Y"
MONTH_PATTERN = "%m"
DAY_PATTERN = "%d"
DATE_PATTERN = "%Y%m%d"
TIME_HMS_PATTERN = "%H%M%S"
TIME_HMS_PATTERN_COLON = "%H:%M:%S"

_YEAR_DIRECTIVE = re.compile(r"%%|%Y")

_DAY_NAMES = {
    "ko": (
        ("월", "화", "수", "목", "금", "토", "일"),
        ("월요일", "화요일", "수요일", "목요일", "금요일", "토요일", "일요일"),
    ),
    "en": (
        ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
        ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    ),
}


def _truncate_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def now() -> datetime:
    """
    설정된 시간대의 현재 시간을 반환합니다.

    Returns:
        datetime: 시간대 정보가 포함된 현재 시간
    """
    return datetime.now(settings.tzinfo)


def parse_date(text: str, pattern: str = DATE_PATTERN_DASH) -> datetime:
    """
    문자열을 datetime 객체로 파싱합니다.

    Args:
        text: 파싱할 날짜/시간 문자열
        pattern: strptime 패턴

    Returns:
        datetime: 파싱된 datetime 객체 (시간대 정보 없음)

    Raises:
        DateParseError: 파싱에 실패한 경우
    """
    try:
        return datetime.strptime(text, pattern)
    except (TypeError, ValueError) as e:
        raise DateParseError(
            f"날짜/시간 형식을 파싱할 수 없습니다: {text} ({pattern})",
            details={"value": str(text), "pattern": pattern, "original_error": str(e)}
        ) from e


def format_date(dt: datetime, pattern: str = DATE_PATTERN_DASH) -> str:
    """
    datetime 객체를 문자열로 포맷합니다.

    Args:
        dt: 포맷할 datetime 객체
        pattern: strftime 패턴

    Returns:
        str: 포맷된 날짜/시간 문자열
    """
    # 1000년 미만도 %Y는 4자리로 맞춤
    pattern = _YEAR_DIRECTIVE.sub(
        lambda m: f"{dt.year:04d}" if m.group() == "%Y" else m.group(),
        pattern
    )
    return dt.strftime(pattern)


def convert_pattern(text: str, base_pattern: str, wanted_pattern: str) -> str:
    """
    날짜 문자열을 다른 패턴의 문자열로 변환합니다.

    예: convert_pattern("20090608", "%Y%m%d", "%Y-%m-%d") -> "2009-06-08"
    """
    return format_date(parse_date(text, base_pattern), wanted_pattern)


def get_current_datetime(pattern: str = DATE_TIME_PATTERN) -> str:
    """현재 시간을 주어진 패턴의 문자열로 반환합니다."""
    return format_date(now(), pattern)


def get_current_date(pattern: str = DATE_PATTERN_DASH) -> str:
    """오늘 날짜를 주어진 패턴의 문자열로 반환합니다."""
    return format_date(now(), pattern)


def get_current_timestamp_string() -> str:
    """현재 시간을 밀리초까지 포함한 문자열로 반환합니다 (예: 2024-01-15 12:30:45.123)."""
    return format_date(now(), TIMESTAMP_PATTERN)[:-3]


def get_this_month(pattern: str = "%Y-%m") -> str:
    """이번 달을 문자열로 반환합니다."""
    return get_current_datetime(pattern)


def get_this_year() -> str:
    """올해를 문자열로 반환합니다."""
    return get_current_datetime(YEAR_PATTERN)


def get_yesterday(pattern: str = DATE_PATTERN_DASH) -> str:
    """어제 날짜를 문자열로 반환합니다."""
    return format_date(now() - timedelta(days=1), pattern)


def get_day_of_week(
    text: str,
    abbreviation: bool = True,
    locale: Optional[str] = None,
    pattern: str = DATE_PATTERN_DASH
) -> str:
    """
    날짜 문자열의 요일명을 반환합니다.

    Args:
        text: 날짜 문자열
        abbreviation: True면 축약형("월", "Mon"), False면 전체("월요일", "Monday")
        locale: 'ko' 또는 'en' (None인 경우 설정값 사용)
        pattern: 날짜 패턴

    Returns:
        str: 요일명

    Raises:
        DateParseError: 날짜 파싱 실패 시
        ValueError: 지원하지 않는 로케일인 경우
    """
    locale = (locale or settings.default_locale).split("_")[0].lower()
    if locale not in _DAY_NAMES:
        raise ValueError(f"지원하지 않는 로케일입니다: {locale}")

    short_names, full_names = _DAY_NAMES[locale]
    weekday = parse_date(text, pattern).weekday()
    return short_names[weekday] if abbreviation else full_names[weekday]


def get_days(start_date: str, end_date: str, pattern: str = DATE_PATTERN_DASH) -> int:
    """
    두 날짜 문자열 사이의 일수를 계산합니다.

    Returns:
        int: end_date - start_date 일수 (음수 가능)
    """
    start = parse_date(start_date, pattern).date()
    end = parse_date(end_date, pattern).date()
    return (end - start).days


def get_minutes(start_dt: datetime, end_dt: datetime) -> int:
    """
    두 시간 사이의 분 차이를 계산합니다 (0 방향으로 절삭).
    """
    delta = end_dt - start_dt
    microseconds = delta // timedelta(microseconds=1)
    return _truncate_div(microseconds, SECONDS_60 * MILLI_SECONDS_1000 * 1000)


def get_days_between(start_dt: datetime, end_dt: datetime) -> int:
    """
    두 시간 사이의 경과 일수를 계산합니다 (0 방향으로 절삭).
    """
    return _truncate_div(get_minutes(start_dt, end_dt), HOURS_24 * MINUTES_60)


def get_minutes_between(start: str, end: str) -> int:
    """
    yyyyMMddHHmmss 형식 두 문자열 사이의 분 차이를 계산합니다.

    Raises:
        DateParseError: 14자리 형식이 아닌 경우
    """
    start_dt = parse_compact_datetime(start)
    end_dt = parse_compact_datetime(end)
    if start_dt is None or end_dt is None:
        raise DateParseError(
            "yyyyMMddHHmmss 형식의 14자리 문자열이어야 합니다.",
            details={"start": str(start), "end": str(end)}
        )
    return get_minutes(start_dt, end_dt)


def _to_datetime(value: Union[datetime, str], pattern: str) -> datetime:
    if isinstance(value, datetime):
        return value
    return parse_date(value, pattern)


def equals(date1: datetime, date2: Union[datetime, str], pattern: str = DATE_PATTERN_DASH) -> bool:
    """두 날짜가 같은 시각인지 확인합니다. date2가 문자열이면 pattern으로 파싱합니다."""
    return date1 == _to_datetime(date2, pattern)


def greater_than(date1: datetime, date2: Union[datetime, str], pattern: str = DATE_PATTERN_DASH) -> bool:
    """date1이 date2보다 이후인지 확인합니다. date2가 문자열이면 pattern으로 파싱합니다."""
    return date1 > _to_datetime(date2, pattern)


def _add_months(dt: datetime, months: int) -> datetime:
    # 월말 초과 시 해당 월의 마지막 날로 맞춤
    month_index = dt.year * 12 + (dt.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return dt.replace(year=year, month=month, day=min(dt.day, last_day))


def add_days(text: str, days: int, pattern: str = DATE_PATTERN_DASH) -> str:
    """
    날짜 문자열에 일수를 더합니다.

    Args:
        text: 기준 날짜 문자열
        days: 더할 일수 (음수 가능)
        pattern: 날짜 패턴

    Returns:
        str: 계산된 날짜 문자열 (days가 0이면 입력 그대로)
    """
    if days == 0:
        return text
    return format_date(parse_date(text, pattern) + timedelta(days=days), pattern)


def add_months(text: str, months: int, pattern: str = DATE_PATTERN_DASH) -> str:
    """
    날짜 문자열에 개월 수를 더합니다. 결과 월에 해당 일이 없으면 월말로 맞춥니다.

    예: add_months("2024-01-31", 1) -> "2024-02-29"
    """
    if months == 0:
        return text
    return format_date(_add_months(parse_date(text, pattern), months), pattern)


def add_years(text: str, years: int, pattern: str = DATE_PATTERN_DASH) -> str:
    """
    날짜 문자열에 연수를 더합니다. 윤년 2월 29일은 평년에서 2월 28일이 됩니다.
    """
    if years == 0:
        return text
    return format_date(_add_months(parse_date(text, pattern), years * 12), pattern)


def add_year_month_day(text: str, years: int, months: int, days: int,
                       pattern: str = DATE_PATTERN_DASH) -> str:
    """연, 월, 일 순서로 날짜 문자열에 더합니다."""
    dt = parse_date(text, pattern)

    if years != 0:
        dt = _add_months(dt, years * 12)
    if months != 0:
        dt = _add_months(dt, months)
    if days != 0:
        dt = dt + timedelta(days=days)

    return format_date(dt, pattern)


def get_first_date_of_month(text: str, pattern: str = DATE_PATTERN_DASH) -> str:
    """해당 월의 첫 날을 반환합니다."""
    dt = parse_date(text, pattern)
    first = datetime(dt.year, dt.month, 1)
    return format_date(first, pattern)


def get_last_date_of_month(text: str, pattern: str = DATE_PATTERN_DASH) -> str:
    """해당 월의 마지막 날을 반환합니다."""
    dt = parse_date(text, pattern)
    last_day = calendar.monthrange(dt.year, dt.month)[1]
    return format_date(datetime(dt.year, dt.month, last_day), pattern)


def get_first_date_of_prev_month(text: str, pattern: str = DATE_PATTERN_DASH) -> str:
    """이전 달의 첫 날을 반환합니다."""
    dt = parse_date(text, pattern)
    return format_date(_add_months(datetime(dt.year, dt.month, 1), -1), pattern)


def get_last_date_of_prev_month(text: str, pattern: str = DATE_PATTERN_DASH) -> str:
    """이전 달의 마지막 날을 반환합니다."""
    dt = parse_date(text, pattern)
    return format_date(datetime(dt.year, dt.month, 1) - timedelta(days=1), pattern)


def is_date(text: str, pattern: str = DATE_PATTERN_DASH) -> bool:
    """
    문자열이 주어진 패턴의 유효한 날짜인지 확인합니다.

    파싱 후 다시 포맷한 결과가 원본과 같아야 유효합니다.
    예외를 발생시키지 않고 False를 반환합니다.

    Args:
        text: 검증할 문자열
        pattern: 날짜 패턴

    Returns:
        bool: 유효한 경우 True
    """
    try:
        dt = datetime.strptime(text, pattern)
    except (TypeError, ValueError):
        return False
    return format_date(dt, pattern) == text


def is_time(text: str, pattern: str = TIME_PATTERN) -> bool:
    """문자열이 주어진 패턴의 유효한 시간인지 확인합니다."""
    return is_date(text, pattern)


def is_leap_year(year: Union[int, str]) -> bool:
    """
    윤년인지 확인합니다.

    Args:
        year: 연도 또는 연도로 시작하는 날짜 문자열 (예: "2024-01-01")

    Returns:
        bool: 윤년인 경우 True
    """
    if isinstance(year, str):
        year = int(year[:4])
    return calendar.isleap(year)


def get_dates(start_day: str, end_day: str, pattern: str = DATE_PATTERN_DASH) -> List[str]:
    """
    시작일부터 종료일까지의 날짜 문자열 목록을 반환합니다 (양 끝 포함).

    Raises:
        DateRangeError: 종료일이 시작일보다 앞선 경우
    """
    current = parse_date(start_day, pattern)
    end = parse_date(end_day, pattern)

    if end < current:
        raise DateRangeError(
            "시작 날짜가 종료 날짜보다 늦습니다",
            details={"start": start_day, "end": end_day}
        )

    dates = []
    while current <= end:
        dates.append(format_date(current, pattern))
        current += timedelta(days=1)

    return dates


def parse_compact_datetime(text: Optional[str]) -> Optional[datetime]:
    """
    yyyyMMddHHmmss 형식의 문자열을 datetime으로 변환합니다.

    Returns:
        Optional[datetime]: 14자리 미만이거나 None이면 None
    """
    if text is None or len(text) < 14:
        return None
    return parse_date(text[:14], DATE_HMS_PATTERN)


def format_compact_datetime(dt: datetime) -> str:
    """datetime을 yyyyMMddHHmmss000 형식으로 변환합니다."""
    return format_date(dt, DATE_HMS_PATTERN) + "000"


def to_epoch_millis(text: str, pattern: str = DATE_TIME_PATTERN) -> int:
    """
    설정된 시간대 기준의 날짜 문자열을 Unix 밀리초로 변환합니다.
    """
    dt = settings.tzinfo.localize(parse_date(text, pattern))
    return int(dt.timestamp() * MILLI_SECONDS_1000)


def millis_to_hex(millis: int) -> str:
    """밀리초 값을 12자리 16진수 문자열로 변환합니다."""
    return format(millis, "012x")


def current_millis_to_hex() -> str:
    """현재 시간의 밀리초 값을 12자리 16진수 문자열로 변환합니다."""
    return millis_to_hex(int(now().timestamp() * MILLI_SECONDS_1000))


def hex_to_date_string(hex_string: str, pattern: str = DATE_TIME_PATTERN) -> str:
    """
    16진수 밀리초 문자열을 설정된 시간대 기준의 날짜 문자열로 변환합니다.

    Raises:
        DateParseError: 16진수가 아닌 경우
    """
    try:
        millis = int(hex_string, 16)
    except (TypeError, ValueError) as e:
        raise DateParseError(
            f"16진수 시간 값이 아닙니다: {hex_string}",
            details={"value": str(hex_string)}
        ) from e

    dt = datetime.fromtimestamp(millis / MILLI_SECONDS_1000, tz=settings.tzinfo)
    return format_date(dt, pattern)


def convert_iso_date_to_date(iso_date: datetime) -> str:
    """
    KST 기준 datetime을 9시간 앞당겨 'YYYY-MM-DD HH:MM:SS' 문자열로 반환합니다.
    """
    return format_date(iso_date - timedelta(hours=9), DATE_TIME_PATTERN)
