"""
나이 계산 유틸리티

생년월일(yyyyMMdd) 기준으로 만 나이, 한국 나이를 계산합니다.
"""

from typing import Optional

from .datetime import (
    DATE_PATTERN,
    DATE_PATTERN_DASH,
    add_years,
    convert_pattern,
    get_current_date,
    parse_date,
)


def get_full_age(birthdate: str, base_date: Optional[str] = None) -> int:
    """
    기준일의 만 나이를 계산합니다.

    기준일의 월일이 생일보다 앞서면 한 살을 뺍니다.

    Args:
        birthdate: 생년월일 (yyyyMMdd)
        base_date: 기준일 (yyyyMMdd, None인 경우 오늘)

    Returns:
        int: 만 나이

    Raises:
        DateParseError: 날짜 형식이 잘못된 경우

    Examples:
        >>> get_full_age("19740608", "20090607")
        34
        >>> get_full_age("19740608", "20090608")
        35
    """
    if base_date is None:
        base_date = get_current_date(DATE_PATTERN)

    # 형식 검증
    parse_date(birthdate, DATE_PATTERN)
    parse_date(base_date, DATE_PATTERN)

    age = int(base_date[:4]) - int(birthdate[:4])

    if age > 0 and int(birthdate[4:8]) > int(base_date[4:8]):
        age -= 1

    return age


def get_korean_age(birthdate: str, base_date: Optional[str] = None) -> int:
    """
    기준일의 한국 나이(연도 차이 + 1)를 계산합니다.

    Args:
        birthdate: 생년월일 (yyyyMMdd)
        base_date: 기준일 (yyyyMMdd, None인 경우 오늘)
    """
    if base_date is None:
        base_date = get_current_date(DATE_PATTERN)

    parse_date(birthdate, DATE_PATTERN)
    parse_date(base_date, DATE_PATTERN)

    return int(base_date[:4]) - int(birthdate[:4]) + 1


def get_date_by_age(date: str, age: int, target_age: int) -> str:
    """
    입력 일자에 age살인 사람이 target_age살이 되는 날짜를 반환합니다.

    Examples:
        >>> get_date_by_age("20090901", 36, 20)
        '1993-09-01'
        >>> get_date_by_age("20090901", 16, 20)
        '2013-09-01'
    """
    dashed = convert_pattern(date, DATE_PATTERN, DATE_PATTERN_DASH)
    # 연수 차이가 0이어도 변환된 형식으로 반환
    return add_years(dashed, target_age - age, DATE_PATTERN_DASH)
