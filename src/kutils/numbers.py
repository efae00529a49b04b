"""
숫자 포맷 유틸리티

숫자 문자열 종류 검사와 '#,##0.00' 형식의 10진수 포맷, 로케일별 통화 표기를 제공합니다.
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import NamedTuple, Union

from .core.exceptions import NumberFormatError


CURRENCY_BELOW_THE_DECIMAL1 = "#,##0.0"
CURRENCY_BELOW_THE_DECIMAL2 = "#,##0.00"
CURRENCY_BELOW_THE_DECIMAL3 = "#,##0.000"
CURRENCY_BELOW_THE_DECIMAL4 = "#,##0.0000"
CURRENCY_BELOW_THE_DECIMAL5 = "#,##0.00000"
CURRENCY_NO_DECIMAL_POINT = "#,##0"
NO_EFFECT_FORMAT = "#"

_NUMBER_TYPE_PATTERNS = {
    "positive": re.compile(r"[+]?([1-9]\d*|[1-9]\d*\.\d*|0?\.\d*[1-9]\d*)"),
    "negative": re.compile(r"-([1-9]\d*|[1-9]\d*\.\d*|0?\.\d*[1-9]\d*)"),
    "whole": re.compile(r"[+-]?[1-9]\d*"),
    "real": re.compile(r"[+-]?([1-9]\d*\.\d*|0?\.\d*[1-9]\d*)"),
}

# 로케일별 통화 기호와 소수 자릿수
_CURRENCY_FORMATS = {
    "ko_KR": ("₩", CURRENCY_NO_DECIMAL_POINT),
    "en_US": ("$", CURRENCY_BELOW_THE_DECIMAL2),
    "ja_JP": ("￥", CURRENCY_NO_DECIMAL_POINT),
    "en_GB": ("£", CURRENCY_BELOW_THE_DECIMAL2),
}

_PATTERN_CHARS = "#0,."

Number = Union[int, float, Decimal]


class _DecimalPattern(NamedTuple):
    prefix: str
    suffix: str
    grouping: int
    min_integer: int
    min_fraction: int
    max_fraction: int


def check_number_type(text: str, kind: str) -> bool:
    """
    숫자 문자열이 지정한 종류인지 확인합니다.

    Args:
        text: 검사할 문자열
        kind: "positive"(양수), "negative"(음수), "whole"(정수), "real"(실수)

    Returns:
        bool: 종류가 일치하면 True, 알 수 없는 종류는 False

    Examples:
        >>> check_number_type("+1234", "positive")
        True
        >>> check_number_type("-0.1234", "negative")
        True
    """
    pattern = _NUMBER_TYPE_PATTERNS.get(kind)
    if pattern is None or not isinstance(text, str):
        return False
    return pattern.fullmatch(text) is not None


def _parse_pattern(pattern: str) -> _DecimalPattern:
    start = next((i for i, ch in enumerate(pattern) if ch in _PATTERN_CHARS), None)
    if start is None:
        raise NumberFormatError(
            f"잘못된 숫자 포맷입니다: {pattern}",
            details={"pattern": pattern}
        )

    end = start
    while end < len(pattern) and pattern[end] in _PATTERN_CHARS:
        end += 1

    body = pattern[start:end]
    if body.count(".") > 1:
        raise NumberFormatError(
            f"소수점이 여러 개인 포맷입니다: {pattern}",
            details={"pattern": pattern}
        )

    integer_part, _, fraction_part = body.partition(".")
    grouping = len(integer_part) - integer_part.rfind(",") - 1 if "," in integer_part else 0

    return _DecimalPattern(
        prefix=pattern[:start],
        suffix=pattern[end:],
        grouping=grouping,
        min_integer=integer_part.count("0"),
        min_fraction=fraction_part.count("0"),
        max_fraction=len(fraction_part.replace(",", "")),
    )


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, float):
        # float는 최단 표현을 기준으로 변환
        return Decimal(repr(value))
    return Decimal(value)


def _group(digits: str, size: int) -> str:
    if size <= 0 or len(digits) <= size:
        return digits
    head = len(digits) % size or size
    groups = [digits[:head]] + [digits[i:i + size] for i in range(head, len(digits), size)]
    return ",".join(groups)


def format_number(value: Number, pattern: str) -> str:
    """
    숫자를 10진수 포맷 패턴의 문자열로 변환합니다.

    '0'은 필수 자리, '#'은 선택 자리, ','는 그룹 구분, '.'은 소수점입니다.
    소수 자릿수를 초과하면 HALF_EVEN 방식으로 반올림합니다.

    Args:
        value: 변환할 숫자
        pattern: 포맷 패턴 (예: "#,##0.00")

    Returns:
        str: 포맷된 문자열

    Raises:
        NumberFormatError: 패턴이 잘못되었거나 숫자가 아닌 경우

    Examples:
        >>> format_number(1023412123, "##,##")
        '10,23,41,21,23'
        >>> format_number(12345.67, "###,###.#")
        '12,345.7'
    """
    fmt = _parse_pattern(pattern)

    try:
        number = _to_decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise NumberFormatError(
            f"숫자가 아닙니다: {value}",
            details={"value": str(value), "pattern": pattern}
        ) from e

    if not number.is_finite():
        raise NumberFormatError(f"유한한 숫자가 아닙니다: {value}", details={"value": str(value)})

    rounded = number.quantize(Decimal(1).scaleb(-fmt.max_fraction), rounding=ROUND_HALF_EVEN)
    negative = rounded < 0
    text = format(abs(rounded), "f")
    integer_digits, _, fraction_digits = text.partition(".")

    fraction_digits = fraction_digits.rstrip("0")
    fraction_digits = fraction_digits.ljust(fmt.min_fraction, "0")

    integer_digits = integer_digits.lstrip("0").rjust(fmt.min_integer, "0")
    if not integer_digits and not fraction_digits:
        integer_digits = "0"

    result = _group(integer_digits, fmt.grouping)
    if fraction_digits:
        result += "." + fraction_digits

    if negative and any(ch != "0" for ch in integer_digits + fraction_digits):
        result = "-" + result

    return fmt.prefix + result + fmt.suffix


def format_number_string(text: str, pattern: str) -> str:
    """
    숫자 문자열을 포맷 패턴의 문자열로 변환합니다. ','는 무시합니다.

    Raises:
        NumberFormatError: ','와 '.' 이외의 문자가 포함된 경우

    Examples:
        >>> format_number_string("1234567", "#,##0.000")
        '1,234,567.000'
        >>> format_number_string("1", "#,#00.000")
        '01.000'
    """
    cleaned = str(text).replace(",", "")
    if not re.fullmatch(r"[+-]?(\d+\.?\d*|\.\d+)", cleaned):
        raise NumberFormatError(
            ",와 . 이외의 다른 문자는 사용할 수 없습니다.",
            details={"value": str(text), "pattern": pattern}
        )
    return format_number(Decimal(cleaned), pattern)


def format_number_by_locale(value: Number, locale: str) -> str:
    """
    로케일에 맞는 통화 표기로 변환합니다.

    Args:
        value: 금액
        locale: 'ko_KR', 'en_US', 'ja_JP', 'en_GB' ('-' 구분도 허용)

    Returns:
        str: 통화 기호와 그룹 구분이 적용된 문자열

    Raises:
        NumberFormatError: 지원하지 않는 로케일인 경우

    Examples:
        >>> format_number_by_locale(3527900, "ko_KR")
        '₩3,527,900'
        >>> format_number_by_locale(3527900, "en_US")
        '$3,527,900.00'
    """
    key = str(locale).replace("-", "_")
    if key not in _CURRENCY_FORMATS:
        raise NumberFormatError(
            f"지원하지 않는 로케일입니다: {locale}",
            details={"locale": str(locale), "supported": sorted(_CURRENCY_FORMATS)}
        )

    symbol, pattern = _CURRENCY_FORMATS[key]
    formatted = format_number(value, pattern)
    if formatted.startswith("-"):
        return "-" + symbol + formatted[1:]
    return symbol + formatted
