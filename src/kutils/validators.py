"""
검증 유틸리티

주민등록번호, 사업자등록번호, 법인등록번호 등 한국 식별번호와
전화번호, 이메일, 사용자 정의 형식 검증 함수들을 제공합니다.
모든 함수는 예외 대신 bool을 반환합니다.
"""

import re
from typing import Optional

from email_validator import validate_email, EmailNotValidError

from .core.config import settings


RESIDENT_REG_NUMBER_PATTERN = re.compile(
    r"([0-9]{2}(?:0[1-9]|1[0-2])(?:0[1-9]|[12][0-9]|3[01]))-([1-4][0-9]{6})"
)
INCORP_CERT_NUMBER_PATTERN = re.compile(r"(\d{6})-(\d{7})", re.ASCII)
BIZ_REG_NUMBER_PATTERN = re.compile(r"(\d{3})-(\d{2})-(\d{5})", re.ASCII)
TELEPHONE_NUMBER_PATTERN = re.compile(r"\d{2,4}-\d{3,4}-\d{4}", re.ASCII)
CELLPHONE_NUMBER_PATTERN = re.compile(r"01[016789]-\d{3,4}-\d{4}", re.ASCII)
CARD_NUMBER_PATTERN = re.compile(r"\d{4}[\s\-]?\d{4}[\s\-]?\d{4}[\s\-]?\d{4}", re.ASCII)

# 주민등록번호 가중치
_RESIDENT_WEIGHTS = (2, 3, 4, 5, 6, 7, 8, 9, 2, 3, 4, 5)
# 사업자등록번호 가중치
_BIZ_WEIGHTS = (1, 3, 7, 1, 3, 7, 1, 3, 5)

_INCLUDE_PATTERNS = {
    "s": re.compile(r"[~!@#$%<>^&*()\-=+_']"),
    "k": re.compile(r"[ㄱ-ㅎㅏ-ㅣ가-힣]"),
    "e": re.compile(r"[a-zA-Z]"),
    "n": re.compile(r"[0-9]"),
}


def _matches(pattern: "re.Pattern[str]", text: Optional[str]) -> bool:
    return isinstance(text, str) and pattern.fullmatch(text) is not None


def _digits(text: str) -> list:
    return [int(ch) for ch in text.replace("-", "")]


def is_resident_reg_number(regno: str) -> bool:
    """
    주민등록번호(xxxxxx-xxxxxxx)의 형식과 검증번호를 확인합니다.

    앞 12자리에 가중치 234567892345를 곱해 더한 값을 11로 나눈 나머지로
    검증번호를 계산합니다.

    Args:
        regno: 주민등록번호

    Returns:
        bool: 유효한 경우 True

    Examples:
        >>> is_resident_reg_number("871224-1237613")
        True
    """
    if not _matches(RESIDENT_REG_NUMBER_PATTERN, regno):
        return False

    digits = _digits(regno)
    total = sum(d * w for d, w in zip(digits, _RESIDENT_WEIGHTS))
    return (11 - total % 11) % 10 == digits[12]


def is_incorp_cert_number(corp_number: str) -> bool:
    """
    법인등록번호(xxxxxx-xxxxxxx)의 형식과 검증번호를 확인합니다.

    앞 12자리에 1, 2를 번갈아 곱해 더한 값으로 검증번호를 계산합니다.
    """
    if not _matches(INCORP_CERT_NUMBER_PATTERN, corp_number):
        return False

    digits = _digits(corp_number)
    total = sum(d * (1 if index % 2 == 0 else 2) for index, d in enumerate(digits[:12]))
    return (10 - total % 10) % 10 == digits[12]


def is_biz_reg_number(biz_number: str) -> bool:
    """
    사업자등록번호(xxx-xx-xxxxx)의 형식과 검증번호를 확인합니다.

    앞 9자리에 가중치 137137135를 곱해 더하고, 9번째 자리 x 5 의 십의 자리를 더합니다.
    """
    if not _matches(BIZ_REG_NUMBER_PATTERN, biz_number):
        return False

    digits = _digits(biz_number)
    total = sum(d * w for d, w in zip(digits, _BIZ_WEIGHTS))
    total += digits[8] * 5 // 10
    return (10 - total % 10) % 10 == digits[9]


def is_telephone_number(phone_number: str) -> bool:
    """전화번호(xx(xx)-xxx(x)-xxxx) 형식인지 확인합니다."""
    return _matches(TELEPHONE_NUMBER_PATTERN, phone_number)


def is_cellphone_number(cellphone_number: str) -> bool:
    """휴대전화번호(01x-xxx(x)-xxxx, x는 0,1,6,7,8,9) 형식인지 확인합니다."""
    return _matches(CELLPHONE_NUMBER_PATTERN, cellphone_number)


def is_email_address(email: str) -> bool:
    """
    이메일 주소 형식인지 확인합니다.

    email-validator 라이브러리를 사용하며 DNS 검증은 하지 않습니다.
    """
    if not isinstance(email, str):
        return False
    try:
        validate_email(email, check_deliverability=False)
        return True
    except EmailNotValidError:
        return False


def is_card_number(card_number: str) -> bool:
    """16자리 카드번호(4자리 단위로 공백 또는 '-' 구분 가능) 형식인지 확인합니다."""
    return _matches(CARD_NUMBER_PATTERN, card_number)


def is_range_length(text: str, min_length: int, max_length: int) -> bool:
    """문자열 길이가 범위(양 끝 포함) 안에 있는지 확인합니다."""
    return min_length <= len(text) <= max_length


def is_range_byte_length(
    text: str,
    min_length: int,
    max_length: int,
    encoding: Optional[str] = None
) -> bool:
    """인코딩된 바이트 길이가 범위(양 끝 포함) 안에 있는지 확인합니다."""
    byte_length = len(text.encode(encoding or settings.default_encoding))
    return min_length <= byte_length <= max_length


def is_user_format(text: str, pattern: str) -> bool:
    """
    사용자 정의 형식과 일치하는지 확인합니다.

    '#'은 숫자 한 자리, 'S'는 영문자 한 자리와 일치하며 나머지 문자는 그대로 비교합니다.

    Examples:
        >>> is_user_format("010-1234-5678", "###-####-####")
        True
    """
    regex = "".join(
        r"\d" if ch == "#" else "[a-zA-Z]" if ch == "S" else re.escape(ch)
        for ch in pattern
    )
    return _matches(re.compile(regex), text)


def is_regex_pattern_match(text: str, pattern: str) -> bool:
    """문자열 전체가 정규식과 일치하는지 확인합니다."""
    return _matches(re.compile(pattern), text)


def is_pattern_matching(text: str, pattern: str) -> bool:
    """
    문자열 전체가 패턴과 일치하는지 확인합니다. 패턴의 '*'는 임의의 문자열과 일치합니다.
    """
    return is_regex_pattern_match(text, pattern.replace("*", ".*"))


def is_pattern_include(text: str, kinds: str) -> bool:
    """
    문자열이 지정한 종류의 문자를 포함하는지 확인합니다.

    여러 종류를 지정하면 s, k, e, n 순서로 처음 지정된 종류 하나만 검사합니다.

    Args:
        text: 검사할 문자열
        kinds: 종류 조합 ('s': 특수문자, 'k': 한글, 'e': 영문, 'n': 숫자)

    Returns:
        bool: 검사한 종류의 문자를 포함하면 True (지정한 종류가 없으면 True)

    Examples:
        >>> is_pattern_include("abc", "en")
        True
    """
    for kind, pattern in _INCLUDE_PATTERNS.items():
        if kind in kinds:
            return pattern.search(text) is not None
    return True


def is_regex_pattern_include(text: str, pattern: str) -> bool:
    """문자열 안에 정규식과 일치하는 부분이 있는지 확인합니다."""
    return isinstance(text, str) and re.search(pattern, text) is not None
