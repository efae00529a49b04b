"""
랜덤 문자열 생성 유틸리티

영문, 특정 범위의 영문, 한글 음절로 구성된 랜덤 문자열을 생성합니다.
기본 난수 생성기는 스레드별로 분리되며, 재현 가능한 결과가 필요하면 rng를 전달합니다.
"""

import random
import string
import threading
from typing import Optional

from .digest import encode_charset

ALPHAS = string.ascii_uppercase + string.ascii_lowercase

# 한글 음절 범위 (가 ~ 힣)
KOREAN_SYLLABLE_START = 0xAC00
KOREAN_SYLLABLE_COUNT = 11172

_local = threading.local()


def _default_rng() -> random.Random:
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = random.Random()
        _local.rng = rng
    return rng


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"문자열 길이는 0 이상이어야 합니다: {count}")


def get_string(count: int, rng: Optional[random.Random] = None) -> str:
    """
    지정한 길이의 랜덤 영문 문자열을 반환합니다.

    Args:
        count: 문자열 길이
        rng: 난수 생성기 (None이면 스레드별 기본 생성기)

    Returns:
        str: 영문 대소문자로 구성된 문자열
    """
    _check_count(count)
    rng = rng or _default_rng()
    return "".join(rng.choice(ALPHAS) for _ in range(count))


def get_string_between(min_size: int, max_size: int, rng: Optional[random.Random] = None) -> str:
    """
    길이가 min_size 이상 max_size 미만인 랜덤 영문 문자열을 반환합니다.

    min_size와 max_size가 같으면 해당 길이의 문자열을 반환합니다.
    """
    if max_size < min_size:
        raise ValueError(f"최대 길이가 최소 길이보다 작습니다: {min_size} > {max_size}")

    rng = rng or _default_rng()
    length = min_size if min_size == max_size else rng.randrange(min_size, max_size)
    return get_string(length, rng)


def get_string_in_range(
    count: int,
    start_char: str,
    end_char: str,
    rng: Optional[random.Random] = None
) -> str:
    """
    start_char부터 end_char 사이(코드값 기준, 양 끝 포함)의 영문자로 구성된 문자열을 반환합니다.

    Examples:
        >>> len(get_string_in_range(10, "B", "r"))
        10

    Raises:
        ValueError: 범위 안에 영문자가 없는 경우
    """
    _check_count(count)
    start, end = ord(start_char), ord(end_char)
    candidates = [chr(code) for code in range(start, end + 1) if chr(code) in ALPHAS]

    if not candidates:
        raise ValueError(f"{start_char}와 {end_char} 사이에 영문자가 없습니다.")

    rng = rng or _default_rng()
    return "".join(rng.choice(candidates) for _ in range(count))


def get_kor_string(count: int, rng: Optional[random.Random] = None) -> str:
    """지정한 길이의 랜덤 한글 음절 문자열을 반환합니다."""
    _check_count(count)
    rng = rng or _default_rng()
    return "".join(
        chr(KOREAN_SYLLABLE_START + rng.randrange(KOREAN_SYLLABLE_COUNT))
        for _ in range(count)
    )


def get_string_by_charset(count: int, charset: str, rng: Optional[random.Random] = None) -> str:
    """
    랜덤 영문 문자열을 지정한 문자셋으로 변환해 반환합니다.

    Raises:
        DigestError: 지원하지 않는 문자셋인 경우
    """
    return encode_charset(get_string(count, rng), charset)
