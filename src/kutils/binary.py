"""
바이트 변환 유틸리티

16진수 문자열, 고정 길이 정수 인코딩과 바이트 배열 간의 변환 함수들을 제공합니다.
"""

import codecs
import re
from typing import Optional, Union

from .core.config import settings
from .core.exceptions import ByteConversionError


RADIX_16 = 16
RADIX_10 = 10
RADIX_8 = 8
UNSIGNED_8BIT_MAX = 0xFF

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")
_SIGNED_DECIMAL = re.compile(r"[+-]?[0-9]+")
_RADIX_DIGITS = {
    RADIX_16: re.compile(r"[0-9a-fA-F]+"),
    RADIX_10: re.compile(r"[0-9]+"),
    RADIX_8: re.compile(r"[0-7]+"),
}

BytesLike = Union[bytes, bytearray]


def bytes_equal(array1: Optional[BytesLike], array2: Optional[BytesLike]) -> bool:
    """
    두 바이트 배열이 같은지 비교합니다.

    Args:
        array1: 비교할 바이트 배열
        array2: 비교할 바이트 배열

    Returns:
        bool: 둘 다 None이거나 내용이 같은 경우 True
    """
    if array1 is array2:
        return True
    if array1 is None or array2 is None:
        return False
    return bytes(array1) == bytes(array2)


def hex_to_bytes(digits: Optional[str]) -> Optional[bytes]:
    """
    16진수 문자열을 바이트 배열로 변환합니다.

    Args:
        digits: 짝수 자릿수의 16진수 문자열

    Returns:
        Optional[bytes]: 변환된 바이트 배열 (입력이 None이면 None)

    Raises:
        ByteConversionError: 자릿수가 홀수이거나 16진수가 아닌 문자가 포함된 경우
    """
    if digits is None:
        return None

    if len(digits) % 2 == 1:
        raise ByteConversionError(
            f"{digits}의 자릿수는 짝수이어야 합니다.",
            details={"value": digits, "length": len(digits)}
        )

    if not _HEX_DIGITS.fullmatch(digits):
        raise ByteConversionError(
            f"16진수 문자열이 아닙니다: {digits}",
            details={"value": digits}
        )

    return bytes.fromhex(digits)


def digits_to_bytes(digits: Optional[str], radix: int) -> Optional[bytes]:
    """
    진법 문자열을 바이트 배열로 변환합니다.

    16진수는 2자리, 8진수와 10진수는 3자리 단위로 한 바이트를 표현합니다.

    Args:
        digits: 변환할 문자열
        radix: 진법 (16, 10, 8)

    Returns:
        Optional[bytes]: 변환된 바이트 배열 (입력이 None이면 None)

    Raises:
        ByteConversionError: 지원하지 않는 진법이거나 형식이 잘못된 경우
    """
    if digits is None:
        return None

    if radix not in (RADIX_16, RADIX_10, RADIX_8):
        raise ByteConversionError(
            f"지원하지 않는 진법입니다: {radix}",
            details={"radix": radix}
        )

    unit = 2 if radix == RADIX_16 else 3

    if len(digits) % unit != 0:
        raise ByteConversionError(
            f"{digits}의 자릿수는 {unit}의 배수이어야 합니다.",
            details={"value": digits, "radix": radix}
        )

    result = bytearray()
    for index in range(0, len(digits), unit):
        chunk = digits[index:index + unit]
        if not _RADIX_DIGITS[radix].fullmatch(chunk):
            raise ByteConversionError(
                f"{radix}진수로 해석할 수 없는 값입니다: {chunk}",
                details={"value": digits, "radix": radix}
            )
        value = int(chunk, radix)
        if value > UNSIGNED_8BIT_MAX:
            raise ByteConversionError(
                f"한 바이트 범위를 벗어난 값입니다: {chunk}",
                details={"value": digits, "radix": radix}
            )
        result.append(value)

    return bytes(result)


def byte_to_hex(value: int) -> str:
    """단일 바이트(부호 여부 무관)를 두 자리 16진수 문자열로 변환합니다."""
    return format(value & UNSIGNED_8BIT_MAX, "02x")


def bytes_to_hex(
    data: Optional[BytesLike],
    offset: int = 0,
    length: Optional[int] = None
) -> Optional[str]:
    """
    바이트 배열을 소문자 16진수 문자열로 변환합니다.

    Args:
        data: 변환할 바이트 배열
        offset: 시작 위치
        length: 변환할 길이 (None인 경우 끝까지)

    Returns:
        Optional[str]: 16진수 문자열 (입력이 None이면 None)
    """
    if data is None:
        return None

    end = len(data) if length is None else offset + length
    if offset < 0 or end > len(data):
        raise ByteConversionError(
            f"범위를 벗어났습니다: offset={offset}, length={length}",
            details={"offset": offset, "length": length, "size": len(data)}
        )
    return bytes(data[offset:end]).hex()


def to_pretty_hex(data: Union[BytesLike, str]) -> str:
    """
    바이트 배열 또는 16진수 문자열을 보기 좋게 포맷합니다.

    두 자리씩 공백으로 구분하고, 8바이트마다 공백을 하나 더,
    16바이트마다 줄바꿈(CRLF)을 추가합니다.
    """
    hex_str = data if isinstance(data, str) else bytes_to_hex(data)

    parts = []
    for count, index in enumerate(range(0, len(hex_str), 2), start=1):
        parts.append(hex_str[index:index + 2] + " ")
        if count % 16 == 0:
            parts.append("\r\n")
        elif count % 8 == 0:
            parts.append(" ")

    return "".join(parts)


def _check_charset(charset: str) -> str:
    try:
        return codecs.lookup(charset).name
    except LookupError as e:
        raise ByteConversionError(
            f"지원하지 않는 문자셋입니다: {charset}",
            details={"charset": charset}
        ) from e


def to_bytes(text: str, charset: Optional[str] = None) -> bytes:
    """
    문자열을 지정한 문자셋의 바이트 배열로 변환합니다.

    Raises:
        ByteConversionError: 문자셋을 지원하지 않거나 인코딩할 수 없는 경우
    """
    charset = _check_charset(charset or settings.default_encoding)
    try:
        return text.encode(charset)
    except UnicodeEncodeError as e:
        raise ByteConversionError(str(e), details={"charset": charset}) from e


def bytes_to_str(data: BytesLike, charset: Optional[str] = None) -> str:
    """
    바이트 배열을 지정한 문자셋의 문자열로 변환합니다.

    Raises:
        ByteConversionError: 문자셋을 지원하지 않거나 디코딩할 수 없는 경우
    """
    charset = _check_charset(charset or settings.default_encoding)
    try:
        return bytes(data).decode(charset)
    except UnicodeDecodeError as e:
        raise ByteConversionError(str(e), details={"charset": charset}) from e


def parse_byte(value: str) -> int:
    """
    문자열을 부호 있는 바이트 값(-128 ~ 127)으로 변환합니다.

    Raises:
        ByteConversionError: 숫자가 아니거나 범위를 벗어난 경우
    """
    if not isinstance(value, str) or not _SIGNED_DECIMAL.fullmatch(value):
        raise ByteConversionError(
            f'For input string: "{value}"',
            details={"value": str(value)}
        )

    number = int(value)
    if not -128 <= number <= 127:
        raise ByteConversionError(
            f'Value out of range. Value:"{value}" Radix:10',
            details={"value": str(value)}
        )
    return number


def write_int(value: int, dest: bytearray, dest_pos: int = 0) -> None:
    """32비트 정수를 빅엔디언 4바이트로 dest[dest_pos:]에 기록합니다."""
    dest[dest_pos:dest_pos + 4] = (value & 0xFFFFFFFF).to_bytes(4, "big")


def int_to_bytes(value: int) -> bytes:
    """32비트 정수를 빅엔디언 4바이트 배열로 변환합니다."""
    dest = bytearray(4)
    write_int(value, dest)
    return bytes(dest)


def write_long(value: int, dest: bytearray, dest_pos: int = 0) -> None:
    """64비트 정수를 빅엔디언 8바이트로 dest[dest_pos:]에 기록합니다."""
    dest[dest_pos:dest_pos + 8] = (value & 0xFFFFFFFFFFFFFFFF).to_bytes(8, "big")


def long_to_bytes(value: int) -> bytes:
    """64비트 정수를 빅엔디언 8바이트 배열로 변환합니다."""
    dest = bytearray(8)
    write_long(value, dest)
    return bytes(dest)


def _read_signed(src: BytesLike, src_pos: int, size: int) -> int:
    chunk = bytes(src[src_pos:src_pos + size])
    if len(chunk) != size:
        raise ByteConversionError(
            f"{size}바이트가 필요하지만 {len(chunk)}바이트만 남아 있습니다.",
            details={"position": src_pos, "size": len(src)}
        )
    return int.from_bytes(chunk, "big", signed=True)


def bytes_to_int(src: BytesLike, src_pos: int = 0) -> int:
    """빅엔디언 4바이트를 부호 있는 32비트 정수로 변환합니다."""
    return _read_signed(src, src_pos, 4)


def bytes_to_long(src: BytesLike, src_pos: int = 0) -> int:
    """빅엔디언 8바이트를 부호 있는 64비트 정수로 변환합니다."""
    return _read_signed(src, src_pos, 8)


def unsigned_byte(value: int) -> int:
    """바이트 값을 부호 없는 정수(0 ~ 255)로 변환합니다."""
    return value & UNSIGNED_8BIT_MAX
