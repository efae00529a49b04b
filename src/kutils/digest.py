"""
인코딩/다이제스트 유틸리티

Base64 인코딩, 문자셋 변환, 패스워드 해싱 및 파일 해싱 함수들을 제공합니다.
"""

import base64
import binascii
import hashlib
import hmac
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Optional, Union

from .core.config import settings
from .core.exceptions import DigestError, handle_os_error, path_not_found


class HashAlgorithm(Enum):
    """패스워드 해싱 알고리즘 (결과 길이 - MD5: 32자, SHA-1: 40자, SHA-256: 64자)"""
    MD5 = "md5"
    SHA_1 = "sha1"
    SHA_256 = "sha256"


_CHUNK_SIZE = 8192

_BASE64_ALPHABET = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
)
_URL_SAFE_TO_STANDARD = bytes.maketrans(b"-_", b"+/")

StrOrBytes = Union[str, bytes, bytearray]


def _as_bytes(data: StrOrBytes, encoding: Optional[str] = None) -> bytes:
    if isinstance(data, str):
        return data.encode(encoding or settings.default_encoding)
    return bytes(data)


def encode_charset(text: str, charset: str) -> str:
    """
    문자열을 지정한 문자셋으로 인코딩 후 다시 디코딩합니다.

    Args:
        text: 변환할 문자열
        charset: 문자셋 이름

    Returns:
        str: 변환된 문자열

    Raises:
        DigestError: 지원하지 않는 문자셋이거나 인코딩할 수 없는 경우
    """
    try:
        return text.encode(charset).decode(charset)
    except (LookupError, UnicodeError) as e:
        raise DigestError(str(e), details={"charset": charset}) from e


def encode_base64_bytes(data: StrOrBytes) -> bytes:
    """데이터를 Base64로 인코딩한 바이트를 반환합니다."""
    return base64.b64encode(_as_bytes(data))


def encode_base64_string(data: StrOrBytes) -> str:
    """데이터를 Base64로 인코딩한 문자열을 반환합니다."""
    return encode_base64_bytes(data).decode("ascii")


def decode_base64_bytes(data: StrOrBytes) -> bytes:
    """
    Base64 데이터를 디코딩합니다.

    URL-safe 알파벳('-', '_')도 받아들입니다. Base64 알파벳이 아닌 문자는
    무시하고, 누락된 '=' 패딩은 보충합니다.

    Raises:
        DigestError: 디코딩할 수 없는 경우
    """
    raw = _as_bytes(data).translate(_URL_SAFE_TO_STANDARD)
    cleaned = bytes(ch for ch in raw if ch in _BASE64_ALPHABET)
    cleaned += b"=" * (-len(cleaned) % 4)

    try:
        return base64.b64decode(cleaned)
    except binascii.Error as e:
        raise DigestError(
            f"Base64 디코딩에 실패했습니다: {e}",
            details={"original_error": str(e)}
        ) from e


def decode_base64_string(data: StrOrBytes, encoding: Optional[str] = None) -> str:
    """
    Base64 데이터를 디코딩한 문자열을 반환합니다.

    Raises:
        DigestError: 디코딩할 수 없거나 문자열로 변환할 수 없는 경우
    """
    encoding = encoding or settings.default_encoding
    try:
        return decode_base64_bytes(data).decode(encoding)
    except UnicodeDecodeError as e:
        raise DigestError(str(e), details={"encoding": encoding}) from e


def encode_password(
    password: str,
    algorithm: HashAlgorithm = HashAlgorithm.SHA_256,
    encoding: Optional[str] = None
) -> str:
    """
    패스워드를 해싱합니다.

    Args:
        password: 해싱할 패스워드
        algorithm: 해싱 알고리즘 (기본값: SHA-256)
        encoding: 패스워드 인코딩

    Returns:
        str: 소문자 16진수 해시값
    """
    hasher = hashlib.new(HashAlgorithm(algorithm).value)
    hasher.update(_as_bytes(password, encoding))
    return hasher.hexdigest()


def verify_password(
    password: str,
    expected_hash: str,
    algorithm: HashAlgorithm = HashAlgorithm.SHA_256
) -> bool:
    """
    패스워드의 해시값을 검증합니다.

    Returns:
        bool: 해시값이 일치하는 경우 True
    """
    actual_hash = encode_password(password, algorithm)
    return hmac.compare_digest(actual_hash, expected_hash.lower())


def hash_stream(stream: BinaryIO, algorithm: HashAlgorithm = HashAlgorithm.SHA_256) -> str:
    """
    바이너리 스트림을 처음부터 해싱합니다. 스트림 위치는 원래대로 복원합니다.

    Args:
        stream: seek 가능한 바이너리 스트림
        algorithm: 해싱 알고리즘

    Returns:
        str: 16진수 해시값
    """
    hasher = hashlib.new(HashAlgorithm(algorithm).value)

    current_position = stream.tell()
    stream.seek(0)

    for chunk in iter(lambda: stream.read(_CHUNK_SIZE), b""):
        hasher.update(chunk)

    stream.seek(current_position)
    return hasher.hexdigest()


def hash_file(file_path: Union[str, Path], algorithm: HashAlgorithm = HashAlgorithm.SHA_256) -> str:
    """
    파일을 청크 단위로 해싱합니다.

    Args:
        file_path: 파일 경로
        algorithm: 해싱 알고리즘

    Returns:
        str: 16진수 해시값

    Raises:
        PathNotFoundError: 파일이 존재하지 않는 경우
        FileAccessError: 파일을 읽을 수 없는 경우
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise path_not_found("hash_file", file_path)

    try:
        with open(file_path, "rb") as f:
            return hash_stream(f, algorithm)
    except OSError as e:
        raise handle_os_error("hash_file", file_path, e) from e
