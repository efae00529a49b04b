"""
대칭키 암복호화 유틸리티

Triple-DES(DESede) 알고리즘으로 데이터를 암복호화합니다.

주의: 기존 암호문과의 호환을 위해 ECB 모드와 PKCS#7(PKCS5) 패딩을 사용합니다.
ECB 모드는 같은 평문 블록이 같은 암호문 블록이 되므로 새 데이터에는 권장하지 않습니다.
"""

import os
from typing import Optional

from cryptography.hazmat.decrepit.ciphers.algorithms import TripleDES
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, modes

from .binary import bytes_to_hex, hex_to_bytes
from .core.config import settings
from .core.exceptions import BaseUtilsError, CryptoError
from .core.logging import get_logger, log_error

logger = get_logger(__name__)

DES_KEY_SIZE = 24
DES_BLOCK_BITS = 64


def _with_odd_parity(key: bytes) -> bytes:
    adjusted = bytearray()
    for value in key:
        high = value & 0xFE
        # 상위 7비트의 1의 개수가 짝수이면 최하위 비트를 1로 설정
        adjusted.append(high | (bin(high).count("1") % 2 == 0))
    return bytes(adjusted)


def generate_hex_des_key() -> str:
    """
    홀수 패리티를 갖는 24바이트 Triple-DES 키를 생성합니다.

    Returns:
        str: 48자리 소문자 16진수 키 문자열
    """
    return bytes_to_hex(_with_odd_parity(os.urandom(DES_KEY_SIZE)))


def _load_key(key_hex: str) -> bytes:
    try:
        key = hex_to_bytes(key_hex)
    except BaseUtilsError as e:
        raise CryptoError(
            f"키가 16진수 문자열이 아닙니다: {e.message}",
            details={"original_error": e.message}
        ) from e

    if key is None or len(key) != DES_KEY_SIZE:
        raise CryptoError(
            f"Triple-DES 키는 {DES_KEY_SIZE}바이트이어야 합니다.",
            details={"key_length": 0 if key is None else len(key)}
        )
    return key


def _cipher(key_hex: str) -> Cipher:
    return Cipher(TripleDES(_load_key(key_hex)), modes.ECB())


def encrypt_by_des(key_hex: str, data: bytes) -> bytes:
    """
    데이터를 Triple-DES로 암호화합니다.

    Args:
        key_hex: 48자리 16진수 키
        data: 평문 바이트

    Returns:
        bytes: 암호문 바이트

    Raises:
        CryptoError: 키가 잘못된 경우
    """
    encryptor = _cipher(key_hex).encryptor()
    padder = padding.PKCS7(DES_BLOCK_BITS).padder()
    padded = padder.update(bytes(data)) + padder.finalize()
    return encryptor.update(padded) + encryptor.finalize()


def decrypt_by_des(key_hex: str, data: bytes) -> bytes:
    """
    Triple-DES 암호문을 복호화합니다.

    Args:
        key_hex: 48자리 16진수 키
        data: 암호문 바이트

    Returns:
        bytes: 평문 바이트

    Raises:
        CryptoError: 키가 잘못되었거나 블록 크기, 패딩이 맞지 않는 경우
    """
    decryptor = _cipher(key_hex).decryptor()
    unpadder = padding.PKCS7(DES_BLOCK_BITS).unpadder()
    try:
        padded = decryptor.update(bytes(data)) + decryptor.finalize()
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError as e:
        logger.warning("Triple-DES 복호화 실패", **log_error(e, {"data_length": len(data)}))
        raise CryptoError(
            f"복호화에 실패했습니다: {e}",
            details={"original_error": str(e)}
        ) from e


def encrypt_string_by_des(key_hex: str, text: str, encoding: Optional[str] = None) -> str:
    """
    문자열을 암호화해 16진수 암호문으로 반환합니다.

    Raises:
        CryptoError: 키가 올바르지 않거나 문자열을 인코딩할 수 없는 경우
    """
    encoding = encoding or settings.default_encoding
    try:
        data = text.encode(encoding)
    except (LookupError, UnicodeEncodeError) as e:
        raise CryptoError(str(e), details={"encoding": encoding}) from e

    return bytes_to_hex(encrypt_by_des(key_hex, data))


def decrypt_string_by_des(key_hex: str, hex_text: str, encoding: Optional[str] = None) -> str:
    """
    16진수 암호문을 복호화해 문자열로 반환합니다.

    Raises:
        CryptoError: 암호문이 16진수가 아니거나 복호화에 실패한 경우
    """
    encoding = encoding or settings.default_encoding
    try:
        data = hex_to_bytes(hex_text)
    except BaseUtilsError as e:
        raise CryptoError(
            f"암호문이 16진수 문자열이 아닙니다: {e.message}",
            details={"original_error": e.message}
        ) from e

    if data is None:
        raise CryptoError("암호문이 없습니다.")

    plain = decrypt_by_des(key_hex, data)
    try:
        return plain.decode(encoding)
    except (LookupError, UnicodeDecodeError) as e:
        raise CryptoError(str(e), details={"encoding": encoding}) from e
