"""
네트워크 정보 유틸리티

로컬 호스트의 IP 주소, MAC 주소, 호스트명을 조회합니다.
"""

import socket

import psutil

from .core.exceptions import NetworkLookupError
from .core.logging import get_logger, log_error

logger = get_logger(__name__)


def get_hostname() -> str:
    """
    로컬 호스트명을 반환합니다.

    Raises:
        NetworkLookupError: 조회에 실패한 경우
    """
    try:
        return socket.gethostname()
    except OSError as e:
        raise NetworkLookupError(
            f"호스트명 조회에 실패했습니다: {e}",
            details={"original_error": str(e)}
        ) from e


def get_local_ip() -> str:
    """
    로컬 호스트명에 해당하는 IPv4 주소를 반환합니다.

    Raises:
        NetworkLookupError: 호스트명을 주소로 변환할 수 없는 경우
    """
    hostname = get_hostname()
    try:
        return socket.gethostbyname(hostname)
    except OSError as e:
        logger.warning("로컬 IP 조회 실패", **log_error(e, {"hostname": hostname}))
        raise NetworkLookupError(
            f"로컬 IP 조회에 실패했습니다: {e}",
            details={"hostname": hostname, "original_error": str(e)}
        ) from e


def get_mac_address() -> str:
    """
    로컬 IP가 할당된 네트워크 인터페이스의 MAC 주소를 반환합니다.

    Returns:
        str: 'AA-BB-CC-DD-EE-FF' 형식의 MAC 주소

    Raises:
        NetworkLookupError: 해당 인터페이스 또는 MAC 주소를 찾을 수 없는 경우
    """
    local_ip = get_local_ip()

    try:
        interfaces = psutil.net_if_addrs()
    except OSError as e:
        raise NetworkLookupError(
            f"네트워크 인터페이스 조회에 실패했습니다: {e}",
            details={"original_error": str(e)}
        ) from e

    for name, addresses in interfaces.items():
        if not any(addr.family == socket.AF_INET and addr.address == local_ip for addr in addresses):
            continue

        for addr in addresses:
            if addr.family == psutil.AF_LINK and addr.address:
                return addr.address.upper().replace(":", "-")

        raise NetworkLookupError(
            f"{name} 인터페이스에 MAC 주소가 없습니다.",
            details={"interface": name, "ip": local_ip}
        )

    raise NetworkLookupError(
        f"{local_ip} 주소를 가진 네트워크 인터페이스가 없습니다.",
        details={"ip": local_ip}
    )
