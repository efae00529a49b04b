"""
파일명/경로 문자열 유틸리티

파일 시스템에 접근하지 않고 경로 문자열만으로 접두어, 경로, 이름, 확장자를 분리합니다.
'/'와 '\\' 구분자를 모두 인식합니다.
"""

import os
from typing import Optional

UNIX_SEPARATOR = "/"
WINDOWS_SEPARATOR = "\\"
EXTENSION_SEPARATOR = "."

_SEPARATORS = (UNIX_SEPARATOR, WINDOWS_SEPARATOR)
_URI_PREFIXES = ("file://", "sftp://", "ftp://", "smb://")


def _last_separator(filename: str) -> int:
    return max(filename.rfind(UNIX_SEPARATOR), filename.rfind(WINDOWS_SEPARATOR))


def _first_separator(filename: str, start: int = 0) -> int:
    positions = [pos for pos in (filename.find(sep, start) for sep in _SEPARATORS) if pos >= 0]
    return min(positions) if positions else -1


def _extension_index(filename: str) -> int:
    dot = filename.rfind(EXTENSION_SEPARATOR)
    return -1 if _last_separator(filename) > dot else dot


def get_prefix(filename: Optional[str]) -> Optional[str]:
    """
    경로의 접두어를 반환합니다.

    Examples:
        >>> get_prefix("C:\\\\a\\\\b\\\\c.txt")
        'C:\\\\'
        >>> get_prefix("/a/b/c.txt")
        '/'
        >>> get_prefix("~user/a/b")
        '~user/'
        >>> get_prefix("a/b/c.txt")
        ''
    """
    if filename is None:
        return None
    if not filename:
        return ""

    if filename.startswith("~"):
        sep = _first_separator(filename)
        return filename + UNIX_SEPARATOR if sep < 0 else filename[:sep + 1]

    if len(filename) >= 2 and filename[1] == ":" and filename[0].isalpha():
        if len(filename) > 2 and filename[2] in _SEPARATORS:
            return filename[:3]
        return filename[:2]

    if filename[:2] in ("//", "\\\\"):
        sep = _first_separator(filename, 2)
        return filename if sep < 0 else filename[:sep + 1]

    if filename[0] in _SEPARATORS:
        return filename[0]

    return ""


def get_path(filename: Optional[str]) -> Optional[str]:
    """접두어를 제외하고 마지막 구분자까지 포함한 경로를 반환합니다 ("C:\\a\\b\\c.txt" -> "a\\b\\")."""
    if filename is None:
        return None
    prefix_len = len(get_prefix(filename))
    end = _last_separator(filename)
    if end < prefix_len:
        return ""
    return filename[prefix_len:end + 1]


def get_path_no_end_separator(filename: Optional[str]) -> Optional[str]:
    """접두어와 마지막 구분자를 제외한 경로를 반환합니다 ("a/b/c/" -> "a/b/c")."""
    if filename is None:
        return None
    prefix_len = len(get_prefix(filename))
    end = _last_separator(filename)
    if end < prefix_len:
        return ""
    return filename[prefix_len:end]


def get_full_path(filename: Optional[str]) -> Optional[str]:
    """접두어를 포함하고 마지막 구분자까지 포함한 경로를 반환합니다."""
    if filename is None:
        return None
    prefix = get_prefix(filename)
    if len(prefix) >= len(filename):
        return prefix
    end = _last_separator(filename)
    if end < 0:
        return prefix
    return filename[:end + 1]


def get_full_path_no_end_separator(filename: Optional[str]) -> Optional[str]:
    """접두어를 포함하고 마지막 구분자를 제외한 경로를 반환합니다."""
    if filename is None:
        return None
    prefix = get_prefix(filename)
    if len(prefix) >= len(filename):
        return prefix
    end = _last_separator(filename)
    if end < 0:
        return prefix
    return filename[:max(end, len(prefix))]


def get_name(filename: Optional[str]) -> Optional[str]:
    """마지막 구분자 이후의 파일명을 반환합니다."""
    if filename is None:
        return None
    return filename[_last_separator(filename) + 1:]


def get_base_name(filename: Optional[str]) -> Optional[str]:
    """확장자를 제외한 파일명을 반환합니다."""
    return remove_extension(get_name(filename))


def get_extension(filename: Optional[str]) -> Optional[str]:
    """점을 제외한 확장자를 반환합니다. 확장자가 없으면 빈 문자열을 반환합니다."""
    if filename is None:
        return None
    index = _extension_index(filename)
    return "" if index < 0 else filename[index + 1:]


def remove_extension(filename: Optional[str]) -> Optional[str]:
    """확장자를 제거한 경로를 반환합니다."""
    if filename is None:
        return None
    index = _extension_index(filename)
    return filename if index < 0 else filename[:index]


def get_path_without_prefix(uri: str) -> str:
    """
    URI에서 프로토콜 부분을 제거한 경로를 반환합니다.

    file://, sftp://, ftp://, smb:// 만 인식하며, 그 외에는 빈 문자열을 반환합니다.

    Examples:
        >>> get_path_without_prefix("ftp://host/a.txt")
        'host/a.txt'
    """
    for prefix in _URI_PREFIXES:
        if uri.startswith(prefix):
            return uri[len(prefix):]
    return ""


def separators_to_unix(path: Optional[str]) -> Optional[str]:
    """모든 구분자를 '/'로 치환합니다."""
    if path is None:
        return None
    return path.replace(WINDOWS_SEPARATOR, UNIX_SEPARATOR)


def separators_to_windows(path: Optional[str]) -> Optional[str]:
    """모든 구분자를 '\\'로 치환합니다."""
    if path is None:
        return None
    return path.replace(UNIX_SEPARATOR, WINDOWS_SEPARATOR)


def separators_to_system(path: Optional[str]) -> Optional[str]:
    """모든 구분자를 OS 구분자로 치환합니다."""
    if os.sep == WINDOWS_SEPARATOR:
        return separators_to_windows(path)
    return separators_to_unix(path)


def append_file_separator(path: str) -> str:
    """경로가 OS 구분자로 끝나지 않으면 구분자를 붙입니다."""
    return path if path.endswith(os.sep) else path + os.sep


def append_windows_file_separator(path: str) -> str:
    """구분자를 '\\'로 치환하고 끝에 '\\'를 보장합니다."""
    path = separators_to_windows(path)
    return path if path.endswith(WINDOWS_SEPARATOR) else path + WINDOWS_SEPARATOR


def append_unix_file_separator(path: str) -> str:
    """구분자를 '/'로 치환하고 끝에 '/'를 보장합니다."""
    path = separators_to_unix(path)
    return path if path.endswith(UNIX_SEPARATOR) else path + UNIX_SEPARATOR
