"""
파일 필터

파일명 와일드카드('*', '?')와 확장자 기준으로 경로를 선별하는 필터를 제공합니다.
필터는 경로를 받아 bool을 반환하는 callable입니다.
"""

import re
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Sequence, Union

PathLike = Union[str, Path]


@lru_cache(maxsize=256)
def _compile_wildcard(pattern: str, case_sensitive: bool) -> "re.Pattern[str]":
    regex = "".join(
        ".*" if ch == "*" else "." if ch == "?" else re.escape(ch)
        for ch in pattern
    )
    flags = re.DOTALL if case_sensitive else re.DOTALL | re.IGNORECASE
    return re.compile(regex, flags)


def wildcard_match(name: str, pattern: str, case_sensitive: bool = True) -> bool:
    """
    파일명이 와일드카드 패턴과 일치하는지 확인합니다.

    '*'는 0개 이상의 문자, '?'는 정확히 한 문자와 일치합니다.

    Args:
        name: 파일명
        pattern: 와일드카드 패턴
        case_sensitive: 대소문자 구분 여부

    Returns:
        bool: 전체가 일치하는 경우 True
    """
    if name is None or pattern is None:
        return name is None and pattern is None
    return _compile_wildcard(pattern, case_sensitive).fullmatch(name) is not None


def _as_tuple(values: Union[str, Iterable[str]], label: str) -> tuple:
    if values is None:
        raise ValueError(f"The {label} must not be null")
    if isinstance(values, str):
        return (values,)
    values = tuple(values)
    if any(value is None for value in values):
        raise ValueError(f"The {label} must not contain null")
    return values


class WildcardFileFilter:
    """파일명이 와일드카드 중 하나와 일치하면 허용하는 필터"""

    def __init__(self, wildcards: Union[str, Sequence[str]], case_sensitive: bool = True):
        self.wildcards = _as_tuple(wildcards, "wildcard")
        self.case_sensitive = case_sensitive

    def __call__(self, path: PathLike) -> bool:
        name = Path(path).name
        return any(wildcard_match(name, w, self.case_sensitive) for w in self.wildcards)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({','.join(self.wildcards)})"


class WildcardExcludeFileFilter(WildcardFileFilter):
    """파일명이 와일드카드 중 하나와 일치하면 제외하는 필터"""

    def __call__(self, path: PathLike) -> bool:
        return not super().__call__(path)


class SuffixFileFilter:
    """파일명이 지정한 접미어(확장자) 중 하나로 끝나면 허용하는 필터"""

    def __init__(self, suffixes: Union[str, Sequence[str]], case_sensitive: bool = True):
        self.suffixes = _as_tuple(suffixes, "suffix")
        self.case_sensitive = case_sensitive

    def __call__(self, path: PathLike) -> bool:
        name = Path(path).name
        if self.case_sensitive:
            return name.endswith(self.suffixes)
        return name.lower().endswith(tuple(s.lower() for s in self.suffixes))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({','.join(self.suffixes)})"
