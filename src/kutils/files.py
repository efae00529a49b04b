"""
파일/디렉토리 유틸리티

파일과 디렉토리의 생성, 복사, 이동, 삭제, 목록 조회 함수들을 제공합니다.

변경 작업(복사, 이동, 삭제 등)은 예외를 발생시키지 않고 OperationResult를 반환하며,
값을 반환하는 작업(목록, 열기, 읽기)은 실패 시 FileOperationError 계열 예외를 발생시킵니다.
"""

import os
import shutil
import tempfile
from pathlib import Path
from typing import BinaryIO, Callable, Iterator, List, Optional, Sequence, TextIO, Union

from .core.config import settings
from .core.exceptions import (
    BaseUtilsError,
    FileAccessError,
    UnsupportedCopyModeError,
    handle_os_error,
    nested_path,
    not_a_directory,
    not_a_file,
    path_not_found,
)
from .core.logging import get_logger, log_operation
from .core.result import OperationResult
from .filename import get_extension, remove_extension
from .filters import SuffixFileFilter, WildcardExcludeFileFilter, WildcardFileFilter

logger = get_logger(__name__)

PathLike = Union[str, Path]
PathFilter = Callable[[Path], bool]

ONE_KB = 1024
ONE_MB = ONE_KB * ONE_KB
ONE_GB = ONE_KB * ONE_MB
ONE_TB = ONE_KB * ONE_GB
ONE_PB = ONE_KB * ONE_TB
ONE_EB = ONE_KB * ONE_PB

COPY_MODE_FILE = "file"
COPY_MODE_DIR = "dir"

_DISPLAY_UNITS = (
    (ONE_EB, "EB"),
    (ONE_PB, "PB"),
    (ONE_TB, "TB"),
    (ONE_GB, "GB"),
    (ONE_MB, "MB"),
    (ONE_KB, "KB"),
)


# 내부 헬퍼

def _fail(operation: str, target: PathLike, error: BaseUtilsError) -> OperationResult:
    logger.warning(
        "파일 작업 실패",
        **log_operation(operation, target, error=error.to_dict())
    )
    return OperationResult.failure(operation, target, error)


def _ok(operation: str, target: PathLike) -> OperationResult:
    logger.debug("파일 작업 완료", **log_operation(operation, target))
    return OperationResult.success(operation, target)


def _chain(operation: str, target: PathLike, inner: OperationResult) -> OperationResult:
    """하위 작업의 실패를 상위 작업의 실패로 전달"""
    return OperationResult.failure(operation, target, inner.error)


def _prepare_dest_dir(operation: str, dest_dir: Path) -> Optional[BaseUtilsError]:
    """대상 디렉토리가 없으면 생성하고, 디렉토리가 아니면 오류를 반환"""
    if not dest_dir.exists():
        created = create_dir(dest_dir)
        if not created:
            return created.error

    if not dest_dir.is_dir():
        return not_a_directory(operation, dest_dir)

    return None


def _check_src_dir(operation: str, src_dir: Path) -> Optional[BaseUtilsError]:
    if not src_dir.exists():
        return path_not_found(operation, src_dir)
    if not src_dir.is_dir():
        return not_a_directory(operation, src_dir)
    return None


def _check_src_file(operation: str, src_file: Path) -> Optional[BaseUtilsError]:
    if not src_file.exists():
        return path_not_found(operation, src_file)
    if not src_file.is_file():
        return not_a_file(operation, src_file)
    return None


def _copy_one(src_file: Path, dest_file: Path, preserve_file_date: bool) -> None:
    if preserve_file_date:
        shutil.copy2(src_file, dest_file)
    else:
        shutil.copyfile(src_file, dest_file)


def _copy_tree(
    src_dir: Path,
    dest_dir: Path,
    accept: PathFilter,
    preserve_file_date: bool,
    excluded: Optional[Path] = None
) -> None:
    # 대상 디렉토리가 원본 하위에 있으면 재귀 복사에서 제외
    if excluded is None:
        excluded = dest_dir.resolve()
    dest_dir.mkdir(parents=True, exist_ok=True)

    for child in sorted(src_dir.iterdir()):
        if child.resolve() == excluded or not accept(child):
            continue

        target = dest_dir / child.name
        if child.is_dir():
            _copy_tree(child, target, accept, preserve_file_date, excluded)
        else:
            _copy_one(child, target, preserve_file_date)

    if preserve_file_date:
        shutil.copystat(src_dir, dest_dir)


def _accept_all(path: Path) -> bool:
    return True


# 크기 표시

def byte_count_to_display_size(size: Union[int, PathLike]) -> str:
    """
    바이트 크기를 EB, PB, TB, GB, MB, KB, bytes 단위의 문자열로 변환합니다.

    소수점 이하는 버립니다 (예: 1536 -> "1 KB").

    Args:
        size: 바이트 크기 또는 크기를 측정할 파일 경로

    Returns:
        str: 단위가 붙은 크기 문자열

    Raises:
        PathNotFoundError: 경로가 존재하지 않는 경우
    """
    if not isinstance(size, int):
        path = Path(size)
        if not path.exists():
            raise path_not_found("byte_count_to_display_size", path)
        size = path.stat().st_size

    for unit_size, unit_name in _DISPLAY_UNITS:
        if size // unit_size > 0:
            return f"{size // unit_size} {unit_name}"

    return f"{size} bytes"


# 디렉토리 생성/삭제

def create_dir(dir_path: PathLike) -> OperationResult:
    """
    상위 디렉토리를 포함해 디렉토리를 생성합니다. 이미 존재하면 성공입니다.
    """
    operation = "create_dir"
    dir_path = Path(dir_path)

    try:
        dir_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        return _fail(operation, dir_path, handle_os_error(operation, dir_path, e))

    return _ok(operation, dir_path)


def clean_dir(dir_path: PathLike) -> OperationResult:
    """
    디렉토리 내의 파일과 하위 디렉토리를 삭제합니다. 디렉토리 자체는 남겨둡니다.
    """
    operation = "clean_dir"
    dir_path = Path(dir_path)

    error = _check_src_dir(operation, dir_path)
    if error:
        return _fail(operation, error.details.get("target"), error)

    try:
        for child in dir_path.iterdir():
            if child.is_dir() and not child.is_symlink():
                shutil.rmtree(child)
            else:
                child.unlink()
    except OSError as e:
        return _fail(operation, dir_path, handle_os_error(operation, dir_path, e))

    return _ok(operation, dir_path)


def delete_dir(target_dir: PathLike) -> OperationResult:
    """디렉토리와 그 내용을 모두 삭제합니다."""
    operation = "delete_dir"
    target_dir = Path(target_dir)

    error = _check_src_dir(operation, target_dir)
    if error:
        return _fail(operation, error.details.get("target"), error)

    try:
        shutil.rmtree(target_dir)
    except OSError as e:
        return _fail(operation, target_dir, handle_os_error(operation, target_dir, e))

    return _ok(operation, target_dir)


def delete_file(target_file: PathLike) -> OperationResult:
    """파일을 삭제합니다."""
    operation = "delete_file"
    target_file = Path(target_file)

    error = _check_src_file(operation, target_file)
    if error:
        return _fail(operation, error.details.get("target"), error)

    try:
        target_file.unlink()
    except OSError as e:
        return _fail(operation, target_file, handle_os_error(operation, target_file, e))

    return _ok(operation, target_file)


# 복사

def copy_dir(
    src_dir: PathLike,
    dest_dir: PathLike,
    file_or_dir: Optional[str] = None,
    preserve_file_date: bool = True
) -> OperationResult:
    """
    원본 디렉토리의 내용을 대상 디렉토리로 복사합니다.

    Args:
        src_dir: 원본 디렉토리
        dest_dir: 대상 디렉토리 (없으면 생성)
        file_or_dir: 복사 모드
            - None 또는 "": 전체 복사
            - "file": 원본 바로 아래의 파일만 복사
            - "dir": 하위 디렉토리 구조만 복사 (파일 제외)
        preserve_file_date: 최종 수정일 유지 여부

    Returns:
        OperationResult: 작업 결과
    """
    operation = "copy_dir"
    src_dir, dest_dir = Path(src_dir), Path(dest_dir)

    error = _check_src_dir(operation, src_dir) or _prepare_dest_dir(operation, dest_dir)
    if error:
        return _fail(operation, error.details.get("target"), error)

    mode = (file_or_dir or "").lower()
    if not mode:
        accept = _accept_all
    elif mode == COPY_MODE_FILE:
        accept = Path.is_file
    elif mode == COPY_MODE_DIR:
        accept = Path.is_dir
    else:
        error = UnsupportedCopyModeError(
            f"{file_or_dir}은 지원하지 않는 타입입니다.",
            details={"operation": operation, "file_or_dir": file_or_dir}
        )
        return _fail(operation, src_dir, error)

    try:
        _copy_tree(src_dir, dest_dir, accept, preserve_file_date)
    except OSError as e:
        return _fail(operation, src_dir, handle_os_error(operation, src_dir, e))

    return _ok(operation, src_dir)


def copy_dir_after_check_file_ext(
    src_dir: PathLike,
    dest_dir: PathLike,
    *ext_list: str,
    preserve_file_date: bool = True
) -> OperationResult:
    """
    확장자(대소문자 무시)가 일치하는 파일만 디렉토리 구조와 함께 복사합니다.

    Examples:
        >>> copy_dir_after_check_file_ext("/data/in", "/data/out", "txt", "csv")
    """
    operation = "copy_dir_after_check_file_ext"
    src_dir, dest_dir = Path(src_dir), Path(dest_dir)

    error = _check_src_dir(operation, src_dir) or _prepare_dest_dir(operation, dest_dir)
    if error:
        return _fail(operation, error.details.get("target"), error)

    suffix_filter = SuffixFileFilter(list(ext_list), case_sensitive=False)

    try:
        _copy_tree(
            src_dir, dest_dir,
            lambda path: path.is_dir() or suffix_filter(path),
            preserve_file_date
        )
    except OSError as e:
        return _fail(operation, src_dir, handle_os_error(operation, src_dir, e))

    return _ok(operation, src_dir)


def copy_dir_to_dir(src_dir: PathLike, dest_dir: PathLike, preserve_file_date: bool = True) -> OperationResult:
    """원본 디렉토리를 대상 디렉토리의 하위(dest_dir/원본명)로 복사합니다."""
    operation = "copy_dir_to_dir"
    src_dir, dest_dir = Path(src_dir), Path(dest_dir)

    error = _check_src_dir(operation, src_dir) or _prepare_dest_dir(operation, dest_dir)
    if error:
        return _fail(operation, error.details.get("target"), error)

    copied = copy_dir(src_dir, dest_dir / src_dir.name, preserve_file_date=preserve_file_date)
    if not copied:
        return _chain(operation, src_dir, copied)

    return _ok(operation, src_dir)


def copy_file(src_file: PathLike, dest_file: PathLike, preserve_file_date: bool = True) -> OperationResult:
    """
    파일을 복사합니다. 대상 파일이 있으면 덮어씁니다.

    원본과 대상이 같은 파일이면 아무 것도 하지 않고 성공을 반환합니다.
    """
    operation = "copy_file"
    src_file, dest_file = Path(src_file), Path(dest_file)

    error = _check_src_file(operation, src_file)
    if error:
        return _fail(operation, error.details.get("target"), error)

    if dest_file.exists() and os.path.samefile(src_file, dest_file):
        return _ok(operation, src_file)

    if dest_file.is_dir():
        return _fail(operation, dest_file, not_a_file(operation, dest_file))

    try:
        dest_file.parent.mkdir(parents=True, exist_ok=True)
        _copy_one(src_file, dest_file, preserve_file_date)
    except OSError as e:
        return _fail(operation, src_file, handle_os_error(operation, src_file, e))

    return _ok(operation, src_file)


def copy_file_to_dir(src_file: PathLike, dest_dir: PathLike, preserve_file_date: bool = True) -> OperationResult:
    """파일을 대상 디렉토리 아래로 같은 이름으로 복사합니다."""
    operation = "copy_file_to_dir"
    src_file, dest_dir = Path(src_file), Path(dest_dir)

    error = _check_src_file(operation, src_file) or _prepare_dest_dir(operation, dest_dir)
    if error:
        return _fail(operation, error.details.get("target"), error)

    copied = copy_file(src_file, dest_dir / src_file.name, preserve_file_date)
    if not copied:
        return _chain(operation, src_file, copied)

    return _ok(operation, src_file)


# 이동

def move_dir(src_dir: PathLike, dest_dir: PathLike, preserve_file_date: bool = True) -> OperationResult:
    """
    디렉토리를 이동합니다. 대상 디렉토리가 이미 있으면 삭제 후 이동합니다.

    원본과 대상이 같은 디렉토리면 아무 것도 하지 않고 성공을 반환하며,
    대상이 원본의 하위 경로면 실패를 반환합니다.
    """
    operation = "move_dir"
    src_dir, dest_dir = Path(src_dir), Path(dest_dir)

    error = _check_src_dir(operation, src_dir)
    if error:
        return _fail(operation, error.details.get("target"), error)

    src_real, dest_real = src_dir.resolve(), dest_dir.resolve()
    if src_real == dest_real:
        return _ok(operation, src_dir)
    if src_real in dest_real.parents:
        return _fail(operation, dest_dir, nested_path(operation, src_dir, dest_dir))

    if dest_dir.exists():
        deleted = delete_dir(dest_dir)
        if not deleted:
            return _chain(operation, dest_dir, deleted)

    copied = copy_dir(src_dir, dest_dir, preserve_file_date=preserve_file_date)
    if not copied:
        return _chain(operation, src_dir, copied)

    deleted = delete_dir(src_dir)
    if not deleted:
        return _chain(operation, src_dir, deleted)

    return _ok(operation, src_dir)


def move_dir_to_dir(src_dir: PathLike, dest_dir: PathLike, preserve_file_date: bool = True) -> OperationResult:
    """디렉토리를 대상 디렉토리의 하위(dest_dir/원본명)로 이동합니다."""
    operation = "move_dir_to_dir"
    src_dir, dest_dir = Path(src_dir), Path(dest_dir)

    error = _check_src_dir(operation, src_dir) or _prepare_dest_dir(operation, dest_dir)
    if error:
        return _fail(operation, error.details.get("target"), error)

    moved = move_dir(src_dir, dest_dir / src_dir.name, preserve_file_date)
    if not moved:
        return _chain(operation, src_dir, moved)

    return _ok(operation, src_dir)


def move_file(src_file: PathLike, dest_file: PathLike, preserve_file_date: bool = True) -> OperationResult:
    """파일을 이동합니다. 대상 파일이 이미 있으면 삭제 후 이동합니다."""
    operation = "move_file"
    src_file, dest_file = Path(src_file), Path(dest_file)

    error = _check_src_file(operation, src_file)
    if error:
        return _fail(operation, error.details.get("target"), error)

    if dest_file.exists():
        if os.path.samefile(src_file, dest_file):
            return _ok(operation, src_file)
        deleted = delete_file(dest_file)
        if not deleted:
            return _chain(operation, dest_file, deleted)

    copied = copy_file(src_file, dest_file, preserve_file_date)
    if not copied:
        return _chain(operation, src_file, copied)

    deleted = delete_file(src_file)
    if not deleted:
        return _chain(operation, src_file, deleted)

    return _ok(operation, src_file)


def move_file_to_dir(src_file: PathLike, dest_dir: PathLike, preserve_file_date: bool = True) -> OperationResult:
    """파일을 대상 디렉토리 아래로 같은 이름으로 이동합니다."""
    operation = "move_file_to_dir"
    src_file, dest_dir = Path(src_file), Path(dest_dir)

    error = _check_src_file(operation, src_file) or _prepare_dest_dir(operation, dest_dir)
    if error:
        return _fail(operation, error.details.get("target"), error)

    moved = move_file(src_file, dest_dir / src_file.name, preserve_file_date)
    if not moved:
        return _chain(operation, src_file, moved)

    return _ok(operation, src_file)


def rename(src_file: PathLike, dest_file: PathLike) -> OperationResult:
    """
    파일 이름을 변경합니다.

    이름 변경이 불가능하면(예: 다른 파일 시스템) 복사 후 원본을 삭제하며,
    원본 삭제에 실패하면 복사된 대상 파일을 삭제하고 실패를 반환합니다.
    """
    operation = "rename"
    src_file, dest_file = Path(src_file), Path(dest_file)

    error = _check_src_file(operation, src_file)
    if error:
        return _fail(operation, error.details.get("target"), error)

    if dest_file.is_file() and not os.path.samefile(src_file, dest_file):
        deleted = delete_file(dest_file)
        if not deleted:
            return _chain(operation, dest_file, deleted)

    try:
        src_file.rename(dest_file)
        return _ok(operation, src_file)
    except OSError as e:
        logger.info(
            "이름 변경 실패, 복사 후 삭제로 대체",
            **log_operation(operation, src_file, error=str(e))
        )

    copied = copy_file(src_file, dest_file, preserve_file_date=False)
    if not copied:
        return _chain(operation, src_file, copied)

    deleted = delete_file(src_file)
    if not deleted:
        delete_file(dest_file)
        return _chain(operation, src_file, deleted)

    return _ok(operation, src_file)


# 조회

def exists_dir(dir_path: PathLike) -> bool:
    """디렉토리가 존재하는지 확인합니다."""
    return Path(dir_path).is_dir()


def exists_file(file_path: PathLike) -> bool:
    """일반 파일이 존재하는지 확인합니다."""
    return Path(file_path).is_file()


def is_dir(path: PathLike) -> bool:
    return Path(path).is_dir()


def is_file(path: PathLike) -> bool:
    return Path(path).is_file()


def get_parent(path: PathLike) -> Optional[str]:
    """상위 경로를 반환합니다. 상위 경로가 없으면 None을 반환합니다."""
    parent = os.path.dirname(str(path).rstrip("/\\") or str(path))
    return parent or None


def get_current_dir() -> str:
    """현재 작업 디렉토리"""
    return os.getcwd()


def get_temp_dir() -> str:
    """임시 디렉토리"""
    return tempfile.gettempdir()


def get_user_home_dir() -> str:
    """사용자 홈 디렉토리"""
    return str(Path.home())


def get_temp_file_path(src_file: PathLike) -> str:
    """
    원본 파일 경로에 '_temp'를 붙인 임시 파일 경로를 반환합니다.

    Examples:
        >>> get_temp_file_path("/data/report.txt")
        '/data/report_temp.txt'
    """
    src_file = str(src_file)
    extension = get_extension(src_file)
    base = remove_extension(src_file) + "_temp"
    return f"{base}.{extension}" if extension else base


# 목록

def _require_dir(operation: str, dir_path: PathLike) -> Path:
    dir_path = Path(dir_path)
    if not dir_path.exists():
        raise path_not_found(operation, dir_path)
    if not dir_path.is_dir():
        raise not_a_directory(operation, dir_path)
    return dir_path.absolute()


def _walk(root: Path, recursive: bool) -> Iterator[Path]:
    for child in sorted(root.iterdir()):
        yield child
        if recursive and child.is_dir():
            yield from _walk(child, recursive)


def _list(
    operation: str,
    dir_path: PathLike,
    recursive: bool,
    accept: PathFilter,
    include_root_dir: bool = False
) -> List[Path]:
    root = _require_dir(operation, dir_path)
    try:
        found = [path for path in _walk(root, recursive) if accept(path)]
    except OSError as e:
        raise handle_os_error(operation, root, e) from e

    found.sort(key=str)
    if include_root_dir:
        found.insert(0, root)
    return found


def _names(paths: List[Path]) -> List[str]:
    return [str(path) for path in paths]


def _is_file_and(file_filter: PathFilter) -> PathFilter:
    return lambda path: path.is_file() and file_filter(path)


def list_files(dir_path: PathLike, recursive: bool = True) -> List[Path]:
    """
    디렉토리의 파일 목록을 반환합니다.

    Args:
        dir_path: 조회할 디렉토리
        recursive: 하위 디렉토리 포함 여부

    Returns:
        List[Path]: 절대 경로 기준으로 정렬된 파일 목록

    Raises:
        PathNotFoundError: 디렉토리가 존재하지 않는 경우
        InvalidPathTypeError: 디렉토리가 아닌 경우
    """
    return _list("list_files", dir_path, recursive, Path.is_file)


def list_file_names(dir_path: PathLike, recursive: bool = True) -> List[str]:
    """디렉토리의 파일 절대 경로 문자열 목록을 반환합니다."""
    return _names(list_files(dir_path, recursive))


def list_files_and_dirs(dir_path: PathLike, include_root_dir: bool = False) -> List[Path]:
    """하위의 모든 파일과 디렉토리 목록을 반환합니다."""
    return _list("list_files_and_dirs", dir_path, True, _accept_all, include_root_dir)


def list_file_and_dir_names(dir_path: PathLike, include_root_dir: bool = False) -> List[str]:
    return _names(list_files_and_dirs(dir_path, include_root_dir))


def list_dirs(dir_path: PathLike, include_root_dir: bool = False) -> List[Path]:
    """하위의 모든 디렉토리 목록을 반환합니다."""
    return _list("list_dirs", dir_path, True, Path.is_dir, include_root_dir)


def list_dir_names(dir_path: PathLike, include_root_dir: bool = False) -> List[str]:
    return _names(list_dirs(dir_path, include_root_dir))


def list_files_include_ext(dir_path: PathLike, recursive: bool, *ext_list: str) -> List[Path]:
    """
    확장자(대소문자 구분)가 일치하는 파일 목록을 반환합니다.

    확장자를 지정하지 않으면 모든 파일을 반환합니다.
    """
    if not ext_list:
        return list_files(dir_path, recursive)
    suffix_filter = SuffixFileFilter(["." + ext for ext in ext_list])
    return _list("list_files_include_ext", dir_path, recursive, _is_file_and(suffix_filter))


def list_filenames_include_ext(dir_path: PathLike, recursive: bool, *ext_list: str) -> List[str]:
    return _names(list_files_include_ext(dir_path, recursive, *ext_list))


def list_files_exclude_ext(dir_path: PathLike, recursive: bool, *ext_list: str) -> List[Path]:
    """확장자(대소문자 무시)가 일치하지 않는 파일 목록을 반환합니다."""
    suffix_filter = SuffixFileFilter(list(ext_list), case_sensitive=False)
    return _list(
        "list_files_exclude_ext", dir_path, recursive,
        _is_file_and(lambda path: not suffix_filter(path))
    )


def list_filenames_exclude_ext(dir_path: PathLike, recursive: bool, *ext_list: str) -> List[str]:
    return _names(list_files_exclude_ext(dir_path, recursive, *ext_list))


def list_files_by_wildcard(dir_path: PathLike, wildcards: Sequence[str], recursive: bool = True) -> List[Path]:
    """파일명이 와일드카드(대소문자 무시) 중 하나와 일치하는 파일 목록을 반환합니다."""
    wildcard_filter = WildcardFileFilter(wildcards, case_sensitive=False)
    return _list("list_files_by_wildcard", dir_path, recursive, _is_file_and(wildcard_filter))


def list_filenames_by_wildcard(dir_path: PathLike, wildcards: Sequence[str], recursive: bool = True) -> List[str]:
    return _names(list_files_by_wildcard(dir_path, wildcards, recursive))


def list_exclude_files_by_wildcard(
    dir_path: PathLike,
    wildcards: Sequence[str],
    recursive: bool = True
) -> List[Path]:
    """파일명이 와일드카드(대소문자 무시) 어느 것과도 일치하지 않는 파일 목록을 반환합니다."""
    exclude_filter = WildcardExcludeFileFilter(wildcards, case_sensitive=False)
    return _list("list_exclude_files_by_wildcard", dir_path, recursive, _is_file_and(exclude_filter))


def list_exclude_filenames_by_wildcard(
    dir_path: PathLike,
    wildcards: Sequence[str],
    recursive: bool = True
) -> List[str]:
    return _names(list_exclude_files_by_wildcard(dir_path, wildcards, recursive))


# 열기/읽기

def _check_readable(operation: str, path: Path) -> None:
    if not path.exists():
        raise path_not_found(operation, path)
    if path.is_dir():
        raise not_a_file(operation, path)
    if not os.access(path, os.R_OK):
        raise FileAccessError(
            f"{path}은 읽을 수 없습니다.",
            details={"operation": operation, "target": str(path)}
        )


def _prepare_writable(operation: str, path: Path) -> None:
    if path.exists():
        if path.is_dir():
            raise not_a_file(operation, path)
        if not os.access(path, os.W_OK):
            raise FileAccessError(
                f"{path}은 쓸 수 없습니다.",
                details={"operation": operation, "target": str(path)}
            )
        return

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise handle_os_error(operation, path.parent, e) from e


def open_input_stream(file_path: PathLike) -> BinaryIO:
    """
    파일을 바이너리 읽기 모드로 엽니다. 호출자가 닫아야 합니다.

    Raises:
        PathNotFoundError: 파일이 존재하지 않는 경우
        InvalidPathTypeError: 디렉토리인 경우
        FileAccessError: 읽을 수 없는 경우
    """
    operation = "open_input_stream"
    file_path = Path(file_path)
    _check_readable(operation, file_path)
    try:
        return open(file_path, "rb")
    except OSError as e:
        raise handle_os_error(operation, file_path, e) from e


def open_output_stream(file_path: PathLike, append: bool = False) -> BinaryIO:
    """
    파일을 바이너리 쓰기 모드로 엽니다. 상위 디렉토리가 없으면 생성합니다.

    Raises:
        InvalidPathTypeError: 디렉토리인 경우
        FileAccessError: 쓸 수 없는 경우
    """
    operation = "open_output_stream"
    file_path = Path(file_path)
    _prepare_writable(operation, file_path)
    try:
        return open(file_path, "ab" if append else "wb")
    except OSError as e:
        raise handle_os_error(operation, file_path, e) from e


def open_reader(file_path: PathLike, encoding: Optional[str] = None) -> TextIO:
    """파일을 텍스트 읽기 모드로 엽니다."""
    operation = "open_reader"
    file_path = Path(file_path)
    _check_readable(operation, file_path)
    try:
        return open(file_path, "r", encoding=encoding or settings.default_encoding)
    except OSError as e:
        raise handle_os_error(operation, file_path, e) from e


def open_writer(file_path: PathLike, append: bool = False, encoding: Optional[str] = None) -> TextIO:
    """파일을 텍스트 쓰기 모드로 엽니다. 상위 디렉토리가 없으면 생성합니다."""
    operation = "open_writer"
    file_path = Path(file_path)
    _prepare_writable(operation, file_path)
    try:
        return open(file_path, "a" if append else "w", encoding=encoding or settings.default_encoding)
    except OSError as e:
        raise handle_os_error(operation, file_path, e) from e


def read_file_to_bytes(file_path: PathLike) -> bytes:
    """파일 전체를 바이트로 읽습니다."""
    with open_input_stream(file_path) as f:
        return f.read()


def read_file_to_string(file_path: PathLike, encoding: Optional[str] = None) -> str:
    """파일 전체를 문자열로 읽습니다."""
    with open_reader(file_path, encoding) as f:
        return f.read()
