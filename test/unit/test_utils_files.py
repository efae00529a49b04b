"""
파일/디렉토리 유틸리티 단위 테스트
"""

import os
from pathlib import Path

import pytest

from kutils.core.exceptions import (
    FileAccessError,
    InvalidPathTypeError,
    PathConflictError,
    PathNotFoundError,
    UnsupportedCopyModeError
)
from kutils.core.result import ResultStatus
from kutils.files import (
    ONE_KB,
    ONE_MB,
    ONE_GB,
    byte_count_to_display_size,
    create_dir,
    clean_dir,
    delete_dir,
    delete_file,
    copy_dir,
    copy_dir_after_check_file_ext,
    copy_dir_to_dir,
    copy_file,
    copy_file_to_dir,
    move_dir,
    move_dir_to_dir,
    move_file,
    move_file_to_dir,
    rename,
    exists_dir,
    exists_file,
    is_dir,
    is_file,
    get_parent,
    get_current_dir,
    get_temp_dir,
    get_user_home_dir,
    get_temp_file_path,
    list_files,
    list_file_names,
    list_files_and_dirs,
    list_file_and_dir_names,
    list_dirs,
    list_dir_names,
    list_files_include_ext,
    list_filenames_include_ext,
    list_files_exclude_ext,
    list_filenames_exclude_ext,
    list_files_by_wildcard,
    list_filenames_by_wildcard,
    list_exclude_files_by_wildcard,
    list_exclude_filenames_by_wildcard,
    open_input_stream,
    open_output_stream,
    open_reader,
    open_writer,
    read_file_to_bytes,
    read_file_to_string
)


@pytest.fixture
def sample_tree(tmp_path):
    """
    테스트용 디렉토리 구조

    src/
        a.txt
        b.LOG
        seq-001.txt
        sub/
            c.txt
            d.csv
            deep/
                e.txt
    """
    src = tmp_path / "src"
    (src / "sub" / "deep").mkdir(parents=True)
    (src / "a.txt").write_text("a")
    (src / "b.LOG").write_text("b")
    (src / "seq-001.txt").write_text("seq")
    (src / "sub" / "c.txt").write_text("c")
    (src / "sub" / "d.csv").write_text("d")
    (src / "sub" / "deep" / "e.txt").write_text("e")
    return src


def _relative(paths, root):
    return [Path(p).relative_to(root.absolute()).as_posix() for p in paths]


class TestDisplaySize:
    """크기 표시 테스트"""

    @pytest.mark.parametrize("size,expected", [
        (0, "0 bytes"),
        (1023, "1023 bytes"),
        (ONE_KB, "1 KB"),
        (1536, "1 KB"),
        (ONE_MB * 3, "3 MB"),
        (ONE_GB * 2 - 1, "1 GB"),
    ])
    def test_byte_count(self, size, expected):
        assert byte_count_to_display_size(size) == expected

    def test_file_size(self, tmp_path):
        """파일 경로로 크기 측정"""
        target = tmp_path / "data.bin"
        target.write_bytes(b"x" * 2048)

        assert byte_count_to_display_size(target) == "2 KB"

    def test_missing_file(self, tmp_path):
        with pytest.raises(PathNotFoundError):
            byte_count_to_display_size(tmp_path / "missing")


class TestCreateAndDelete:
    """디렉토리/파일 생성 및 삭제 테스트"""

    def test_create_dir(self, tmp_path):
        target = tmp_path / "a" / "b" / "c"

        result = create_dir(target)

        assert result.ok
        assert result.target == str(target)
        assert target.is_dir()

    def test_create_existing_dir(self, tmp_path):
        assert create_dir(tmp_path).ok

    def test_create_dir_over_file(self, tmp_path):
        """파일이 있는 위치에 디렉토리 생성 실패"""
        target = tmp_path / "file"
        target.write_text("x")

        result = create_dir(target)

        assert not result.ok
        assert isinstance(result.error, FileAccessError)

    def test_clean_dir(self, sample_tree):
        result = clean_dir(sample_tree)

        assert result.ok
        assert sample_tree.is_dir()
        assert list(sample_tree.iterdir()) == []

    def test_clean_missing_dir(self, tmp_path):
        result = clean_dir(tmp_path / "missing")

        assert result.status == ResultStatus.FAIL
        assert isinstance(result.error, PathNotFoundError)
        assert result.message.endswith("가 존재하지 않습니다.")

    def test_delete_dir(self, sample_tree):
        assert delete_dir(sample_tree).ok
        assert not sample_tree.exists()

    def test_delete_dir_on_file(self, sample_tree):
        result = delete_dir(sample_tree / "a.txt")

        assert not result.ok
        assert isinstance(result.error, InvalidPathTypeError)

    def test_delete_file(self, sample_tree):
        assert delete_file(sample_tree / "a.txt").ok
        assert not (sample_tree / "a.txt").exists()

    def test_delete_file_on_dir(self, sample_tree):
        result = delete_file(sample_tree / "sub")

        assert not result.ok
        assert isinstance(result.error, InvalidPathTypeError)
        assert sample_tree.joinpath("sub").is_dir()


class TestCopyDir:
    """디렉토리 복사 테스트"""

    def test_copy_all(self, sample_tree, tmp_path):
        dest = tmp_path / "dest"

        result = copy_dir(sample_tree, dest)

        assert result.ok
        assert (dest / "a.txt").read_text() == "a"
        assert (dest / "sub" / "deep" / "e.txt").read_text() == "e"

    def test_copy_files_only(self, sample_tree, tmp_path):
        """원본 바로 아래 파일만 복사"""
        dest = tmp_path / "dest"

        assert copy_dir(sample_tree, dest, "file").ok

        assert sorted(p.name for p in dest.iterdir()) == ["a.txt", "b.LOG", "seq-001.txt"]

    def test_copy_dirs_only(self, sample_tree, tmp_path):
        """디렉토리 구조만 복사"""
        dest = tmp_path / "dest"

        assert copy_dir(sample_tree, dest, "DIR").ok

        assert (dest / "sub" / "deep").is_dir()
        assert list_files(dest) == []

    def test_unsupported_mode(self, sample_tree, tmp_path):
        result = copy_dir(sample_tree, tmp_path / "dest", "link")

        assert not result.ok
        assert isinstance(result.error, UnsupportedCopyModeError)
        assert result.message == "link은 지원하지 않는 타입입니다."

    def test_missing_source(self, tmp_path):
        result = copy_dir(tmp_path / "missing", tmp_path / "dest")

        assert not result.ok
        assert isinstance(result.error, PathNotFoundError)
        assert not (tmp_path / "dest").exists()

    def test_dest_inside_source(self, sample_tree):
        """대상이 원본 하위인 경우 무한 복사하지 않음"""
        dest = sample_tree / "backup"

        assert copy_dir(sample_tree, dest).ok

        assert (dest / "sub" / "c.txt").exists()
        assert not (dest / "backup").exists()

    def test_preserve_file_date(self, sample_tree, tmp_path):
        source = sample_tree / "a.txt"
        os.utime(source, (1_000_000_000, 1_000_000_000))

        copy_dir(sample_tree, tmp_path / "kept")
        copy_dir(sample_tree, tmp_path / "fresh", preserve_file_date=False)

        assert (tmp_path / "kept" / "a.txt").stat().st_mtime == 1_000_000_000
        assert (tmp_path / "fresh" / "a.txt").stat().st_mtime != 1_000_000_000

    def test_copy_by_extension(self, sample_tree, tmp_path):
        """확장자 조건 복사 (대소문자 무시)"""
        dest = tmp_path / "dest"

        assert copy_dir_after_check_file_ext(sample_tree, dest, "log", "csv").ok

        assert (dest / "b.LOG").exists()
        assert (dest / "sub" / "d.csv").exists()
        assert not (dest / "a.txt").exists()
        assert (dest / "sub" / "deep").is_dir()

    def test_copy_dir_to_dir(self, sample_tree, tmp_path):
        dest = tmp_path / "parent"

        assert copy_dir_to_dir(sample_tree, dest).ok

        assert (dest / "src" / "sub" / "c.txt").exists()


class TestCopyFile:
    """파일 복사 테스트"""

    def test_copy_file(self, sample_tree, tmp_path):
        dest = tmp_path / "out" / "copied.txt"

        result = copy_file(sample_tree / "a.txt", dest)

        assert result.ok
        assert dest.read_text() == "a"

    def test_copy_overwrites(self, sample_tree):
        dest = sample_tree / "sub" / "c.txt"

        assert copy_file(sample_tree / "a.txt", dest).ok

        assert dest.read_text() == "a"

    def test_copy_same_file(self, sample_tree):
        """같은 파일 복사는 성공"""
        source = sample_tree / "a.txt"

        assert copy_file(source, source).ok
        assert source.read_text() == "a"

    def test_copy_directory_as_file(self, sample_tree, tmp_path):
        result = copy_file(sample_tree / "sub", tmp_path / "x")

        assert not result.ok
        assert isinstance(result.error, InvalidPathTypeError)

    @pytest.mark.parametrize("preserve_file_date", [True, False])
    def test_copy_onto_existing_dir(self, sample_tree, preserve_file_date):
        """대상이 기존 디렉토리면 실패"""
        result = copy_file(sample_tree / "a.txt", sample_tree / "sub", preserve_file_date)

        assert not result.ok
        assert isinstance(result.error, InvalidPathTypeError)
        assert result.error.details["target"] == str(sample_tree / "sub")
        assert (sample_tree / "sub" / "c.txt").read_text() == "c"

    def test_copy_file_to_dir(self, sample_tree, tmp_path):
        dest = tmp_path / "new_dir"

        assert copy_file_to_dir(sample_tree / "a.txt", dest).ok

        assert (dest / "a.txt").read_text() == "a"

    def test_copy_file_to_file_path(self, sample_tree):
        """대상이 디렉토리가 아니면 실패"""
        result = copy_file_to_dir(sample_tree / "a.txt", sample_tree / "seq-001.txt")

        assert not result.ok
        assert isinstance(result.error, InvalidPathTypeError)


class TestMove:
    """이동 테스트"""

    def test_move_dir(self, sample_tree, tmp_path):
        dest = tmp_path / "moved"

        assert move_dir(sample_tree, dest).ok

        assert not sample_tree.exists()
        assert (dest / "sub" / "deep" / "e.txt").read_text() == "e"

    def test_move_dir_replaces_existing(self, sample_tree, tmp_path):
        """기존 대상 디렉토리는 삭제 후 이동"""
        dest = tmp_path / "moved"
        dest.mkdir()
        (dest / "old.txt").write_text("old")

        assert move_dir(sample_tree, dest).ok

        assert not (dest / "old.txt").exists()
        assert (dest / "a.txt").exists()

    def test_move_dir_onto_itself(self, sample_tree):
        """같은 디렉토리로의 이동은 아무 것도 하지 않고 성공"""
        assert move_dir(sample_tree, sample_tree).ok
        assert move_dir(sample_tree, sample_tree / "sub" / "..").ok

        assert (sample_tree / "a.txt").read_text() == "a"
        assert (sample_tree / "sub" / "deep" / "e.txt").read_text() == "e"

    def test_move_dir_into_itself(self, sample_tree):
        """원본의 하위 경로로는 이동할 수 없음"""
        result = move_dir(sample_tree, sample_tree / "sub" / "x")

        assert not result.ok
        assert isinstance(result.error, PathConflictError)
        assert not (sample_tree / "sub" / "x").exists()
        assert (sample_tree / "sub" / "deep" / "e.txt").read_text() == "e"

    def test_move_dir_to_own_parent(self, sample_tree):
        """원본이 이미 대상 디렉토리 아래에 있으면 그대로 성공"""
        assert move_dir_to_dir(sample_tree, sample_tree.parent).ok

        assert (sample_tree / "a.txt").read_text() == "a"

        assert (dest / "a.txt").exists()

    def test_move_dir_to_dir(self, sample_tree, tmp_path):
        dest = tmp_path / "parent"

        assert move_dir_to_dir(sample_tree, dest).ok

        assert (dest / "src" / "a.txt").exists()
        assert not sample_tree.exists()

    def test_move_file(self, sample_tree, tmp_path):
        dest = tmp_path / "moved.txt"

        assert move_file(sample_tree / "a.txt", dest).ok

        assert dest.read_text() == "a"
        assert not (sample_tree / "a.txt").exists()

    def test_move_file_replaces_existing(self, sample_tree):
        dest = sample_tree / "sub" / "c.txt"

        assert move_file(sample_tree / "a.txt", dest).ok

        assert dest.read_text() == "a"

    def test_move_same_file(self, sample_tree):
        source = sample_tree / "a.txt"

        assert move_file(source, source).ok
        assert source.exists()

    def test_move_missing_file(self, tmp_path):
        result = move_file(tmp_path / "missing.txt", tmp_path / "dest.txt")

        assert not result.ok
        assert isinstance(result.error, PathNotFoundError)

    def test_move_file_to_dir(self, sample_tree, tmp_path):
        dest = tmp_path / "inbox"

        assert move_file_to_dir(sample_tree / "a.txt", dest).ok

        assert (dest / "a.txt").exists()
        assert not (sample_tree / "a.txt").exists()

    def test_rename(self, sample_tree):
        source = sample_tree / "a.txt"
        dest = sample_tree / "renamed.txt"

        assert rename(source, dest).ok

        assert dest.read_text() == "a"
        assert not source.exists()

    def test_rename_over_existing(self, sample_tree):
        dest = sample_tree / "seq-001.txt"

        assert rename(sample_tree / "a.txt", dest).ok

        assert dest.read_text() == "a"

    def test_rename_missing(self, tmp_path):
        result = rename(tmp_path / "missing.txt", tmp_path / "x.txt")

        assert not result.ok
        assert isinstance(result.error, PathNotFoundError)


class TestQueries:
    """경로 조회 테스트"""

    def test_exists(self, sample_tree):
        assert exists_dir(sample_tree)
        assert not exists_dir(sample_tree / "a.txt")
        assert exists_file(sample_tree / "a.txt")
        assert not exists_file(sample_tree / "missing.txt")

    def test_is_dir_and_file(self, sample_tree):
        assert is_dir(sample_tree / "sub")
        assert is_file(sample_tree / "sub" / "c.txt")
        assert not is_file(sample_tree / "sub")

    def test_get_parent(self):
        assert get_parent("/a/b/c.txt") == "/a/b"
        assert get_parent("/a/b/") == "/a"
        assert get_parent("c.txt") is None

    def test_environment_dirs(self):
        assert get_current_dir() == os.getcwd()
        assert os.path.isdir(get_temp_dir())
        assert get_user_home_dir() == str(Path.home())

    def test_get_temp_file_path(self):
        assert get_temp_file_path("/data/report.txt") == "/data/report_temp.txt"
        assert get_temp_file_path("/data/report") == "/data/report_temp"


class TestListing:
    """목록 조회 테스트"""

    def test_list_files_recursive(self, sample_tree):
        result = list_files(sample_tree)

        assert all(path.is_absolute() for path in result)
        assert _relative(result, sample_tree) == [
            "a.txt", "b.LOG", "seq-001.txt", "sub/c.txt", "sub/d.csv", "sub/deep/e.txt"
        ]

    def test_list_files_flat(self, sample_tree):
        assert _relative(list_files(sample_tree, recursive=False), sample_tree) == [
            "a.txt", "b.LOG", "seq-001.txt"
        ]

    def test_list_file_names(self, sample_tree):
        names = list_file_names(sample_tree, recursive=False)

        assert all(isinstance(name, str) for name in names)
        assert names[0] == str(sample_tree.absolute() / "a.txt")

    def test_list_files_and_dirs(self, sample_tree):
        result = list_files_and_dirs(sample_tree / "sub", include_root_dir=True)

        assert result[0] == (sample_tree / "sub").absolute()
        assert _relative(result[1:], sample_tree / "sub") == ["c.txt", "d.csv", "deep", "deep/e.txt"]
        assert len(list_file_and_dir_names(sample_tree)) == 8

    def test_list_dirs(self, sample_tree):
        assert _relative(list_dirs(sample_tree), sample_tree) == ["sub", "sub/deep"]
        assert list_dir_names(sample_tree, include_root_dir=True)[0] == str(sample_tree.absolute())

    def test_include_ext(self, sample_tree):
        """확장자 포함 조회 (대소문자 구분)"""
        assert _relative(list_files_include_ext(sample_tree, True, "csv", "log"), sample_tree) == [
            "sub/d.csv"
        ]
        assert len(list_filenames_include_ext(sample_tree, False, "txt")) == 2

    def test_include_ext_without_ext(self, sample_tree):
        assert list_files_include_ext(sample_tree, False) == list_files(sample_tree, False)

    def test_exclude_ext(self, sample_tree):
        """확장자 제외 조회 (대소문자 무시)"""
        assert _relative(list_files_exclude_ext(sample_tree, True, "txt", "log"), sample_tree) == [
            "sub/d.csv"
        ]
        assert list_filenames_exclude_ext(sample_tree, False, "txt") == [
            str(sample_tree.absolute() / "b.LOG")
        ]

    def test_by_wildcard(self, sample_tree):
        """와일드카드 조회 (대소문자 무시)"""
        assert _relative(list_files_by_wildcard(sample_tree, ["*.log", "?.csv"]), sample_tree) == [
            "b.LOG", "sub/d.csv"
        ]
        assert len(list_filenames_by_wildcard(sample_tree, ["*.txt"], recursive=False)) == 2

    def test_exclude_by_wildcard(self, sample_tree):
        result = list_exclude_files_by_wildcard(sample_tree, ["seq-*.*", "*.txt"])

        assert _relative(result, sample_tree) == ["b.LOG", "sub/d.csv"]
        assert len(list_exclude_filenames_by_wildcard(sample_tree, ["seq-*.*"], False)) == 2

    def test_missing_dir(self, tmp_path):
        with pytest.raises(PathNotFoundError):
            list_files(tmp_path / "missing")

    def test_not_a_dir(self, sample_tree):
        with pytest.raises(InvalidPathTypeError):
            list_files(sample_tree / "a.txt")


class TestOpenAndRead:
    """파일 열기/읽기 테스트"""

    def test_output_then_input_stream(self, tmp_path):
        target = tmp_path / "new" / "data.bin"

        with open_output_stream(target) as out:
            out.write(b"\x00\x01")
        with open_output_stream(target, append=True) as out:
            out.write(b"\x02")

        with open_input_stream(target) as stream:
            assert stream.read() == b"\x00\x01\x02"

    def test_writer_and_reader(self, tmp_path):
        target = tmp_path / "text.txt"

        with open_writer(target, encoding="euc-kr") as writer:
            writer.write("한글")

        with open_reader(target, encoding="euc-kr") as reader:
            assert reader.read() == "한글"
        assert target.read_bytes() == "한글".encode("euc-kr")

    def test_read_file(self, sample_tree):
        assert read_file_to_bytes(sample_tree / "a.txt") == b"a"
        assert read_file_to_string(sample_tree / "sub" / "c.txt") == "c"

    def test_open_missing(self, tmp_path):
        with pytest.raises(PathNotFoundError):
            open_input_stream(tmp_path / "missing.bin")

    def test_open_directory(self, sample_tree):
        with pytest.raises(InvalidPathTypeError):
            open_reader(sample_tree)
        with pytest.raises(InvalidPathTypeError):
            open_output_stream(sample_tree)
