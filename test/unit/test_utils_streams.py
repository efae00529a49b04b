"""
스트림 입출력 유틸리티 단위 테스트
"""

import io
import os
from unittest.mock import MagicMock

import pytest

from kutils.core.exceptions import StreamIOError
from kutils.streams import (
    copy_large,
    copy,
    copy_to_writer,
    copy_to_stream,
    read,
    read_fully,
    skip,
    skip_fully,
    line_iterator,
    read_lines,
    to_bytes,
    to_string,
    to_input_stream,
    to_buffered_stream,
    write,
    write_lines,
    close_quietly
)


class BrokenStream(io.RawIOBase):
    """읽기/쓰기 시 OSError를 발생시키는 스트림"""

    def readable(self):
        return True

    def writable(self):
        return True

    def read(self, size=-1):
        raise OSError("device error")

    def write(self, data):
        raise OSError("device error")


class TestCopy:
    """스트림 복사 테스트"""

    def test_copy_binary(self):
        src = io.BytesIO(b"0123456789")
        dst = io.BytesIO()

        assert copy(src, dst) == 10
        assert dst.getvalue() == b"0123456789"

    def test_copy_text(self):
        src = io.StringIO("한글 텍스트")
        dst = io.StringIO()

        assert copy(src, dst) == 6
        assert dst.getvalue() == "한글 텍스트"

    def test_copy_large_offset_and_length(self):
        src = io.BytesIO(b"0123456789")
        dst = io.BytesIO()

        assert copy_large(src, dst, input_offset=2, length=5, buffer_size=2) == 5
        assert dst.getvalue() == b"23456"

    def test_copy_large_length_beyond_end(self):
        dst = io.BytesIO()

        assert copy_large(io.BytesIO(b"abc"), dst, length=10) == 3

    def test_copy_large_zero_length(self):
        dst = io.BytesIO()

        assert copy_large(io.BytesIO(b"abc"), dst, length=0) == 0
        assert dst.getvalue() == b""

    def test_copy_large_offset_beyond_end(self):
        """건너뛸 수 없는 오프셋"""
        with pytest.raises(StreamIOError) as exc_info:
            copy_large(io.BytesIO(b"abc"), io.BytesIO(), input_offset=5)

        assert exc_info.value.message == "Bytes to skip: 5 actual: 3"

    def test_copy_io_error(self):
        with pytest.raises(StreamIOError):
            copy(BrokenStream(), io.BytesIO())

    def test_copy_none(self):
        with pytest.raises(StreamIOError):
            copy(None, io.BytesIO())


class TestCharsetCopy:
    """문자셋 변환 복사 테스트"""

    def test_copy_to_writer(self):
        """멀티바이트 문자가 버퍼 경계에 걸려도 디코딩"""
        src = io.BytesIO(("가" * 3000).encode("utf-8"))
        writer = io.StringIO()

        result = copy_to_writer(src, writer)

        assert result.ok
        assert writer.getvalue() == "가" * 3000

    def test_copy_to_writer_euc_kr(self):
        writer = io.StringIO()

        assert copy_to_writer(io.BytesIO(b"\xc7\xd1"), writer, "euc-kr").ok
        assert writer.getvalue() == "한"

    def test_copy_to_writer_invalid_bytes(self):
        result = copy_to_writer(io.BytesIO(b"\xff\xfe"), io.StringIO())

        assert not result.ok
        assert isinstance(result.error, StreamIOError)

    def test_copy_to_stream(self):
        dst = io.BytesIO()

        assert copy_to_stream(io.StringIO("한글"), dst, "euc-kr").ok
        assert dst.getvalue() == "한글".encode("euc-kr")

    def test_copy_to_stream_none(self):
        result = copy_to_stream(None, io.BytesIO())

        assert not result.ok
        assert result.target is None


class TestRead:
    """읽기 테스트"""

    def test_read_into_buffer(self):
        buffer = bytearray(6)

        count = read(io.BytesIO(b"abcd"), buffer, offset=1, length=3)

        assert count == 3
        assert buffer == bytearray(b"\x00abc\x00\x00")

    def test_read_until_eof(self):
        buffer = bytearray(10)

        assert read(io.BytesIO(b"abc"), buffer) == 3

    def test_read_text(self):
        buffer = [None] * 4

        assert read(io.StringIO("한글ab"), buffer) == 4
        assert buffer == ["한", "글", "a", "b"]

    def test_read_invalid_range(self):
        with pytest.raises(StreamIOError):
            read(io.BytesIO(b"abc"), bytearray(2), offset=1, length=2)

    def test_read_fully(self):
        buffer = bytearray(3)

        assert read_fully(io.BytesIO(b"abcdef"), buffer).ok
        assert buffer == bytearray(b"abc")

    def test_read_fully_short(self):
        """데이터가 부족하면 실패"""
        result = read_fully(io.BytesIO(b"ab"), bytearray(4))

        assert not result.ok
        assert result.message == "Length to read: 4 actual: 2"


class TestSkip:
    """건너뛰기 테스트"""

    def test_skip(self):
        src = io.BytesIO(b"abcdef")

        assert skip(src, 4) == 4
        assert src.read() == b"ef"

    def test_skip_beyond_end(self):
        assert skip(io.BytesIO(b"abc"), 10) == 3

    def test_skip_negative(self):
        with pytest.raises(StreamIOError):
            skip(io.BytesIO(b"abc"), -1)

    def test_skip_fully(self):
        assert skip_fully(io.StringIO("abc"), 3).ok

    def test_skip_fully_short(self):
        result = skip_fully(io.BytesIO(b"abc"), 5)

        assert not result.ok
        assert result.message == "Bytes to skip: 5 actual: 3"


class TestLines:
    """줄 단위 읽기 테스트"""

    def test_read_lines_binary(self):
        src = io.BytesIO("첫째\r\n둘째\n셋째".encode("utf-8"))

        assert read_lines(src) == ["첫째", "둘째", "셋째"]

    def test_read_lines_text(self):
        assert read_lines(io.StringIO("a\nb\n")) == ["a", "b"]

    def test_line_iterator_is_lazy(self):
        src = io.StringIO("a\nb\nc")
        lines = line_iterator(src)

        assert next(lines) == "a"
        assert list(lines) == ["b", "c"]

    def test_empty(self):
        assert read_lines(io.BytesIO(b"")) == []


class TestConversion:
    """스트림 변환 테스트"""

    def test_to_bytes(self):
        assert to_bytes(io.BytesIO(b"abc")) == b"abc"
        assert to_bytes(io.StringIO("한"), "euc-kr") == b"\xc7\xd1"

    def test_to_string(self):
        assert to_string(io.BytesIO("한글".encode("utf-8"))) == "한글"
        assert to_string(io.StringIO("abc")) == "abc"

    def test_to_input_stream(self):
        stream = to_input_stream("한", "euc-kr")

        assert isinstance(stream, io.BytesIO)
        assert stream.read() == b"\xc7\xd1"

    def test_to_buffered_stream(self):
        src = io.BytesIO(b"abc")

        buffered = to_buffered_stream(src)

        assert isinstance(buffered, io.BytesIO)
        assert buffered.read() == b"abc"
        assert not src.closed

    def test_to_buffered_text_stream(self):
        assert isinstance(to_buffered_stream(io.StringIO("x")), io.StringIO)


class TestWrite:
    """쓰기 테스트"""

    def test_write_string_to_binary(self):
        output = io.BytesIO()

        assert write("한글", output).ok
        assert output.getvalue() == "한글".encode("utf-8")

    def test_write_bytes_to_text(self):
        output = io.StringIO()

        assert write(b"\xc7\xd1", output, "euc-kr").ok
        assert output.getvalue() == "한"

    def test_write_none(self):
        """None 데이터는 아무 것도 쓰지 않음"""
        output = io.BytesIO()

        assert write(None, output).ok
        assert output.getvalue() == b""

    def test_write_error(self):
        result = write(b"abc", BrokenStream())

        assert not result.ok
        assert isinstance(result.error, StreamIOError)

    def test_write_lines(self):
        output = io.StringIO()

        assert write_lines(["a", None, 3], "\n", output).ok
        assert output.getvalue() == "a\n\n3\n"

    def test_write_lines_default_ending(self):
        output = io.BytesIO()

        assert write_lines(["a"], None, output).ok
        assert output.getvalue() == ("a" + os.linesep).encode("utf-8")

    def test_write_lines_none(self):
        assert write_lines(None, "\n", io.StringIO()).ok


class TestCloseQuietly:
    """닫기 테스트"""

    def test_close_all(self):
        first, second = io.BytesIO(), io.StringIO()

        close_quietly(first, None, second)

        assert first.closed
        assert second.closed

    def test_close_error_ignored(self):
        """닫기 오류는 무시하고 나머지를 닫음"""
        broken = MagicMock()
        broken.close.side_effect = OSError("close failed")
        other = io.BytesIO()

        close_quietly(broken, other)

        broken.close.assert_called_once()
        assert other.closed
