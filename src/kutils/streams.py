"""
스트림 입출력 유틸리티

바이너리/텍스트 파일 객체 간의 복사, 읽기, 건너뛰기, 쓰기 함수들을 제공합니다.

개수를 반환하는 함수는 입출력 오류 시 StreamIOError를 발생시키고,
OperationResult를 반환하는 함수는 실패를 결과 객체에 담아 반환합니다.
"""

import codecs
import io
import os
from typing import IO, Any, Iterable, Iterator, List, Optional, Union

from .core.config import settings
from .core.exceptions import BaseUtilsError, StreamIOError
from .core.logging import get_logger, log_operation
from .core.result import OperationResult

logger = get_logger(__name__)

Buffer = Union[bytearray, memoryview, list]


def _is_text(stream: Any) -> bool:
    return isinstance(stream, io.TextIOBase)


def _encoding(encoding: Optional[str]) -> str:
    return encoding or settings.default_encoding


def _buffer_size(buffer_size: Optional[int]) -> int:
    return buffer_size or settings.copy_buffer_size


def _io_error(operation: str, error: Exception) -> StreamIOError:
    return StreamIOError(
        f"스트림 처리 중 오류가 발생하였습니다 (작업: {operation}): {error}",
        details={
            "operation": operation,
            "original_error": str(error),
            "error_type": type(error).__name__
        }
    )


def _fail(operation: str, error: BaseUtilsError) -> OperationResult:
    logger.warning(
        "스트림 작업 실패",
        **log_operation(operation, error=error.to_dict())
    )
    return OperationResult.failure(operation, None, error)


def _require(stream: Any, operation: str, name: str) -> None:
    if stream is None:
        raise StreamIOError(f"{name}이(가) None입니다.", details={"operation": operation})


# 복사

def copy_large(
    src: IO,
    dst: IO,
    input_offset: int = 0,
    length: int = -1,
    buffer_size: Optional[int] = None
) -> int:
    """
    입력 스트림의 내용을 출력 스트림으로 복사합니다.

    바이너리 스트림은 바이트, 텍스트 스트림은 문자 단위로 계산합니다.

    Args:
        src: 입력 스트림
        dst: 출력 스트림
        input_offset: 복사 전에 건너뛸 단위 수
        length: 복사할 단위 수 (음수면 끝까지)
        buffer_size: 버퍼 크기 (None이면 설정값 사용)

    Returns:
        int: 복사한 단위 수

    Raises:
        StreamIOError: 입출력 오류가 발생했거나 input_offset만큼 건너뛸 수 없는 경우
    """
    operation = "copy_large"
    _require(src, operation, "입력 스트림")
    _require(dst, operation, "출력 스트림")

    if input_offset > 0:
        skipped = skip(src, input_offset)
        if skipped != input_offset:
            raise StreamIOError(
                f"Bytes to skip: {input_offset} actual: {skipped}",
                details={"operation": operation, "input_offset": input_offset}
            )

    if length == 0:
        return 0

    chunk_size = _buffer_size(buffer_size)
    total = 0

    try:
        while length < 0 or total < length:
            to_read = chunk_size if length < 0 else min(chunk_size, length - total)
            chunk = src.read(to_read)
            if not chunk:
                break
            dst.write(chunk)
            total += len(chunk)
    except (OSError, ValueError) as e:
        raise _io_error(operation, e) from e

    return total


def copy(src: IO, dst: IO) -> int:
    """입력 스트림의 내용을 모두 출력 스트림으로 복사하고 복사한 단위 수를 반환합니다."""
    return copy_large(src, dst)


def copy_to_writer(binary_src: IO, writer: IO, encoding: Optional[str] = None) -> OperationResult:
    """
    바이너리 입력 스트림을 디코딩해 텍스트 출력 스트림에 씁니다.
    """
    operation = "copy_to_writer"
    encoding = _encoding(encoding)

    try:
        _require(binary_src, operation, "입력 스트림")
        _require(writer, operation, "Writer")
        decoder = codecs.getincrementaldecoder(encoding)()
        for chunk in iter(lambda: binary_src.read(settings.copy_buffer_size), b""):
            writer.write(decoder.decode(chunk))
        writer.write(decoder.decode(b"", final=True))
    except StreamIOError as e:
        return _fail(operation, e)
    except (OSError, ValueError, LookupError) as e:
        return _fail(operation, _io_error(operation, e))

    return OperationResult.success(operation)


def copy_to_stream(reader: IO, binary_dst: IO, encoding: Optional[str] = None) -> OperationResult:
    """
    텍스트 입력 스트림을 인코딩해 바이너리 출력 스트림에 씁니다.
    """
    operation = "copy_to_stream"
    encoding = _encoding(encoding)

    try:
        _require(reader, operation, "Reader")
        _require(binary_dst, operation, "출력 스트림")
        encoder = codecs.getincrementalencoder(encoding)()
        for chunk in iter(lambda: reader.read(settings.copy_buffer_size), ""):
            binary_dst.write(encoder.encode(chunk))
        binary_dst.write(encoder.encode("", final=True))
    except StreamIOError as e:
        return _fail(operation, e)
    except (OSError, ValueError, LookupError) as e:
        return _fail(operation, _io_error(operation, e))

    return OperationResult.success(operation)


# 읽기/건너뛰기

def read(src: IO, buffer: Buffer, offset: int = 0, length: Optional[int] = None) -> int:
    """
    스트림에서 최대 length 단위를 읽어 buffer[offset:]에 채웁니다.

    스트림 끝에 도달하기 전까지 반복해서 읽습니다.
    텍스트 스트림은 문자 리스트 버퍼를 사용합니다.

    Args:
        src: 입력 스트림
        buffer: 바이너리 스트림은 bytearray, 텍스트 스트림은 list
        offset: 버퍼 시작 위치
        length: 읽을 단위 수 (None이면 버퍼 끝까지)

    Returns:
        int: 실제로 읽은 단위 수

    Raises:
        StreamIOError: 입출력 오류 또는 잘못된 인자
    """
    operation = "read"
    _require(src, operation, "입력 스트림")

    if length is None:
        length = len(buffer) - offset
    if length < 0 or offset < 0 or offset + length > len(buffer):
        raise StreamIOError(
            f"버퍼 범위를 벗어났습니다: offset={offset}, length={length}",
            details={"operation": operation, "buffer_size": len(buffer)}
        )

    total = 0
    try:
        while total < length:
            chunk = src.read(length - total)
            if not chunk:
                break
            start = offset + total
            buffer[start:start + len(chunk)] = chunk
            total += len(chunk)
    except (OSError, ValueError) as e:
        raise _io_error(operation, e) from e

    return total


def read_fully(src: IO, buffer: Buffer, offset: int = 0, length: Optional[int] = None) -> OperationResult:
    """
    스트림에서 정확히 length 단위를 읽습니다. 부족하면 실패 결과를 반환합니다.
    """
    operation = "read_fully"
    if length is None:
        length = len(buffer) - offset

    try:
        actual = read(src, buffer, offset, length)
    except StreamIOError as e:
        return _fail(operation, e)

    if actual != length:
        return _fail(operation, StreamIOError(
            f"Length to read: {length} actual: {actual}",
            details={"operation": operation, "expected": length, "actual": actual}
        ))

    return OperationResult.success(operation)


def skip(src: IO, to_skip: int) -> int:
    """
    스트림에서 to_skip 단위를 읽어 버립니다.

    Returns:
        int: 실제로 건너뛴 단위 수 (스트림 끝에 도달하면 더 작을 수 있음)

    Raises:
        StreamIOError: to_skip이 음수이거나 입출력 오류가 발생한 경우
    """
    operation = "skip"
    _require(src, operation, "입력 스트림")

    if to_skip < 0:
        raise StreamIOError(
            f"Skip count must be non-negative, actual: {to_skip}",
            details={"operation": operation, "to_skip": to_skip}
        )

    remaining = to_skip
    try:
        while remaining > 0:
            chunk = src.read(min(remaining, settings.copy_buffer_size))
            if not chunk:
                break
            remaining -= len(chunk)
    except (OSError, ValueError) as e:
        raise _io_error(operation, e) from e

    return to_skip - remaining


def skip_fully(src: IO, to_skip: int) -> OperationResult:
    """정확히 to_skip 단위를 건너뜁니다. 부족하면 실패 결과를 반환합니다."""
    operation = "skip_fully"

    try:
        skipped = skip(src, to_skip)
    except StreamIOError as e:
        return _fail(operation, e)

    if skipped != to_skip:
        return _fail(operation, StreamIOError(
            f"Bytes to skip: {to_skip} actual: {skipped}",
            details={"operation": operation, "expected": to_skip, "actual": skipped}
        ))

    return OperationResult.success(operation)


def line_iterator(src: IO, encoding: Optional[str] = None) -> Iterator[str]:
    """
    스트림을 줄 단위로 순회합니다. 줄 끝 문자는 제거됩니다.

    바이너리 스트림은 encoding으로 디코딩합니다.
    """
    _require(src, "line_iterator", "입력 스트림")
    encoding = _encoding(encoding)
    text_mode = _is_text(src)

    try:
        for line in src:
            if not text_mode:
                line = line.decode(encoding)
            yield line.rstrip("\r\n")
    except (OSError, ValueError) as e:
        raise _io_error("line_iterator", e) from e


def read_lines(src: IO, encoding: Optional[str] = None) -> List[str]:
    """스트림의 모든 줄을 리스트로 반환합니다."""
    return list(line_iterator(src, encoding))


# 변환

def to_bytes(src: IO, encoding: Optional[str] = None) -> bytes:
    """스트림의 남은 내용을 바이트로 읽습니다. 텍스트 스트림은 encoding으로 인코딩합니다."""
    _require(src, "to_bytes", "입력 스트림")
    try:
        data = src.read()
        return data.encode(_encoding(encoding)) if _is_text(src) else bytes(data)
    except (OSError, ValueError) as e:
        raise _io_error("to_bytes", e) from e


def to_string(src: IO, encoding: Optional[str] = None) -> str:
    """스트림의 남은 내용을 문자열로 읽습니다. 바이너리 스트림은 encoding으로 디코딩합니다."""
    _require(src, "to_string", "입력 스트림")
    try:
        data = src.read()
        return data if _is_text(src) else data.decode(_encoding(encoding))
    except (OSError, ValueError) as e:
        raise _io_error("to_string", e) from e


def to_input_stream(text: str, encoding: Optional[str] = None) -> io.BytesIO:
    """문자열을 인코딩한 메모리 바이너리 스트림을 반환합니다."""
    return io.BytesIO(text.encode(_encoding(encoding)))


def to_buffered_stream(src: IO) -> Union[io.BytesIO, io.StringIO]:
    """
    스트림의 남은 내용을 메모리로 읽어 새 스트림을 반환합니다.

    원본 스트림은 닫지 않습니다.
    """
    _require(src, "to_buffered_stream", "입력 스트림")
    try:
        data = src.read()
    except (OSError, ValueError) as e:
        raise _io_error("to_buffered_stream", e) from e
    return io.StringIO(data) if _is_text(src) else io.BytesIO(data)


# 쓰기

def _write_data(data: Union[str, bytes, bytearray], output: IO, encoding: str) -> None:
    if _is_text(output):
        output.write(data if isinstance(data, str) else bytes(data).decode(encoding))
    else:
        output.write(data.encode(encoding) if isinstance(data, str) else bytes(data))


def write(data: Optional[Union[str, bytes, bytearray]], output: IO, encoding: Optional[str] = None) -> OperationResult:
    """
    데이터를 출력 스트림에 씁니다. 데이터가 None이면 아무 것도 쓰지 않습니다.

    문자열과 바이트는 출력 스트림 종류에 맞게 encoding으로 변환됩니다.
    """
    operation = "write"
    if data is None:
        return OperationResult.success(operation)

    try:
        _require(output, operation, "출력 스트림")
        _write_data(data, output, _encoding(encoding))
    except StreamIOError as e:
        return _fail(operation, e)
    except (OSError, ValueError) as e:
        return _fail(operation, _io_error(operation, e))

    return OperationResult.success(operation)


def write_lines(
    lines: Optional[Iterable[Any]],
    line_ending: Optional[str],
    output: IO,
    encoding: Optional[str] = None
) -> OperationResult:
    """
    각 항목을 문자열로 변환해 줄 끝 문자와 함께 씁니다.

    None 항목은 줄 끝 문자만 씁니다. line_ending이 None이면 OS 기본값을 사용합니다.
    """
    operation = "write_lines"
    if lines is None:
        return OperationResult.success(operation)

    line_ending = os.linesep if line_ending is None else line_ending
    encoding = _encoding(encoding)

    try:
        _require(output, operation, "출력 스트림")
        for line in lines:
            if line is not None:
                _write_data(str(line), output, encoding)
            _write_data(line_ending, output, encoding)
    except StreamIOError as e:
        return _fail(operation, e)
    except (OSError, ValueError) as e:
        return _fail(operation, _io_error(operation, e))

    return OperationResult.success(operation)


def close_quietly(*closeables: Any) -> None:
    """
    객체들을 닫습니다. None은 무시하고, 닫는 중 발생한 OSError는 로그만 남깁니다.
    """
    for closeable in closeables:
        if closeable is None:
            continue
        try:
            closeable.close()
        except OSError as e:
            logger.debug("close 실패", error=str(e), target=type(closeable).__name__)
