"""
File sinks that persist LogRecords as JSON.

Two layouts are supported and they are not compatible with each other:

* ``JsonArrayFileSink`` keeps the file a single pretty-printed JSON array by
  cutting off the closing bracket and re-closing it after each new record.
* ``JsonLinesFileSink`` appends one compact JSON object per line.

Neither sink locks the file. Concurrent writers to the same JSON array can
interleave the truncate and write steps and corrupt it.
"""

import json
from pathlib import Path
from typing import Any, BinaryIO, Dict, List, Optional, Protocol, Tuple, Union

from ..infrastructure.error_handler import (
    DirectoryCreationError,
    FileOpenError,
    SerializationError,
    WriteError,
    handle_file_errors,
)
from ..infrastructure.logger import logger
from ..models import FileFormat, LogRecord


PathLike = Union[str, Path]

ENCODING = "utf-8"
INDENT = "  "
WHITESPACE = b" \t\r\n"
TAIL_CHUNK_SIZE = 4096


class RecordSink(Protocol):
    """Destination that can append records to, and read them back from, a path."""

    file_format: FileFormat

    def append(self, record: LogRecord, path: PathLike) -> None: ...

    def read(self, path: PathLike) -> List[LogRecord]: ...


@handle_file_errors(DirectoryCreationError, "directory creation failed")
def ensure_parent_directory(path: Path) -> None:
    """Create every missing parent directory of ``path``."""

    path.parent.mkdir(parents=True, exist_ok=True)


@handle_file_errors(SerializationError, "JSON marshaling failed")
def encode_record(record: LogRecord, pretty: bool = True) -> bytes:
    """Serialize a record, nested one level deep when pretty-printed."""

    data = record.to_dict()
    if pretty:
        text = json.dumps(data, indent=2, ensure_ascii=False)
        text = text.replace("\n", "\n" + INDENT)
    else:
        text = json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    return text.encode(ENCODING)


@handle_file_errors(FileOpenError, "file open failed")
def _open_for_update(path: Path) -> BinaryIO:
    if path.exists():
        return open(path, "r+b")
    logger.debug(f"Creating log file {path}")
    return open(path, "w+b")


@handle_file_errors(FileOpenError, "file read failed")
def _read_bytes(path: Path) -> bytes:
    return path.read_bytes()


def _decode_records(items: Any, path: Path) -> List[LogRecord]:
    try:
        return [LogRecord.from_dict(item) for item in items]
    except ValueError as e:
        raise SerializationError(f"invalid log record in {path}", e) from e


def _last_significant_byte(handle: BinaryIO, end: int) -> Optional[Tuple[int, bytes]]:
    """Offset and value of the last non-whitespace byte before ``end``."""

    while end > 0:
        start = max(0, end - TAIL_CHUNK_SIZE)
        handle.seek(start)
        chunk = handle.read(end - start).rstrip(WHITESPACE)
        if chunk:
            offset = start + len(chunk) - 1
            return offset, chunk[-1:]
        end = start
    return None


class JsonArrayFileSink:
    """Keeps the log file a valid JSON array after every append."""

    file_format = FileFormat.JSON_ARRAY

    def append(self, record: LogRecord, path: PathLike) -> None:
        """
        Append a record inside the JSON array stored at ``path``.

        Args:
            record: Record to persist
            path: Target file; missing parent directories are created

        Raises:
            FileError: If any step fails; nothing is retried
        """
        path = Path(path)
        ensure_parent_directory(path)
        data = encode_record(record, pretty=True)

        handle = _open_for_update(path)
        try:
            self._write_record(handle, data, path)
        finally:
            handle.close()

        logger.debug(f"Appended {record.level} record to {path}")

    @handle_file_errors(WriteError, "append failed")
    def _write_record(self, handle: BinaryIO, data: bytes, path: Path) -> None:
        handle.seek(0, 2)
        size = handle.tell()

        closing = _last_significant_byte(handle, size)
        if closing is None:
            # Empty or whitespace only: start over as a fresh array
            handle.seek(0)
            handle.truncate()
            handle.write(b"[\n" + INDENT.encode() + data + b"\n]")
            return

        closing_offset, closing_byte = closing
        if closing_byte != b"]":
            raise WriteError(f"{path} does not end with a JSON array, refusing to append")

        previous = _last_significant_byte(handle, closing_offset)
        if previous is None:
            raise WriteError(f"{path} has a closing bracket but no array")

        previous_offset, previous_byte = previous
        separator = b"\n" if previous_byte == b"[" else b",\n"

        handle.seek(previous_offset + 1)
        handle.truncate()
        handle.write(separator + INDENT.encode() + data + b"\n]")

    def read(self, path: PathLike) -> List[LogRecord]:
        path = Path(path)
        raw = _read_bytes(path)
        if not raw.strip():
            return []
        try:
            items = json.loads(raw.decode(ENCODING))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise SerializationError(f"{path} is not valid JSON", e) from e
        if not isinstance(items, list):
            raise SerializationError(f"{path} does not hold a JSON array")
        return _decode_records(items, path)


class JsonLinesFileSink:
    """Append-only newline-delimited JSON; no read-before-write."""

    file_format = FileFormat.JSON_LINES

    def append(self, record: LogRecord, path: PathLike) -> None:
        path = Path(path)
        ensure_parent_directory(path)
        data = encode_record(record, pretty=False)
        self._append_line(path, data)
        logger.debug(f"Appended {record.level} record to {path}")

    @handle_file_errors(WriteError, "append failed")
    def _append_line(self, path: Path, data: bytes) -> None:
        with open(path, "ab") as handle:
            handle.write(data + b"\n")

    def read(self, path: PathLike) -> List[LogRecord]:
        """Read every line and wrap the records into a list."""

        path = Path(path)
        raw = _read_bytes(path)
        try:
            text = raw.decode(ENCODING)
        except UnicodeDecodeError as e:
            raise SerializationError(f"{path} is not valid UTF-8", e) from e

        items: List[Dict[str, Any]] = []
        for number, line in enumerate(text.splitlines(), 1):
            if not line.strip():
                continue
            try:
                items.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise SerializationError(f"{path}:{number} is not valid JSON", e) from e
        return _decode_records(items, path)


def sink_for(file_format: FileFormat) -> RecordSink:
    """Select the sink implementation for a file format."""

    file_format = FileFormat(file_format)
    if file_format is FileFormat.JSON_LINES:
        return JsonLinesFileSink()
    return JsonArrayFileSink()


def read_records(path: PathLike, file_format: FileFormat = FileFormat.JSON_ARRAY) -> List[LogRecord]:
    """Load every record stored at ``path`` in call order."""

    return sink_for(file_format).read(path)


__all__ = [
    "RecordSink",
    "JsonArrayFileSink",
    "JsonLinesFileSink",
    "ensure_parent_directory",
    "encode_record",
    "sink_for",
    "read_records",
]
