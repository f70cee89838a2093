"""Streaming CSV reading, writing and single-field lookup and update.

Fields are always written quoted, with embedded quotes doubled, and each row
ends with a newline. Reading is lenient: spaces and tabs around unquoted
fields are dropped, blank lines are skipped, stray quotes are kept as text
and an unterminated quoted field runs to the end of the input.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import IO, Iterable, Iterator, Optional, Sequence

__all__ = [
    "CsvError",
    "read_rows",
    "write_field",
    "write_row",
    "write",
    "get_field",
    "edit_field",
]

_CHUNK_SIZE = 1024
_QUOTE = '"'
_DELIMITER = ","
_SPACES = " \t"
_TERMINATORS = "\r\n"


class CsvError(ValueError):
    """Raised when CSV input cannot be read or lacks a required column."""


class _State(Enum):
    ROW_NOT_BEGUN = auto()
    FIELD_NOT_BEGUN = auto()
    FIELD_BEGUN = auto()
    FIELD_MIGHT_HAVE_ENDED = auto()


class _Parser:
    """Incremental CSV parser fed with text chunks."""

    def __init__(self) -> None:
        self._state = _State.ROW_NOT_BEGUN
        self._row: list[str] = []
        self._chars: list[str] = []
        self._quoted = False
        self._spaces = 0
        self._ready: list[list[str]] = []

    def _end_field(self, drop: int = 0) -> None:
        if drop:
            del self._chars[len(self._chars) - drop:]
        self._row.append("".join(self._chars))
        self._chars = []
        self._quoted = False
        self._spaces = 0
        self._state = _State.FIELD_NOT_BEGUN

    def _end_row(self) -> None:
        self._ready.append(self._row)
        self._row = []
        self._state = _State.ROW_NOT_BEGUN

    def _take_ready(self) -> list[list[str]]:
        rows, self._ready = self._ready, []
        return rows

    def feed(self, text: str) -> list[list[str]]:
        """Consume a chunk and return the rows it completed."""
        for char in text:
            state = self._state
            if state in (_State.ROW_NOT_BEGUN, _State.FIELD_NOT_BEGUN):
                self._begin(char)
            elif state is _State.FIELD_BEGUN:
                self._in_field(char)
            else:
                self._after_quote(char)
        return self._take_ready()

    def _begin(self, char: str) -> None:
        if char in _SPACES:
            return
        if char == _DELIMITER:
            self._end_field()
        elif char in _TERMINATORS:
            if self._state is _State.FIELD_NOT_BEGUN:
                self._end_field()
                self._end_row()
        elif char == _QUOTE:
            self._state = _State.FIELD_BEGUN
            self._quoted = True
        else:
            self._state = _State.FIELD_BEGUN
            self._quoted = False
            self._chars.append(char)

    def _in_field(self, char: str) -> None:
        if char == _QUOTE:
            self._chars.append(char)
            self._spaces = 0
            if self._quoted:
                self._state = _State.FIELD_MIGHT_HAVE_ENDED
        elif char == _DELIMITER and not self._quoted:
            self._end_field(self._spaces)
        elif char in _TERMINATORS and not self._quoted:
            self._end_field(self._spaces)
            self._end_row()
        elif char in _SPACES:
            self._chars.append(char)
            self._spaces += 1
        else:
            self._chars.append(char)
            self._spaces = 0

    def _after_quote(self, char: str) -> None:
        if char == _DELIMITER:
            self._end_field(self._spaces + 1)
        elif char in _TERMINATORS:
            self._end_field(self._spaces + 1)
            self._end_row()
        elif char in _SPACES:
            self._chars.append(char)
            self._spaces += 1
        elif char == _QUOTE:
            if self._spaces:
                self._spaces = 0
                self._chars.append(char)
            else:
                # Doubled quote: the first one is already kept.
                self._state = _State.FIELD_BEGUN
        else:
            self._state = _State.FIELD_BEGUN
            self._spaces = 0
            self._chars.append(char)

    def finish(self) -> list[list[str]]:
        """Flush any pending field and row at end of input."""
        state = self._state
        if state is _State.FIELD_MIGHT_HAVE_ENDED:
            self._end_field(self._spaces + 1)
            self._end_row()
        elif state is _State.FIELD_BEGUN:
            self._end_field(0 if self._quoted else self._spaces)
            self._end_row()
        elif state is _State.FIELD_NOT_BEGUN:
            self._end_field()
            self._end_row()
        return self._take_ready()


def read_rows(stream: IO[str]) -> Iterator[list[str]]:
    """Yield each row of a text CSV stream as a list of fields.

    The stream is read in chunks, so stopping the iteration early stops
    reading as well.
    """
    parser = _Parser()
    while chunk := stream.read(_CHUNK_SIZE):
        if not isinstance(chunk, str):
            raise CsvError("CSV input must be a text stream")
        yield from parser.feed(chunk)
    yield from parser.finish()


def write_field(out: IO[str], field: str) -> None:
    """Write one field, quoted, with embedded quotes doubled."""
    out.write(_QUOTE + field.replace(_QUOTE, _QUOTE * 2) + _QUOTE)


def write_row(out: IO[str], fields: Sequence[str]) -> None:
    """Write one row of comma-separated quoted fields, ending with a newline."""
    for position, field in enumerate(fields):
        if position:
            out.write(_DELIMITER)
        write_field(out, field)
    out.write("\n")


def write(out: IO[str], rows: Iterable[Sequence[str]]) -> None:
    """Write several rows."""
    for row in rows:
        write_row(out, row)


def _column_indices(header: Sequence[str], id_column: str, value_column: str) -> tuple[int, int]:
    try:
        id_index = header.index(id_column)
    except ValueError:
        raise CsvError(f"Missing id column: {id_column}") from None
    try:
        value_index = header.index(value_column)
    except ValueError:
        raise CsvError(f"Missing field column: {value_column}") from None
    return id_index, value_index


def get_field(stream: IO[str], id: str, id_column: str, field_column: str) -> Optional[str]:
    """Return ``field_column`` of the first row whose ``id_column`` equals ``id``.

    The first row is the header naming the columns. Returns None when no row
    matches, when a column is missing or when the input cannot be read.
    Reading stops at the first match.
    """
    rows = read_rows(stream)
    try:
        header = next(rows, None)
        if header is None:
            return None
        id_index, value_index = _column_indices(header, id_column, field_column)
        for row in rows:
            if id_index < len(row) and row[id_index] == id:
                return row[value_index] if value_index < len(row) else None
    except CsvError:
        return None
    finally:
        rows.close()
    return None


def edit_field(
    instream: IO[str],
    outstream: IO[str],
    id: str,
    value: str,
    id_column: str,
    value_column: str,
) -> None:
    """Copy CSV from ``instream`` to ``outstream``, setting one field.

    In the first row whose ``id_column`` equals ``id``, ``value_column`` is
    replaced by ``value``; later matches are left alone. If the header lacks
    either column or the input cannot be read, copying stops silently.
    """
    rows = read_rows(instream)
    try:
        header = next(rows, None)
        if header is None:
            return
        id_index, value_index = _column_indices(header, id_column, value_column)
        write_row(outstream, header)
        updated = False
        for row in rows:
            if (
                not updated
                and id_index < len(row)
                and value_index < len(row)
                and row[id_index] == id
            ):
                row[value_index] = value
                updated = True
            write_row(outstream, row)
    except CsvError:
        return
    finally:
        rows.close()