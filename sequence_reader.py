import enum
import logging
import re

logger = logging.getLogger(__name__)

LENGTH_PATTERN = re.compile(r"\+?[0-9]+")
INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class ErrorKind(enum.Enum):
    IO = "io"
    UTF8_PARSE = "utf8_parse"
    LEN_PARSE = "len_parse"
    VALUE_PARSE = "value_parse"


class InputReadError(Exception):
    """Raised when a length-prefixed sequence can not be read.

    `kind` tells which step failed, `cause` is the exception that made it fail.
    For VALUE_PARSE errors `index` and `token` point at the bad element.
    """

    def __init__(self, kind, cause, index=None, token=None):
        self.kind = kind
        self.cause = cause
        self.index = index
        self.token = token
        super().__init__(str(self))

    def __str__(self):
        if self.kind is ErrorKind.VALUE_PARSE:
            return f"value {self.index} ({self.token!r}) failed to parse: {self.cause}"
        return f"{self.kind.value} error: {self.cause}"

    def __repr__(self):
        details = f"{self.kind.name}, {self.cause!r}"
        if self.index is not None:
            details += f", index={self.index}, token={self.token!r}"
        return f"InputReadError({details})"


def parse_int(text):
    # int() alone would also take "1_000" and non-ascii digits
    if not INT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid digit found in {text!r}")
    return int(text)


def parse_length(text):
    if not LENGTH_PATTERN.fullmatch(text):
        raise ValueError(f"invalid length {text!r}")
    return int(text)


def read_until(stream, delimiter):
    """Read bytes up to and including delimiter, or until the stream ends."""
    chunk = bytearray()
    while True:
        try:
            byte = stream.read(1)
        except OSError as err:
            raise InputReadError(ErrorKind.IO, err) from err
        if not byte:
            break
        chunk += byte
        if byte == delimiter:
            break
    return bytes(chunk)


def decode(raw):
    try:
        return raw.decode("utf-8").strip()
    except UnicodeDecodeError as err:
        raise InputReadError(ErrorKind.UTF8_PARSE, err) from err


def read_input(stream, parse=parse_int):
    """Read a length-prefixed sequence from a binary stream.

    The first line holds the number of values N. It is followed by N tokens,
    each ended by a single space or by the end of the stream. Every token is
    converted with `parse`, which must raise ValueError or TypeError on bad
    text. Nothing past the last token is read.

    Returns the N values in read order. Raises InputReadError on the first
    failure, so a partial sequence is never returned.
    """
    try:
        length_line = stream.readline()
    except OSError as err:
        raise InputReadError(ErrorKind.IO, err) from err

    length_text = decode(length_line)
    try:
        length = parse_length(length_text)
    except ValueError as err:
        raise InputReadError(ErrorKind.LEN_PARSE, err) from err
    logger.debug(f"Reading {length} values")

    values = []
    for index in range(length):
        token = decode(read_until(stream, b" "))
        try:
            values.append(parse(token))
        except (ValueError, TypeError) as err:
            raise InputReadError(ErrorKind.VALUE_PARSE, err, index=index, token=token) from err
    logger.debug(f"Read {len(values)} values")
    return values
