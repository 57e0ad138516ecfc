"""Wire-path tokenizer and instruction types for crosswire."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Union

DIGITS = "0123456789"


class ParseError(ValueError):
    """Malformed wire-path input.

    The message always starts with a stable ``WIRE_ERR_*`` code.
    """

    def __init__(self, code: str, detail: str, line: int = 0, column: int = 0):
        self.code = code
        self.detail = detail
        self.line = line
        self.column = column
        where = f" (line {line}, column {column})" if line else ""
        super().__init__(f"{code}: {detail}{where}")


class Direction(str, Enum):
    R = "R"
    L = "L"
    U = "U"
    D = "D"

    @property
    def step(self):
        """Unit (dx, dy) for one step in this direction."""
        return _STEPS[self]


_STEPS = {
    Direction.R: (1, 0),
    Direction.L: (-1, 0),
    Direction.U: (0, 1),
    Direction.D: (0, -1),
}


@dataclass(frozen=True)
class Instruction:
    direction: Direction
    length: int

    def __str__(self) -> str:
        return f"{self.direction.value}{self.length}"


class WireBoundary:
    """Marker emitted by the tokenizer on every newline."""

    def __repr__(self) -> str:
        return "WIRE_BOUNDARY"


WIRE_BOUNDARY = WireBoundary()

Token = Union[Instruction, WireBoundary]


def parse_token(token: str) -> Instruction:
    """Parse a single ``<Direction><Length>`` token such as ``R8``."""
    if not token:
        raise ParseError("WIRE_ERR_EMPTY_TOKEN", "empty token")
    instructions = [t for t in parse_instructions(token) if isinstance(t, Instruction)]
    if len(instructions) != 1:
        raise ParseError("WIRE_ERR_BAD_TOKEN", f"expected exactly one token, got {token!r}")
    return instructions[0]


def parse_instructions(text: str) -> Iterator[Token]:
    """Scan ``text`` character by character, yielding instructions.

    Tokens are comma separated. Each newline yields ``WIRE_BOUNDARY``;
    a ``\\r`` directly before a newline or at end of input is ignored.
    Errors are raised lazily, at the offending character.
    """
    pos = 0
    n = len(text)
    line = 1
    line_start = 0

    while pos < n:
        ch = text[pos]
        if ch == "\r" and (pos + 1 == n or text[pos + 1] == "\n"):
            pos += 1
            continue
        if ch == "\n":
            yield WIRE_BOUNDARY
            pos += 1
            line += 1
            line_start = pos
            continue

        column = pos - line_start + 1
        if ch == ",":
            raise ParseError("WIRE_ERR_EMPTY_TOKEN", "empty token before ','", line, column)
        try:
            direction = Direction(ch)
        except ValueError:
            raise ParseError(
                "WIRE_ERR_BAD_DIRECTION", f"expected one of R, L, U, D, got {ch!r}", line, column
            ) from None

        pos += 1
        digits_start = pos
        while pos < n and text[pos] in DIGITS:
            pos += 1
        if pos == digits_start:
            raise ParseError(
                "WIRE_ERR_BAD_LENGTH", f"missing length after {ch!r}", line, digits_start - line_start + 1
            )
        length = int(text[digits_start:pos])
        if length == 0:
            raise ParseError("WIRE_ERR_BAD_LENGTH", "length must be positive", line, column)

        yield Instruction(direction, length)

        if pos >= n:
            break
        sep = text[pos]
        if sep == ",":
            pos += 1
            # A comma must be followed by another token on the same line.
            if pos >= n or text[pos] in "\r\n":
                raise ParseError(
                    "WIRE_ERR_EMPTY_TOKEN", "trailing ',' at end of line", line, pos - line_start
                )
        elif sep not in "\r\n":
            raise ParseError(
                "WIRE_ERR_BAD_LENGTH",
                f"unexpected {sep!r} after length {length}",
                line,
                pos - line_start + 1,
            )


def parse_wires(text: str) -> List[List[Instruction]]:
    """Group the instruction stream into one list per wire.

    A trailing newline does not open an empty extra wire.
    """
    wires: List[List[Instruction]] = [[]]
    for token in parse_instructions(text):
        if token is WIRE_BOUNDARY:
            wires.append([])
        else:
            wires[-1].append(token)
    if len(wires) > 1 and not wires[-1]:
        wires.pop()
    return wires
