"""Step-by-step wire tracing onto a Grid."""

import logging
from typing import Iterable, Iterator, Optional, Tuple

from crosswire.grid import ORIGIN, Grid
from crosswire.instructions import WIRE_BOUNDARY, Instruction, ParseError, Token

logger = logging.getLogger(__name__)

MAX_WIRES = 2

Position = Tuple[int, int]


def walk(instruction: Instruction, start: Position) -> Iterator[Position]:
    """Yield every position along ``instruction``, one unit step at a time.

    ``start`` itself is not yielded; the last position is the segment's end.
    """
    dx, dy = instruction.direction.step
    x, y = start
    for _ in range(instruction.length):
        x += dx
        y += dy
        yield (x, y)


def trace(instruction: Instruction, wire: int, position: Position, grid: Grid) -> Position:
    """Upsert each cell of ``instruction`` for ``wire`` and return the end position."""
    for x, y in walk(instruction, position):
        grid.upsert(x, y, wire)
        position = (x, y)
    return position


class WireTracer:
    """Consumes the tokenizer stream and lays both wires onto a grid."""

    def __init__(self, grid: Optional[Grid] = None):
        self.grid = grid if grid is not None else Grid()
        self.wire = 1
        self.position: Position = ORIGIN

    def feed(self, token: Token) -> None:
        if token is WIRE_BOUNDARY:
            self.reset()
            return
        if self.wire > MAX_WIRES:
            raise ParseError(
                "WIRE_ERR_TOO_MANY_WIRES",
                f"instruction {token} belongs to wire {self.wire}, only {MAX_WIRES} are supported",
            )
        logger.debug("wire %d: %s", self.wire, token)
        self.position = trace(token, self.wire, self.position, self.grid)

    def reset(self) -> None:
        self.wire += 1
        self.position = ORIGIN
        logger.info("RESET: back to origin, tracing wire %d", self.wire)


def trace_wires(stream: Iterable[Token], grid: Optional[Grid] = None) -> Grid:
    tracer = WireTracer(grid)
    for token in stream:
        tracer.feed(token)
    logger.info("traced %d wire(s) over %d distinct cells", min(tracer.wire, MAX_WIRES), len(tracer.grid))
    return tracer.grid
