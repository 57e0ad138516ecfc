"""Unit tests for crosswire/grid.py and crosswire/tracer.py."""

import logging

import pytest

from crosswire.grid import ORIGIN, Grid
from crosswire.instructions import Direction, Instruction, ParseError, parse_instructions
from crosswire.tracer import WireTracer, trace, trace_wires, walk


class TestGrid:
    def test_seeded_with_origin(self):
        grid = Grid()
        assert len(grid) == 1
        assert grid.get(0, 0).marker == 1
        assert ORIGIN in grid

    def test_unseeded(self):
        assert len(Grid(seed_origin=False)) == 0

    def test_upsert_inserts_with_wire_index(self):
        grid = Grid()
        cell = grid.upsert(2, -3, 2)
        assert (cell.x, cell.y, cell.marker) == (2, -3, 2)
        assert (2, -3) in grid

    def test_upsert_adds_on_every_revisit(self):
        grid = Grid()
        grid.upsert(1, 1, 1)
        grid.upsert(1, 1, 1)
        grid.upsert(1, 1, 2)
        assert grid.get(1, 1).marker == 4
        assert len(grid) == 2

    def test_cells_in_discovery_order(self):
        grid = Grid()
        grid.upsert(5, 0, 1)
        grid.upsert(-1, 0, 1)
        assert [c.position for c in grid.cells()] == [(0, 0), (5, 0), (-1, 0)]

    def test_get_missing(self):
        assert Grid().get(9, 9) is None


class TestWalk:
    @pytest.mark.parametrize(
        "direction,expected_end",
        [(Direction.R, (7, 3)), (Direction.L, (-1, 3)), (Direction.U, (3, 7)), (Direction.D, (3, -1))],
    )
    def test_unit_steps_on_one_axis(self, direction, expected_end):
        start = (3, 3)
        points = list(walk(Instruction(direction, 4), start))
        assert len(points) == 4
        assert points[-1] == expected_end
        prev = start
        for point in points:
            assert abs(point[0] - prev[0]) + abs(point[1] - prev[1]) == 1
            assert point[0] == start[0] or point[1] == start[1]
            prev = point

    def test_start_not_yielded(self):
        assert (0, 0) not in list(walk(Instruction(Direction.R, 2), (0, 0)))


class TestTrace:
    def test_returns_end_position(self):
        grid = Grid()
        assert trace(Instruction(Direction.U, 3), 1, (2, 0), grid) == (2, 3)
        assert [c.position for c in grid.cells()][1:] == [(2, 1), (2, 2), (2, 3)]

    def test_marks_with_wire_index(self):
        grid = Grid()
        trace(Instruction(Direction.R, 2), 2, (0, 0), grid)
        assert grid.get(1, 0).marker == 2


class TestWireTracer:
    def test_boundary_resets_position_and_advances_wire(self):
        tracer = WireTracer()
        for token in parse_instructions("R3,U2\n"):
            tracer.feed(token)
        assert tracer.wire == 2
        assert tracer.position == ORIGIN

    def test_second_wire_marks_crossings(self):
        grid = trace_wires(parse_instructions("R2\nU1,R1,D1"))
        assert grid.get(1, 0).marker == 3
        assert grid.get(0, 1).marker == 2

    def test_third_wire_rejected(self):
        with pytest.raises(ParseError, match="WIRE_ERR_TOO_MANY_WIRES"):
            trace_wires(parse_instructions("R1\nU1\nL1"))

    def test_trailing_newlines_accepted(self):
        grid = trace_wires(parse_instructions("R1\nU1\n\n"))
        assert len(grid) == 3

    def test_no_duplicate_cells(self):
        grid = trace_wires(
            parse_instructions("R75,D30,R83,U83,L12,D49,R71,U7,L72\nU62,R66,U55,R34,D71,R55,D58,R83\n")
        )
        positions = [cell.position for cell in grid]
        assert len(positions) == len(set(positions))

    def test_self_revisit_accumulates(self):
        grid = trace_wires(parse_instructions("R2,U1,L1,D2"))
        assert grid.get(1, 0).marker == 2

    def test_uses_supplied_grid(self):
        grid = Grid()
        assert trace_wires(parse_instructions("R1"), grid) is grid

    def test_logs_progress(self, caplog):
        caplog.set_level(logging.DEBUG, logger="crosswire")
        trace_wires(parse_instructions("R8\nU7"))
        messages = [r.getMessage() for r in caplog.records]
        assert "wire 1: R8" in messages
        assert "wire 2: U7" in messages
        assert any(m.startswith("RESET") for m in messages)
