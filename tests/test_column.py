import random

import pytest

from columns.components.block import BlockKind
from columns.components.column import Column
from columns.components.pit import new_heap
from columns.components.position import Vec2
from columns.config import GameConfig
from tests.helpers import fill, shaft

CONFIG = GameConfig()
DELTA = CONFIG.fall_seconds
STARTING_X = CONFIG.starting_x
STARTING_Y = CONFIG.starting_y


@pytest.fixture
def heap():
    return new_heap(CONFIG.columns, CONFIG.rows)


@pytest.fixture
def column():
    return Column.from_shaft(shaft(BlockKind.BLUE, BlockKind.YELLOW, BlockKind.GREEN), CONFIG)


def test_spawn_places_column_at_start():
    col = Column.spawn(random.Random(3), CONFIG)
    assert (col.x, col.y) == (STARTING_X, STARTING_Y)
    assert col.dropping
    assert len(col.shaft) == CONFIG.shaft_size
    assert all(not block.empty for block in col.shaft)


def test_spawn_draws_varied_shafts():
    rng = random.Random(7)
    shafts = {
        tuple(block.kind for block in Column.spawn(rng, CONFIG).shaft)
        for _ in range(10)
    }
    assert len(shafts) > 1, "ten spawned columns were identical"


def test_spawn_respects_block_kind_limit():
    config = GameConfig(block_kinds=2)
    rng = random.Random(11)
    for _ in range(20):
        col = Column.spawn(rng, config)
        assert {block.kind for block in col.shaft} <= {BlockKind.BLUE, BlockKind.YELLOW}


def test_cycle_moves_blocks_down_and_wraps_base(column):
    column.cycle()
    assert [block.kind for block in column.shaft] == [
        BlockKind.GREEN,
        BlockKind.BLUE,
        BlockKind.YELLOW,
    ]


def test_update_drops_after_interval(heap, column):
    column.update(heap, DELTA - 0.001)
    assert column.y == 0
    assert column.update(heap, 0.001)
    assert column.y == 1


def test_lateral_moves_stop_at_walls(heap, column):
    for _ in range(CONFIG.columns):
        column.move_left(heap)
    assert column.x == 0
    for _ in range(CONFIG.columns * 2):
        column.move_right(heap)
    assert column.x == CONFIG.columns - 1


def test_lateral_moves_blocked_by_neighbours(heap, column):
    fill(heap, [(STARTING_X - 1, STARTING_Y), (STARTING_X + 1, STARTING_Y)], BlockKind.RED)
    column.move_left(heap)
    assert column.x == STARTING_X
    column.move_right(heap)
    assert column.x == STARTING_X


def test_move_down_stops_at_floor(heap, column):
    for _ in range(CONFIG.rows * 2):
        column.move_down(heap)
    assert column.y == CONFIG.rows - 1


def test_landed_column_ignores_commands(heap, column):
    fill(heap, [(STARTING_X, STARTING_Y + 1)], BlockKind.RED)
    assert column.detect_landing(heap, DELTA) is not None
    before = [block.kind for block in column.shaft]
    column.cycle()
    column.move_left(heap)
    column.move_down(heap)
    assert [block.kind for block in column.shaft] == before
    assert (column.x, column.y) == (STARTING_X, STARTING_Y)
    assert not column.update(heap, DELTA)


def test_landing_on_heap_transfers_only_in_bounds_base(heap, column):
    assert column.detect_landing(heap, DELTA) is None

    fill(heap, [(STARTING_X, STARTING_Y + 1)], BlockKind.RED)

    assert column.detect_landing(heap, DELTA) == [Vec2.xy(STARTING_X, STARTING_Y)]
    assert not column.dropping
    assert heap[STARTING_X][STARTING_Y].kind is BlockKind.GREEN


def test_landing_reached_bottom(heap, column):
    for _ in range(1, CONFIG.rows):
        column.move_down(heap)

    rows = CONFIG.rows
    assert column.detect_landing(heap, DELTA) == [
        Vec2.xy(STARTING_X, rows - 1),
        Vec2.xy(STARTING_X, rows - 2),
        Vec2.xy(STARTING_X, rows - 3),
    ]
    assert heap[STARTING_X][rows - 1].kind is BlockKind.GREEN
    assert heap[STARTING_X][rows - 2].kind is BlockKind.YELLOW
    assert heap[STARTING_X][rows - 3].kind is BlockKind.BLUE


def test_landing_waits_for_final_grace_tick(heap, column):
    fill(heap, [(STARTING_X, STARTING_Y + 1)], BlockKind.RED)

    assert column.detect_landing(heap, DELTA / 2) is None
    assert column.dropping
    assert column.move_timer.remaining == DELTA, "probe must not touch the live timer"

    column.cycle()
    column.move_timer.update(DELTA / 2)
    assert column.detect_landing(heap, DELTA / 2) == [Vec2.xy(STARTING_X, STARTING_Y)]
    assert heap[STARTING_X][STARTING_Y].kind is BlockKind.YELLOW


def test_partial_landing_never_writes_out_of_bounds(heap, column):
    fill(heap, [(STARTING_X, y) for y in range(2, CONFIG.rows)], BlockKind.RED)
    column.move_down(heap)
    occupied_before = sum(not block.empty for cells in heap for block in cells)

    origins = column.detect_landing(heap, DELTA)

    assert origins == [Vec2.xy(STARTING_X, 1), Vec2.xy(STARTING_X, 0)]
    occupied_after = sum(not block.empty for cells in heap for block in cells)
    assert occupied_after - occupied_before == 2


def test_cells_only_yield_while_airborne(heap, column):
    assert [pos for pos, _ in column.cells()] == [Vec2.xy(STARTING_X, STARTING_Y)]
    column.move_down(heap)
    column.move_down(heap)
    assert [pos for pos, _ in column.cells()] == [
        Vec2.xy(STARTING_X, 2),
        Vec2.xy(STARTING_X, 1),
        Vec2.xy(STARTING_X, 0),
    ]
    for _ in range(CONFIG.rows):
        column.move_down(heap)
    column.detect_landing(heap, DELTA)
    assert list(column.cells()) == []
