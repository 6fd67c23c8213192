import itertools

import pytest

from match3.components.board import Board
from match3.engine import create, tile_value_at
from match3.errors import BoardConfigurationError, SupplierExhaustedError
from match3.suppliers import CyclicSupplier, QueueSupplier
from match3.systems.board import BoardSystem


def test_board_component_exists():
    board = create(CyclicSupplier('ABC'), 7, 6)
    boards = list(board.world.get_component(Board))
    assert boards, 'Board component missing'
    ent, comp = boards[0]
    assert comp.rows == 6 and comp.cols == 7
    assert len(comp.cells) == 42
    assert len(set(comp.cells.values())) == 42, 'Every cell needs its own tile entity'


def test_initial_board_dimensions():
    board = create(CyclicSupplier('ABC'), 2, 3)
    assert board.width == 2
    assert board.height == 3


def test_initial_board_is_filled_row_major():
    board = create(CyclicSupplier('ABC'), 2, 3)
    assert tile_value_at(board, (0, 0)) == 'A'
    assert tile_value_at(board, (1, 1)) == 'A'
    assert tile_value_at(board, (0, 1)) == 'B'
    assert tile_value_at(board, (2, 0)) == 'B'
    assert tile_value_at(board, (1, 0)) == 'C'
    assert tile_value_at(board, (2, 1)) == 'C'


def test_outside_of_board_reads_as_none():
    board = create(CyclicSupplier('ABC'), 2, 3)
    assert tile_value_at(board, (0, -1)) is None
    assert tile_value_at(board, (-1, 0)) is None
    assert tile_value_at(board, (0, 2)) is None
    assert tile_value_at(board, (3, 0)) is None
    assert board.tile_at((3, 0)) is None


def test_every_out_of_bounds_position_is_absent():
    board = create(CyclicSupplier('ABCD'), 3, 4)
    for row in range(-2, 6):
        for col in range(-2, 5):
            inside = 0 <= row < 4 and 0 <= col < 3
            value = board.tile_value_at((row, col))
            assert (value is not None) == inside, (row, col)


def test_tile_view_carries_position_and_value():
    board = create(CyclicSupplier('ABC'), 2, 3)
    tile = board.tile_at((1, 0))
    assert tile is not None
    assert tile.position == (1, 0)
    assert tile.value == 'C'


def test_callable_supplier_is_supported():
    counter = itertools.count()
    board = create(lambda: next(counter), 2, 2)
    assert board.rows() == ((0, 1), (2, 3))


@pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-1, 2), (2, -5)])
def test_non_positive_dimensions_are_rejected_before_supplying(width, height):
    supplier = QueueSupplier('A', 'B', 'C')
    with pytest.raises(BoardConfigurationError):
        create(supplier, width, height)
    assert supplier.remaining() == 3


@pytest.mark.parametrize("width,height", [(2.5, 3), ("3", 3), (True, 2)])
def test_non_integer_dimensions_are_rejected(width, height):
    with pytest.raises(BoardConfigurationError):
        create(CyclicSupplier('AB'), width, height)


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        create(CyclicSupplier('AB'), 0, 0)


def test_short_supplier_fails_construction():
    with pytest.raises(SupplierExhaustedError):
        create(QueueSupplier('A', 'B', 'C'), 2, 2)


def test_exhausted_iterator_fails_construction():
    with pytest.raises(SupplierExhaustedError):
        create(iter('ABC'), 2, 2)


def test_shares_line():
    assert BoardSystem.shares_line((0, 0), (0, 3))
    assert BoardSystem.shares_line((0, 0), (2, 0))
    assert not BoardSystem.shares_line((0, 0), (1, 1))
