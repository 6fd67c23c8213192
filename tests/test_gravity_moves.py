import pytest

from match3.effects import MatchEffect, RefillEffect
from match3.engine import create, move
from match3.errors import SupplierExhaustedError
from tests.helpers import board_from_rows, require_board

FIXTURE = ('ABA', 'DBC', 'DAC', 'CDD')


def test_replaces_missing_top_row_with_generated_tiles():
    board, supplier = board_from_rows(*FIXTURE)
    supplier.prepare('B', 'C', 'D')
    result = move(board, (0, 1), (2, 1))
    require_board(result.board, 'BCD', 'DBC', 'DBC', 'CDD')
    assert result.effects[-1] == RefillEffect()


def test_shifts_tiles_down_before_replacing():
    board, supplier = board_from_rows(*FIXTURE)
    supplier.prepare('B', 'C', 'D')
    require_board(move(board, (2, 0), (3, 0)).board, 'BCD', 'ABA', 'DBC', 'CAC')


def test_shifts_tiles_down_before_replacing_multiple_matches():
    board, supplier = board_from_rows(*FIXTURE)
    supplier.prepare('D', 'B', 'C', 'A', 'B', 'A')
    require_board(move(board, (3, 0), (3, 2)).board, 'BBA', 'CBA', 'DAB', 'ADA')


def test_double_match_tile_is_cleared_once():
    board, supplier = board_from_rows('DBA', 'DBC', 'BAB', 'CBD')
    supplier.prepare('D', 'C', 'B', 'B', 'A')
    result = move(board, (0, 1), (2, 1))
    require_board(result.board, 'CAB', 'DBA', 'DDC', 'CAD')
    assert result.effects == (
        MatchEffect('B', ((2, 0), (2, 1), (2, 2))),
        MatchEffect('B', ((1, 1), (2, 1), (3, 1))),
        RefillEffect(),
    )
    # Five distinct cells were cleared, so exactly five values were drawn.
    assert supplier.remaining() == 0


def test_supplier_failure_propagates_from_move():
    board, _ = board_from_rows(*FIXTURE)
    with pytest.raises(SupplierExhaustedError):
        move(board, (0, 1), (2, 1))


def test_supplier_exception_is_not_masked():
    calls = []

    def supplier():
        calls.append(1)
        if len(calls) > 12:
            raise KeyError("out of tiles")
        return 'ABADBCDACCDD'[len(calls) - 1]

    board = create(supplier, 3, 4)
    with pytest.raises(KeyError):
        move(board, (0, 1), (2, 1))
