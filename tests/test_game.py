import pygame
import pytest

from blocktris.board import CELL_SIZE, COLUMNS, ROWS, Board, Cell
from blocktris.game import BACKGROUND, FILL, OUTLINE, draw, handle_key, main


def board_with(falling=(), placed=()):
    grid = [[0] * COLUMNS for _ in range(ROWS)]
    for r, c in falling:
        grid[r][c] = 1
    for r, c in placed:
        grid[r][c] = 2
    return Board(grid)


def falling_of(board):
    return {
        (r, c)
        for r, row in enumerate(board.grid)
        for c, cell in enumerate(row)
        if cell == Cell.FALLING
    }


@pytest.mark.parametrize(
    "key, expected",
    [
        (pygame.K_LEFT, {(5, 3)}),
        (pygame.K_RIGHT, {(5, 5)}),
        (pygame.K_DOWN, {(6, 4)}),
    ],
)
def test_arrow_keys_move_piece(key, expected):
    board = board_with(falling=[(5, 4)])
    assert handle_key(board, key) is True
    assert falling_of(board) == expected


def test_up_key_rotates():
    board = board_with(falling=[(5, 3), (5, 4)])
    assert handle_key(board, pygame.K_UP) is True
    assert falling_of(board) == {(5, 3), (6, 3)}


def test_unbound_key_does_nothing():
    board = board_with(falling=[(5, 4)])
    assert handle_key(board, pygame.K_SPACE) is False
    assert falling_of(board) == {(5, 4)}


def test_draw_paints_occupied_cells():
    board = board_with(falling=[(0, 0)], placed=[(ROWS - 1, COLUMNS - 1)])
    surface = pygame.Surface((COLUMNS * CELL_SIZE, ROWS * CELL_SIZE))
    draw(surface, board)
    half = CELL_SIZE // 2
    assert surface.get_at((half, half)) == FILL
    assert surface.get_at((0, 0)) == OUTLINE
    last_x = (COLUMNS - 1) * CELL_SIZE + half
    last_y = (ROWS - 1) * CELL_SIZE + half
    assert surface.get_at((last_x, last_y)) == FILL


def test_draw_leaves_empty_cells_background():
    board = board_with(falling=[(0, 0)])
    surface = pygame.Surface((COLUMNS * CELL_SIZE, ROWS * CELL_SIZE))
    surface.fill(OUTLINE)
    draw(surface, board)
    half = CELL_SIZE // 2
    assert surface.get_at((CELL_SIZE * 3 + half, CELL_SIZE * 3 + half)) == BACKGROUND


@pytest.mark.parametrize("value", ["0", "-1", "fast"])
def test_main_rejects_bad_interval(value):
    with pytest.raises(SystemExit) as info:
        main(["--interval", value])
    assert info.value.code == 2