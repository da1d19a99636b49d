"""Window, input handling and the main game loop."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, Sequence

import pygame

from .board import CELL_SIZE, Board, Cell

BACKGROUND = pygame.Color(0, 0, 0)
FILL = pygame.Color(0, 0, 255)
OUTLINE = pygame.Color(255, 255, 255)
FRAME_RATE = 60

_ACTIONS: dict[int, Callable[[Board], bool]] = {
    pygame.K_LEFT: Board.move_left,
    pygame.K_RIGHT: Board.move_right,
    pygame.K_DOWN: Board.move_down,
    pygame.K_UP: Board.rotate,
}


def handle_key(board: Board, key: int) -> bool:
    """Apply the action bound to a key; return whether the board changed."""
    action = _ACTIONS.get(key)
    return action(board) if action is not None else False


def draw(surface: pygame.Surface, board: Board) -> None:
    """Paint the board onto a surface."""
    surface.fill(BACKGROUND)
    for cells, positions in zip(board.grid, board.screen_coordinates()):
        for cell, (x, y) in zip(cells, positions):
            if cell == Cell.EMPTY:
                continue
            rect = pygame.Rect(x, y, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(surface, FILL, rect)
            pygame.draw.rect(surface, OUTLINE, rect, width=1)


def run(board: Board | None = None, interval: float = 1.0) -> int:
    """Open a window and play until it is closed; return the final score."""
    if board is None:
        board = Board()
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (board.columns * CELL_SIZE, board.rows * CELL_SIZE)
        )
        pygame.display.set_caption("Tetris")
        clock = pygame.time.Clock()
        elapsed = 0.0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    handle_key(board, event.key)
            elapsed += clock.tick(FRAME_RATE) / 1000.0
            if elapsed >= interval:
                if board.tick():
                    print(f"SCORE: {board.points}", flush=True)
                elapsed = 0.0
            draw(screen, board)
            pygame.display.flip()
    finally:
        pygame.quit()
    return board.points


def _positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError("interval must be positive")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="blocktris", description="Falling-block game.")
    parser.add_argument(
        "--interval",
        type=_positive_float,
        default=1.0,
        help="seconds between automatic drops (default: 1.0)",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed for pieces")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None
    run(Board(rng=rng), args.interval)
    return 0