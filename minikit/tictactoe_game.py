"""Windowed tic-tac-toe game with a status line above the board."""

from __future__ import annotations

import argparse
import sys

from minikit.tictactoe_board import CELL_SIZE, SIZE, Board

GRID_SIZE = CELL_SIZE * SIZE
MARGIN = 50
WINDOW_WIDTH = GRID_SIZE
WINDOW_HEIGHT = GRID_SIZE + MARGIN


def status_message(board: Board) -> str:
    """The end-of-game message for ``board``, or an empty string while play goes on."""
    if board.check_win("X"):
        return "Player X wins!"
    if board.check_win("O"):
        return "Player O wins!"
    if board.is_full():
        return "It's a draw!"
    return ""


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until it is closed; R restarts a finished game."""
    parser = argparse.ArgumentParser(prog="tic-tac-toe", description="Play tic-tac-toe.")
    parser.add_argument("--font", default=None, help="path of a TrueType font")
    args = parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        try:
            message_font = pygame.font.Font(args.font, 28)
            marker_font = pygame.font.Font(args.font, 140)
        except (OSError, FileNotFoundError):
            print("Error loading font!", file=sys.stderr)
            return 1

        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Tic-Tac-Toe")
        clock = pygame.time.Clock()
        board = Board()
        message = ""
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif (
                    not message
                    and event.type == pygame.MOUSEBUTTONDOWN
                    and event.button == 1
                ):
                    x, y = event.pos
                    board.handle_click(x, y)
                    message = status_message(board)
                elif message and event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                    board.reset()
                    message = ""

            screen.fill((0, 0, 0))
            if message:
                text = message_font.render(message, True, (255, 0, 0))
                screen.blit(text, text.get_rect(center=(WINDOW_WIDTH / 2, MARGIN / 2)))
            for row in range(SIZE):
                for col in range(SIZE):
                    rect = pygame.Rect(col * CELL_SIZE, MARGIN + row * CELL_SIZE, CELL_SIZE, CELL_SIZE)
                    pygame.draw.rect(screen, (255, 255, 255), rect, 2)
                    marker = board.cell(row, col).strip()
                    if marker:
                        glyph = marker_font.render(marker, True, (255, 255, 255))
                        screen.blit(glyph, glyph.get_rect(center=rect.center))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())