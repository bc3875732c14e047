from __future__ import annotations

from memorymatch.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    MIN_CARD_SIZE,
    SIDE_GAP,
    SIDE_PANEL_MIN_WIDTH,
    TOP_BAR_HEIGHT,
)


def compute_board_geometry(window_width: float, window_height: float, grid_size: int):
    """Return (card_size, start_x, start_y) for a square board of ``grid_size`` cards.

    Shared by the render and input systems so hit-testing matches what is drawn.
    The board sits left of the leaderboard column, below the control bar.
    """
    max_board_w = min(
        window_width * BOARD_MAX_WIDTH_PCT,
        window_width - SIDE_PANEL_MIN_WIDTH - 2 * SIDE_GAP,
    )
    max_board_h = (window_height - BOTTOM_MARGIN - TOP_BAR_HEIGHT) * BOARD_MAX_HEIGHT_PCT
    card_size = int(min(max_board_w, max_board_h) / max(grid_size, 1))
    if card_size < MIN_CARD_SIZE:
        card_size = MIN_CARD_SIZE
    return card_size, float(SIDE_GAP), float(BOTTOM_MARGIN)


def card_origin(row: int, col: int, grid_size: int, geometry) -> tuple[float, float]:
    """Bottom-left corner of a card cell; row 0 is the top row."""
    card_size, start_x, start_y = geometry
    x = start_x + col * card_size
    y = start_y + (grid_size - 1 - row) * card_size
    return x, y


def card_index_at(
    x: float,
    y: float,
    window_width: float,
    window_height: float,
    grid_size: int,
) -> int | None:
    """Row-major card index under a window point, or None outside the board."""
    card_size, start_x, start_y = compute_board_geometry(window_width, window_height, grid_size)
    board_extent = grid_size * card_size
    if x < start_x or x >= start_x + board_extent:
        return None
    if y < start_y or y >= start_y + board_extent:
        return None
    col = int((x - start_x) // card_size)
    row_from_bottom = int((y - start_y) // card_size)
    row = grid_size - 1 - row_from_bottom
    if 0 <= row < grid_size and 0 <= col < grid_size:
        return row * grid_size + col
    return None


def side_panel_left(window_width: float, window_height: float, grid_size: int) -> float:
    card_size, start_x, _ = compute_board_geometry(window_width, window_height, grid_size)
    return start_x + grid_size * card_size + SIDE_GAP
