from __future__ import annotations

from typing import TYPE_CHECKING, Any

from memorymatch.components.card import Card, CardSlot
from memorymatch.constants import CARD_PADDING, HIDDEN_FACE
from memorymatch.ui.layout import card_origin

if TYPE_CHECKING:
    from memorymatch.systems.render import RenderSystem

FACE_DOWN_COLOR = (52, 73, 94)
FACE_UP_COLOR = (236, 240, 241)
MATCHED_COLOR = (46, 204, 113)


class BoardRenderer:
    def __init__(self, render_system: RenderSystem, padding: int = CARD_PADDING):
        self._rs = render_system
        self._padding = padding

    def render(self, arcade, geometry, grid_size: int, headless: bool) -> list[dict[str, Any]]:
        """Lay out (and unless headless, draw) every card; returns the layout."""
        rs = self._rs
        card_size = geometry[0]
        inner = max(card_size - 2 * self._padding, 1)
        layout: list[dict[str, Any]] = []
        for ent, (card, slot) in rs.world.get_components(Card, CardSlot):
            x, y = card_origin(slot.row, slot.col, grid_size, geometry)
            face = rs.card_faces.get(slot.index, HIDDEN_FACE)
            entry = {
                "entity": ent,
                "index": slot.index,
                "x": x + self._padding,
                "y": y + self._padding,
                "size": inner,
                "face": face,
                "matched": card.matched,
            }
            layout.append(entry)
            if headless:
                continue
            if card.matched:
                color = MATCHED_COLOR
            elif face != HIDDEN_FACE:
                color = FACE_UP_COLOR
            else:
                color = FACE_DOWN_COLOR
            arcade.draw_lbwh_rectangle_filled(entry["x"], entry["y"], inner, inner, color)
            arcade.draw_lbwh_rectangle_outline(entry["x"], entry["y"], inner, inner, arcade.color.WHITE, border_width=2)
            arcade.draw_text(
                face,
                entry["x"] + inner / 2,
                entry["y"] + inner / 2,
                arcade.color.BLACK,
                max(int(inner * 0.45), 8),
                anchor_x="center",
                anchor_y="center",
            )
        layout.sort(key=lambda item: item["index"])
        return layout
