"""Factory helpers for creating the control bar entities."""
from esper import World

from memorymatch.constants import CONTROL_BUTTON_GAP, CONTROL_BUTTON_WIDTH, SIDE_GAP, TOP_BAR_HEIGHT
from memorymatch.factories.difficulty import all_difficulty_configs
from memorymatch.menu.components import MenuAction, MenuButton, MenuTag


def spawn_controls(world: World, width: float, height: float) -> list[int]:
    """Create one button per difficulty preset followed by a New Game button."""
    center_y = height - TOP_BAR_HEIGHT / 2
    x = SIDE_GAP + CONTROL_BUTTON_WIDTH / 2
    buttons = [
        (config.name, MenuAction.SELECT_DIFFICULTY, config.slug)
        for config in all_difficulty_configs()
    ]
    buttons.append(("New Game", MenuAction.NEW_GAME, None))

    entities: list[int] = []
    for label, action, difficulty in buttons:
        entities.append(
            world.create_entity(
                MenuButton(label=label, action=action, x=x, y=center_y, difficulty=difficulty),
                MenuTag(),
            )
        )
        x += CONTROL_BUTTON_WIDTH + CONTROL_BUTTON_GAP
    return entities


def clear_controls(world: World) -> None:
    for ent, _ in list(world.get_component(MenuTag)):
        world.delete_entity(ent, immediate=True)


def button_at_point(world: World, x: float, y: float) -> MenuButton | None:
    for _, button in world.get_component(MenuButton):
        if button.enabled and button.contains(x, y):
            return button
    return None
