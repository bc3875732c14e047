from memorymatch.components.board import Board
from memorymatch.constants import MIN_CARD_SIZE
from memorymatch.events.bus import EVENT_CARD_CLICK, EVENT_MOUSE_PRESS, EventBus
from memorymatch.menu.components import MenuButton
from memorymatch.menu.factory import spawn_controls
from memorymatch.systems.input import InputSystem
from memorymatch.ui.layout import card_index_at, card_origin, compute_board_geometry
from memorymatch.world import create_world


class DummyWindow:
    def __init__(self, width=1024, height=720):
        self.width = width
        self.height = height


def _centre_of(index, grid_size, window):
    geometry = compute_board_geometry(window.width, window.height, grid_size)
    row, col = divmod(index, grid_size)
    x, y = card_origin(row, col, grid_size, geometry)
    half = geometry[0] / 2
    return x + half, y + half


def _clicks(bus):
    received = []
    bus.subscribe(EVENT_CARD_CLICK, lambda sender, **payload: received.append(payload["index"]))
    return received


def test_mouse_press_on_card_emits_card_click():
    bus = EventBus(); world = create_world("easy")
    window = DummyWindow()
    world.create_entity(Board(grid_size=4, difficulty="easy"))
    InputSystem(bus, window, world)
    received = _clicks(bus)

    for index in (0, 5, 15):
        x, y = _centre_of(index, 4, window)
        bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)

    assert received == [0, 5, 15]


def test_row_zero_is_the_top_row():
    window = DummyWindow()
    card_size, start_x, start_y = compute_board_geometry(window.width, window.height, 4)

    assert card_index_at(start_x + 1, start_y + 1, window.width, window.height, 4) == 12
    top = start_y + 4 * card_size - 1
    assert card_index_at(start_x + 1, top, window.width, window.height, 4) == 0


def test_clicks_outside_board_or_with_other_buttons_are_ignored():
    bus = EventBus(); world = create_world("easy")
    window = DummyWindow()
    world.create_entity(Board(grid_size=4, difficulty="easy"))
    InputSystem(bus, window, world)
    received = _clicks(bus)
    x, y = _centre_of(0, 4, window)

    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=4)
    bus.emit(EVENT_MOUSE_PRESS, x=window.width - 5, y=5, button=1)
    bus.emit(EVENT_MOUSE_PRESS, x=None, y=y, button=1)

    assert received == []


def test_control_bar_clicks_do_not_reach_board():
    bus = EventBus(); world = create_world("easy")
    window = DummyWindow()
    world.create_entity(Board(grid_size=4, difficulty="easy"))
    entities = spawn_controls(world, window.width, window.height)
    InputSystem(bus, window, world)
    received = _clicks(bus)
    button = world.component_for_entity(entities[0], MenuButton)

    bus.emit(EVENT_MOUSE_PRESS, x=button.x, y=button.y, button=1)

    assert received == []


def test_no_board_means_no_card_clicks():
    bus = EventBus(); world = create_world("easy")
    InputSystem(bus, DummyWindow(), world)
    received = _clicks(bus)

    bus.emit(EVENT_MOUSE_PRESS, x=100, y=100, button=1)

    assert received == []


def test_card_size_never_drops_below_minimum():
    card_size, _, _ = compute_board_geometry(200, 160, 8)

    assert card_size == MIN_CARD_SIZE
