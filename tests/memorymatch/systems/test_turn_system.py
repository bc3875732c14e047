import pytest

from memorymatch.components.card import Card
from memorymatch.components.pending_unflip import PendingUnflip
from memorymatch.components.status_message import StatusLevel, StatusMessage
from memorymatch.components.turn_state import TurnPhase
from memorymatch.events.bus import (
    EVENT_CARD_CLICK,
    EVENT_CARDS_UNFLIPPED,
    EVENT_GAME_WON,
    EVENT_PAIR_MATCHED,
    EVENT_PAIR_MISMATCHED,
    EVENT_TICK,
    EVENT_TIMER_START,
    EventBus,
)
from memorymatch.systems.status_system import StatusSystem
from memorymatch.systems.timer_system import TimerSystem
from memorymatch.systems.turn_system import TurnSystem
from memorymatch.utils.game_state import get_or_create_turn_state
from memorymatch.world import create_world
from tests.helpers import drive_ticks, setup_board


@pytest.fixture
def game():
    bus = EventBus()
    world = create_world("easy")
    StatusSystem(world, bus)
    TimerSystem(world, bus)
    turn = TurnSystem(world, bus)
    cards = setup_board(world, ["A", "B", "A", "B"])
    return bus, world, turn, cards


def _card(world, entity) -> Card:
    return world.component_for_entity(entity, Card)


def _record(bus, name):
    events = []
    bus.subscribe(name, lambda sender, **payload: events.append(payload))
    return events


def test_mismatch_flips_back_after_delay(game):
    bus, world, _, cards = game
    mismatches = _record(bus, EVENT_PAIR_MISMATCHED)
    unflipped = _record(bus, EVENT_CARDS_UNFLIPPED)

    bus.emit(EVENT_CARD_CLICK, index=0)
    bus.emit(EVENT_CARD_CLICK, index=1)

    state = get_or_create_turn_state(world)
    assert state.move_count == 1
    assert state.matched_pairs == 0
    assert state.locked is True
    assert state.phase == TurnPhase.RESOLVING
    assert _card(world, cards[0]).face_up and _card(world, cards[1]).face_up
    assert mismatches and mismatches[0]["indices"] == (0, 1)

    drive_ticks(bus, 3, dt=0.25)
    assert _card(world, cards[0]).face_up, "cards stay visible until the delay has elapsed"

    drive_ticks(bus, 1, dt=0.25)
    assert not _card(world, cards[0]).face_up
    assert not _card(world, cards[1]).face_up
    assert state.locked is False
    assert state.first_selection is None and state.second_selection is None
    assert state.phase == TurnPhase.IDLE
    assert unflipped == [{"entities": (cards[0], cards[1]), "indices": (0, 1)}]
    assert not list(world.get_component(PendingUnflip))


def test_match_keeps_cards_face_up(game):
    bus, world, _, cards = game
    matches = _record(bus, EVENT_PAIR_MATCHED)

    bus.emit(EVENT_CARD_CLICK, index=0)
    bus.emit(EVENT_CARD_CLICK, index=2)

    state = get_or_create_turn_state(world)
    assert state.matched_pairs == 1
    assert state.move_count == 1
    assert state.locked is False
    assert state.phase == TurnPhase.IDLE
    for entity in (cards[0], cards[2]):
        card = _card(world, entity)
        assert card.face_up and card.matched
    assert matches[0]["symbol"] == "A"

    drive_ticks(bus, 8, dt=0.25)
    assert _card(world, cards[0]).face_up


def test_clicks_during_mismatch_window_are_ignored(game):
    bus, world, _, cards = game
    bus.emit(EVENT_CARD_CLICK, index=0)
    bus.emit(EVENT_CARD_CLICK, index=1)

    bus.emit(EVENT_CARD_CLICK, index=2)

    state = get_or_create_turn_state(world)
    assert not _card(world, cards[2]).face_up
    assert state.move_count == 1

    drive_ticks(bus, 4, dt=0.25)
    bus.emit(EVENT_CARD_CLICK, index=2)
    assert _card(world, cards[2]).face_up
    assert state.first_selection == cards[2]


def test_clicking_same_card_twice_is_noop(game):
    bus, world, _, cards = game
    bus.emit(EVENT_CARD_CLICK, index=0)
    bus.emit(EVENT_CARD_CLICK, index=0)

    state = get_or_create_turn_state(world)
    assert state.move_count == 0
    assert state.first_selection == cards[0]
    assert state.second_selection is None
    assert state.phase == TurnPhase.ONE_SELECTED


def test_matched_cards_ignore_clicks(game):
    bus, world, _, _ = game
    bus.emit(EVENT_CARD_CLICK, index=0)
    bus.emit(EVENT_CARD_CLICK, index=2)
    bus.emit(EVENT_CARD_CLICK, index=0)

    state = get_or_create_turn_state(world)
    assert state.first_selection is None
    assert state.move_count == 1


def test_timer_starts_on_first_reveal_only(game):
    bus, _, _, _ = game
    starts = _record(bus, EVENT_TIMER_START)

    bus.emit(EVENT_CARD_CLICK, index=0)
    bus.emit(EVENT_CARD_CLICK, index=1)
    drive_ticks(bus, 4, dt=0.25)
    bus.emit(EVENT_CARD_CLICK, index=0)

    assert len(starts) == 1


@pytest.mark.parametrize("payload", [{}, {"index": "0"}, {"index": 99}, {"index": -1}, {"index": True}])
def test_invalid_click_payload_is_reported_and_ignored(game, payload):
    bus, world, _, cards = game
    bus.emit(EVENT_CARD_CLICK, **payload)

    state = get_or_create_turn_state(world)
    assert state.first_selection is None
    assert all(not _card(world, entity).face_up for entity in cards)
    message = list(world.get_component(StatusMessage))[0][1]
    assert message.level == StatusLevel.ERROR


def test_advance_resolves_pending_without_ticks(game):
    bus, world, turn, cards = game
    bus.emit(EVENT_CARD_CLICK, index=0)
    bus.emit(EVENT_CARD_CLICK, index=1)

    turn.advance(1.0)

    assert not _card(world, cards[0]).face_up
    assert get_or_create_turn_state(world).locked is False


def test_game_won_emitted_once_after_last_pair(game):
    bus, world, _, _ = game
    wins = _record(bus, EVENT_GAME_WON)

    bus.emit(EVENT_CARD_CLICK, index=0)
    bus.emit(EVENT_CARD_CLICK, index=2)
    state = get_or_create_turn_state(world)
    assert state.phase != TurnPhase.WON
    assert wins == []

    bus.emit(EVENT_CARD_CLICK, index=1)
    bus.emit(EVENT_CARD_CLICK, index=3)

    assert state.phase == TurnPhase.WON
    assert state.matched_pairs == 2
    assert len(wins) == 1
    assert wins[0]["moves"] == 2
    assert wins[0]["grid_size"] == 2

    bus.emit(EVENT_CARD_CLICK, index=0)
    assert len(wins) == 1


@pytest.mark.parametrize("dt", [-5.0, 0.0, float("nan"), "soon"])
def test_unusable_tick_does_not_move_pending_unflip(game, dt):
    bus, world, _, cards = game
    bus.emit(EVENT_CARD_CLICK, index=0)
    bus.emit(EVENT_CARD_CLICK, index=1)

    bus.emit(EVENT_TICK, dt=dt)

    pending = [unflip for _, unflip in world.get_component(PendingUnflip)]
    assert [unflip.remaining for unflip in pending] == [1.0]
    assert _card(world, cards[0]).face_up

    drive_ticks(bus, 4, dt=0.25)
    assert not _card(world, cards[0]).face_up
