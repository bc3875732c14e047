from __future__ import annotations

import logging
from typing import Any

from esper import World

from memorymatch.components.board import Board
from memorymatch.components.card import Card, CardSlot
from memorymatch.components.game_timer import GameTimer
from memorymatch.components.pending_unflip import PendingUnflip
from memorymatch.components.turn_state import TurnPhase, TurnState
from memorymatch.constants import MISMATCH_DELAY
from memorymatch.errors import InvalidInputError
from memorymatch.events.bus import (
    EVENT_CARD_CLICK,
    EVENT_CARD_FLIPPED,
    EVENT_CARDS_UNFLIPPED,
    EVENT_GAME_WON,
    EVENT_MOVES_CHANGED,
    EVENT_PAIR_MATCHED,
    EVENT_PAIR_MISMATCHED,
    EVENT_TICK,
    EVENT_TIMER_START,
    EVENT_TIMER_STOP,
    EventBus,
)
from memorymatch.utils.entities import delete_entities
from memorymatch.utils.game_state import get_game_state, get_or_create_turn_state
from memorymatch.utils.status import report_error

logger = logging.getLogger(__name__)


class TurnSystem:
    """Resolves card clicks into flips, matches and mismatches.

    A mismatched pair stays visible for ``mismatch_delay`` seconds of tick
    time before a ``PendingUnflip`` turns it back over. Pending unflips carry
    the session generation they were created in and are dropped untouched
    if a reset happened meanwhile.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        mismatch_delay: float = MISMATCH_DELAY,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.mismatch_delay = mismatch_delay
        self.event_bus.subscribe(EVENT_CARD_CLICK, self.on_card_click)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    # Event handlers -----------------------------------------------------

    def on_card_click(self, sender, **payload) -> None:
        try:
            entity = self._resolve_card(payload.get("index"))
        except InvalidInputError as exc:
            report_error(self.event_bus, "Error handling card click", exc)
            return
        self.handle_click(entity)

    def on_tick(self, sender, **payload) -> None:
        dt = payload.get("dt", 1 / 60)
        try:
            seconds = float(dt)
        except (TypeError, ValueError):
            return
        if not seconds > 0:
            return
        self.advance(seconds)

    # Transitions --------------------------------------------------------

    def handle_click(self, entity: int) -> None:
        state = get_or_create_turn_state(self.world)
        card = self.world.component_for_entity(entity, Card)
        if state.phase == TurnPhase.WON or state.locked:
            return
        if card.face_up or card.matched:
            return

        self._flip(entity, card)
        if state.first_selection is None:
            state.first_selection = entity
            state.phase = TurnPhase.ONE_SELECTED
            if not state.started:
                state.started = True
                self.event_bus.emit(EVENT_TIMER_START)
            return

        first_entity = state.first_selection
        first = self.world.component_for_entity(first_entity, Card)
        state.second_selection = entity
        state.locked = True
        state.phase = TurnPhase.RESOLVING
        state.move_count += 1
        self.event_bus.emit(EVENT_MOVES_CHANGED, moves=state.move_count)

        entities = (first_entity, entity)
        indices = (self._index_of(first_entity), self._index_of(entity))
        if first.symbol == card.symbol:
            first.matched = True
            card.matched = True
            state.matched_pairs += 1
            self._clear_selection(state)
            self.event_bus.emit(EVENT_PAIR_MATCHED, entities=entities, indices=indices, symbol=card.symbol)
            if state.matched_pairs >= state.total_pairs:
                self._win(state)
        else:
            self.world.create_entity(
                PendingUnflip(
                    first=first_entity,
                    second=entity,
                    remaining=self.mismatch_delay,
                    generation=state.generation,
                )
            )
            self.event_bus.emit(EVENT_PAIR_MISMATCHED, entities=entities, indices=indices)

    def advance(self, seconds: float) -> None:
        """Run down pending unflips by ``seconds`` and resolve the due ones."""
        pending = list(self.world.get_component(PendingUnflip))
        if not pending:
            return
        state = get_or_create_turn_state(self.world)
        for pending_entity, unflip in pending:
            if unflip.generation != state.generation:
                logger.debug("Discarding stale unflip from generation %d", unflip.generation)
                delete_entities(self.world, (pending_entity,))
                continue
            unflip.remaining -= seconds
            if unflip.remaining > 0:
                continue
            delete_entities(self.world, (pending_entity,))
            self._resolve_mismatch(state, unflip)

    # Internals ----------------------------------------------------------

    def _resolve_mismatch(self, state: TurnState, unflip: PendingUnflip) -> None:
        entities = (unflip.first, unflip.second)
        for entity in entities:
            try:
                card = self.world.component_for_entity(entity, Card)
            except KeyError:
                continue
            if not card.matched:
                card.face_up = False
        self._clear_selection(state)
        self.event_bus.emit(
            EVENT_CARDS_UNFLIPPED,
            entities=entities,
            indices=tuple(self._index_of(entity) for entity in entities),
        )

    def _win(self, state: TurnState) -> None:
        state.phase = TurnPhase.WON
        self.event_bus.emit(EVENT_TIMER_STOP)
        game_state = get_game_state(self.world)
        elapsed = 0
        for _, timer in self.world.get_component(GameTimer):
            elapsed = timer.elapsed_seconds
            break
        grid_size = 0
        for _, board in self.world.get_component(Board):
            grid_size = board.grid_size
            break
        logger.info("Game won in %d moves and %d seconds", state.move_count, elapsed)
        self.event_bus.emit(
            EVENT_GAME_WON,
            moves=state.move_count,
            time_seconds=elapsed,
            difficulty=game_state.difficulty,
            grid_size=grid_size,
        )

    def _flip(self, entity: int, card: Card) -> None:
        card.face_up = True
        self.event_bus.emit(EVENT_CARD_FLIPPED, entity=entity, index=self._index_of(entity), symbol=card.symbol)

    @staticmethod
    def _clear_selection(state: TurnState) -> None:
        state.first_selection = None
        state.second_selection = None
        state.locked = False
        if state.phase != TurnPhase.WON:
            state.phase = TurnPhase.IDLE

    def _resolve_card(self, index: Any) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidInputError(f"card index must be an integer, got {index!r}")
        for entity, slot in self.world.get_component(CardSlot):
            if slot.index == index:
                return entity
        raise InvalidInputError(f"no card at index {index}")

    def _index_of(self, entity: int) -> int:
        try:
            return self.world.component_for_entity(entity, CardSlot).index
        except KeyError:
            return -1
