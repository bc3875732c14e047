import random

from esper import World

from memorymatch.components.game_state import GameMode, GameState
from memorymatch.components.game_timer import GameTimer
from memorymatch.components.leaderboard import Leaderboard
from memorymatch.components.status_message import StatusMessage
from memorymatch.components.turn_state import TurnState
from memorymatch.constants import DEFAULT_DIFFICULTY
from memorymatch.factories.difficulty import get_difficulty_config


def create_world(
    difficulty: str = DEFAULT_DIFFICULTY,
    *,
    rng: random.Random | None = None,
) -> World:
    """Build a world holding the singleton state components.

    Cards are spawned by ``GameSessionSystem`` when a game starts.
    """
    get_difficulty_config(difficulty)
    world = World()
    setattr(world, "random", rng or random.Random())

    state_entity = world.create_entity()
    world.add_component(state_entity, GameState(mode=GameMode.PLAYING, difficulty=difficulty))
    world.add_component(state_entity, TurnState())
    world.add_component(state_entity, GameTimer())
    world.add_component(state_entity, StatusMessage())
    world.add_component(state_entity, Leaderboard())
    return world
