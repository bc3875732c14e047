from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored anywhere alive.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float (seconds)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button
EVENT_CARD_CLICK = "card_click"                    # payload: index=int
EVENT_NEW_GAME_REQUEST = "new_game_request"        # payload: None
EVENT_DIFFICULTY_SELECTED = "difficulty_selected"  # payload: difficulty=str


# ============================================================================
# CARDS & TURNS
# ============================================================================
EVENT_CARD_FLIPPED = "card_flipped"            # payload: entity=int, index=int, symbol=str
EVENT_PAIR_MATCHED = "pair_matched"            # payload: entities=(int,int), indices=(int,int), symbol=str
EVENT_PAIR_MISMATCHED = "pair_mismatched"      # payload: entities=(int,int), indices=(int,int)
EVENT_CARDS_UNFLIPPED = "cards_unflipped"      # payload: entities=(int,int), indices=(int,int)
EVENT_MOVES_CHANGED = "moves_changed"          # payload: moves=int


# ============================================================================
# TIMER
# ============================================================================
EVENT_TIMER_START = "timer_start"      # payload: None
EVENT_TIMER_STOP = "timer_stop"        # payload: None
EVENT_TIMER_RESET = "timer_reset"      # payload: None
EVENT_TIMER_CHANGED = "timer_changed"  # payload: seconds=int


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"  # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_SESSION_STARTED = "session_started"      # payload: difficulty=str, grid_size=int, generation=int, cards=list[int]
EVENT_GAME_WON = "game_won"                    # payload: moves=int, time_seconds=int, difficulty=str, grid_size=int


# ============================================================================
# LEADERBOARD & STATUS
# ============================================================================
EVENT_LEADERBOARD_UPDATED = "leaderboard_updated"  # payload: entries=list[LeaderboardEntry], persisted=bool
EVENT_STATUS_MESSAGE = "status_message"            # payload: text=str, level=StatusLevel
