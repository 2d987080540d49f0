"""Per-tick key snapshot of the game's actions"""
from typing import Dict, Iterable

LEFT = "left"
RIGHT = "right"
ROTATE = "rotate"
SOFT_DROP = "soft_drop"
HARD_DROP = "hard_drop"
HOLD = "hold"
RESET = "reset"
DEBUG = "debug"

ACTIONS = (LEFT, RIGHT, ROTATE, SOFT_DROP, HARD_DROP, HOLD, RESET, DEBUG)


class KeyState:
    """Counts how many consecutive ticks each action has been held.

    A count of 1 means the key went down this tick.
    """

    def __init__(self):
        self.ticks: Dict[str, int] = {a: 0 for a in ACTIONS}

    def advance(self, pressed: Iterable[str]):
        down = set(pressed)
        for a in self.ticks:
            self.ticks[a] = self.ticks[a] + 1 if a in down else 0

    def is_just_pressed(self, action: str) -> bool:
        return self.ticks.get(action, 0) == 1

    def is_held(self, action: str) -> bool:
        return self.ticks.get(action, 0) > 0

    def held_ticks(self, action: str) -> int:
        return self.ticks.get(action, 0)
