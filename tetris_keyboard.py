"""pygame keyboard binding for the game's actions"""
from typing import Dict

import pygame

from tetris_input import (DEBUG, HARD_DROP, HOLD, LEFT, RESET, RIGHT, ROTATE,
                          SOFT_DROP, KeyState)

KEYMAP: Dict[int, str] = {
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_UP: ROTATE,
    pygame.K_DOWN: SOFT_DROP,
    pygame.K_SPACE: HARD_DROP,
    pygame.K_c: HOLD,
    pygame.K_r: RESET,
    pygame.K_i: DEBUG,
}


def pressed_actions(keys) -> list:
    """Actions whose key is down in a ``pygame.key.get_pressed()`` snapshot."""
    return [action for key, action in KEYMAP.items() if keys[key]]


def poll_keyboard(state: KeyState) -> KeyState:
    state.advance(pressed_actions(pygame.key.get_pressed()))
    return state
