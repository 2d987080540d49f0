import unittest

import pygame

from tetris_input import HARD_DROP, LEFT, SOFT_DROP
from tetris_keyboard import KEYMAP, pressed_actions


class KeyboardTests(unittest.TestCase):
    def snapshot(self, *down):
        keys = {key: False for key in KEYMAP}
        keys.update({key: True for key in down})
        return keys

    def test_nothing_down(self):
        self.assertEqual(pressed_actions(self.snapshot()), [])

    def test_maps_keys_to_actions(self):
        got = pressed_actions(self.snapshot(pygame.K_SPACE, pygame.K_LEFT, pygame.K_DOWN))
        self.assertEqual(sorted(got), sorted([HARD_DROP, LEFT, SOFT_DROP]))

    def test_every_action_has_a_key(self):
        self.assertEqual(len(set(KEYMAP.values())), len(KEYMAP))


if __name__ == "__main__":
    unittest.main()
