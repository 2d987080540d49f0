"""Line scores, level progression and fall speed"""
from types import MappingProxyType

LINES_PER_LEVEL = 10
MAX_LEVEL = 29
HARD_DROP_PER_CELL = 2
SOFT_DROP_PER_CELL = 1

LINE_SCORE = MappingProxyType({1: 40, 2: 100, 3: 300, 4: 1200})

# Ticks between automatic falls; levels without an entry use the nearest lower one
FALL_SPEED = MappingProxyType({
    0: 53, 1: 49, 2: 45, 3: 41, 4: 37, 5: 33, 6: 28, 7: 22, 8: 17, 9: 11,
    10: 10, 11: 9, 12: 8, 13: 7, 14: 6, 16: 5, 18: 4, 20: 3, 22: 2, 29: 1,
})


def line_score(level: int, lines: int) -> int:
    return LINE_SCORE.get(lines, 0) * (level + 1)


def early_commit_score(distance: int) -> int:
    return distance * HARD_DROP_PER_CELL


def level_for_lines(lines: int) -> int:
    return min(lines // LINES_PER_LEVEL, MAX_LEVEL)


def fall_speed(level: int) -> int:
    if level > MAX_LEVEL:
        return 1
    while level > 0 and level not in FALL_SPEED:
        level -= 1
    return FALL_SPEED.get(level, FALL_SPEED[0])
