CONFIG = {
    "CELL_SIZE": 32,
    "TPS": 60,
    "BOARD_WIDTH": 10,
    "BOARD_HEIGHT": 20,
    "WALL_THICKNESS": 1,        # must be >= 1
    "FLOOR_THICKNESS": 1,       # must be >= 1
    "QUEUE_SIZE": 3,
    "REPEAT_DELAY_TICKS": 10,   # held ticks before left/right auto-repeat
    "FAST_FALL_TICKS": 1,
    "LAST_CHANCE_MOVE_TICKS": 30,
    "LAST_CHANCE_MAX_TICKS": 120,
    "SEED": None,
    "LOG_LEVEL": "WARNING",
}
