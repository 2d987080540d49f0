"""Turn/fall controller: gravity, hold slot, queue and the last-chance lock"""
import logging
from collections import deque
from typing import Deque, List, Optional

from tetris_board import Board
from tetris_config import CONFIG
from tetris_input import (DEBUG, HARD_DROP, HOLD, LEFT, RESET, RIGHT, ROTATE,
                          SOFT_DROP, KeyState)
from tetris_piece import OPAQUE, Piece
from tetris_rng import PieceGenerator
from tetris_scoring import (SOFT_DROP_PER_CELL, early_commit_score, fall_speed,
                            level_for_lines, line_score)

logger = logging.getLogger(__name__)

FALLING = "falling"
GROUNDED = "grounded"  # resting on something, inside the last-chance window

OPACITY_STEP = 8
OPACITY_MIN = 128


class Game:
    def __init__(self, config: Optional[dict] = None, generator: Optional[PieceGenerator] = None):
        self.config = {**CONFIG, **(config or {})}
        if self.config["QUEUE_SIZE"] < 1:
            raise ValueError(f"queue size must be at least 1, got {self.config['QUEUE_SIZE']}")
        self.generator = generator or PieceGenerator(self.config["SEED"])
        self._start()

    def _start(self):
        c = self.config
        self.board = Board(c["BOARD_WIDTH"], c["BOARD_HEIGHT"],
                           c["WALL_THICKNESS"], c["FLOOR_THICKNESS"])
        self.queue: Deque[Piece] = deque(
            (self.generator.next_piece() for _ in range(c["QUEUE_SIZE"])),
            maxlen=c["QUEUE_SIZE"])
        self.hold: Optional[Piece] = None
        self.did_hold = False
        self.phase = FALLING
        self.fast_falling = False
        self.fast_fall_paused = False
        self.opacity_rising = False
        self.ticks_since_fall = 0
        self.ticks_since_move = 0
        self.last_chance_ticks = 0
        self.score = 0
        self.lines_cleared = 0
        self.level = 0
        self.show_debug = False
        self.load_next_piece()

    def reset(self):
        logger.debug("reset after score=%d lines=%d", self.score, self.lines_cleared)
        self._start()

    # ---------- queue & hold ----------
    def _spawned(self, piece: Piece) -> Piece:
        return piece.at(self.board.spawn_x(piece), 0)

    def load_next_piece(self):
        nxt = self.queue.popleft()
        self.queue.append(self.generator.next_piece())
        self.falling = self._spawned(nxt)

    def hold_piece(self) -> bool:
        """Swap the falling piece with the hold slot, at most once per turn."""
        if self.did_hold:
            return False
        current = self.falling.reset_rotation().with_opacity(OPAQUE)
        if self.hold is None:
            self.hold = current.at(0, 0)
            self.load_next_piece()
        else:
            self.falling, self.hold = self.hold, current.at(0, 0)
        self.falling = self._spawned(self.falling.reset_rotation().with_opacity(OPAQUE))
        self.did_hold = True
        self.phase = FALLING
        self.last_chance_ticks = 0
        logger.debug("held %s", self.hold.tint)
        return True

    # ---------- locking ----------
    def commit_piece(self):
        self.board.commit(self.falling)
        self.load_next_piece()
        self.clear_lines()
        self.did_hold = False
        self.last_chance_ticks = 0
        self.phase = FALLING

    def clear_lines(self) -> int:
        lines = self.board.clear_lines()
        if lines:
            self.score += line_score(self.level, lines)
            self.lines_cleared += lines
            level = level_for_lines(self.lines_cleared)
            if level != self.level:
                logger.debug("level %d -> %d", self.level, level)
            self.level = level
        return lines

    def early_commit_score(self) -> int:
        return early_commit_score(self.board.drop_distance(self.falling))

    def hard_drop(self):
        self.score += self.early_commit_score()
        self.commit_piece()

    # ---------- tick ----------
    def _wants_shift(self, keys: KeyState, action: str) -> bool:
        return (keys.is_just_pressed(action)
                or keys.held_ticks(action) > self.config["REPEAT_DELAY_TICKS"])

    def update(self, keys: KeyState):
        if keys.is_just_pressed(RESET):
            self.reset()
            return
        if keys.is_just_pressed(DEBUG):
            self.show_debug = not self.show_debug
            return
        if keys.is_just_pressed(HARD_DROP):
            self.hard_drop()
            return
        if keys.is_just_pressed(HOLD) and not self.did_hold:
            self.hold_piece()
            return

        moved = False
        if self._wants_shift(keys, LEFT) and self.board.can_move(self.falling, -1, 0):
            self.falling = self.falling.moved(-1, 0)
            moved = True
        if self._wants_shift(keys, RIGHT) and self.board.can_move(self.falling, 1, 0):
            self.falling = self.falling.moved(1, 0)
            moved = True
        if keys.is_just_pressed(ROTATE) and self.board.can_rotate(self.falling):
            self.falling = self.falling.rotate()
            moved = True

        interval = fall_speed(self.level)
        if not keys.is_held(SOFT_DROP):
            self.fast_fall_paused = False
        if keys.is_held(SOFT_DROP) and not self.fast_fall_paused:
            interval = self.config["FAST_FALL_TICKS"]
            self.fast_falling = True
            if self.board.can_move(self.falling, 0, 1):
                moved = True
        else:
            self.fast_falling = False

        if moved:
            self.ticks_since_move = 0
        else:
            self.ticks_since_move += 1
        self.fall(interval)

    def fall(self, interval: int):
        if self.board.can_move(self.falling, 0, 1):
            self.phase = FALLING
            self.falling = self.falling.with_opacity(OPAQUE)
            if self.ticks_since_fall >= interval:
                self.falling = self.falling.moved(0, 1)
                if self.fast_falling:
                    self.score += SOFT_DROP_PER_CELL
                self.ticks_since_fall = 0
                self.ticks_since_move = 0
            else:
                self.ticks_since_fall += 1
        elif (self.ticks_since_move >= self.config["LAST_CHANCE_MOVE_TICKS"]
              or self.last_chance_ticks >= self.config["LAST_CHANCE_MAX_TICKS"]):
            if self.fast_falling:
                # keep the next piece from inheriting the held soft drop
                self.fast_fall_paused = True
                self.fast_falling = False
            self.commit_piece()
            self.ticks_since_fall = 0
        else:
            self.phase = GROUNDED
            self.last_chance_ticks += 1
            self._flicker()

    def _flicker(self):
        opacity = self.falling.opacity
        if self.opacity_rising:
            opacity += OPACITY_STEP
            if opacity >= OPAQUE:
                opacity = OPAQUE
                self.opacity_rising = False
        else:
            opacity -= OPACITY_STEP
            if opacity <= OPACITY_MIN:
                opacity = OPACITY_MIN
                self.opacity_rising = True
        self.falling = self.falling.with_opacity(opacity)

    # ---------- read-only views ----------
    def ghost_piece(self) -> Piece:
        return self.board.ghost(self.falling)

    def debug_lines(self, fps: Optional[float] = None) -> List[str]:
        lines = []
        if fps is not None:
            lines.append(f"FPS: {fps:.2f}")
        lines += [
            f"Fall Speed: {fall_speed(self.level)}",
            f"Phase: {self.phase}",
            f"Ticks Since Fall: {self.ticks_since_fall}",
            f"Ticks Since Move: {self.ticks_since_move}",
            f"Last Chance Ticks: {self.last_chance_ticks}",
            f"Fast Falling: {self.fast_falling}",
            f"Fast Fall Paused: {self.fast_fall_paused}",
            f"Did Hold Piece: {self.did_hold}",
            f"Early-commit Score: {self.early_commit_score()}",
        ]
        return lines
