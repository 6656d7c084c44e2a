"""Playing field of the brick breaker: paddle, ball, bricks and their collisions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

SCREEN_WIDTH = 736
SCREEN_HEIGHT = 736
WINDOW_TITLE = "Brick Breaker"
SPEED = 3
BALL_SPEED = 2
BALL_SIZE = 32
COL = 15
ROW = 3
BRICK_SIZE = 24
START_LIVES = 3

Grid = List[List[bool]]


@dataclass
class Rect:
    """Axis-aligned rectangle with integer coordinates."""

    x: int
    y: int
    w: int
    h: int

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    @property
    def size(self) -> tuple[int, int]:
        return (self.w, self.h)

    def intersects(self, other: Rect) -> bool:
        """True if both rectangles are non-empty and share some area."""
        if self.w <= 0 or self.h <= 0 or other.w <= 0 or other.h <= 0:
            return False
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def contains(self, x: int, y: int) -> bool:
        """True if the point lies inside the rectangle, edges included."""
        return self.x <= x <= self.right and self.y <= y <= self.bottom


class Outcome(enum.Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class StepResult:
    """What happened during one step of the simulation."""

    hits: int
    outcome: Outcome
    life_lost: bool


def parse_map(text: str) -> Grid:
    """Read ROW x COL brick flags (0 or 1) separated by whitespace."""
    tokens = text.split()
    needed = ROW * COL
    if len(tokens) < needed:
        raise ValueError(f"map needs {needed} values, found {len(tokens)}")
    flags = []
    for token in tokens[:needed]:
        try:
            value = int(token)
        except ValueError:
            raise ValueError(f"invalid brick value {token!r}") from None
        if value not in (0, 1):
            raise ValueError(f"invalid brick value {token!r}")
        flags.append(bool(value))
    return [flags[row * COL:(row + 1) * COL] for row in range(ROW)]


def load_map(path) -> Grid:
    """Read a brick map from a file."""
    return parse_map(Path(path).read_text())


def brick_rect(row: int, col: int) -> Rect:
    """Screen rectangle of the brick at the given grid cell."""
    x = (col + 1) * BRICK_SIZE + col * BRICK_SIZE - BRICK_SIZE // 2
    y = BRICK_SIZE * 3 + (row + 1) * BRICK_SIZE + row * BRICK_SIZE - BRICK_SIZE // 2
    return Rect(x, y, BRICK_SIZE, BRICK_SIZE)


def _checked_grid(bricks: Iterable[Iterable[bool]]) -> Grid:
    grid = [[bool(cell) for cell in row] for row in bricks]
    if len(grid) != ROW or any(len(row) != COL for row in grid):
        raise ValueError(f"brick grid must be {ROW} rows of {COL} cells")
    return grid


def _start_paddle() -> Rect:
    width = SCREEN_WIDTH // 4
    height = width // 4
    return Rect(SCREEN_WIDTH // 2 - width // 2, SCREEN_HEIGHT - height, width, height)


def _start_ball(paddle: Rect) -> Rect:
    return Rect(paddle.x + paddle.w // 2, paddle.y - BALL_SIZE, BALL_SIZE, BALL_SIZE)


class World:
    """Paddle, ball, bricks and lives, advanced one step at a time."""

    def __init__(self, bricks) -> None:
        self.vx = BALL_SPEED
        self.vy = BALL_SPEED
        self.reset(bricks)

    def reset(self, bricks) -> None:
        """Put paddle and ball back, refill the bricks and lives; velocity is kept."""
        self.bricks = _checked_grid(bricks)
        self.paddle = _start_paddle()
        self.ball = _start_ball(self.paddle)
        self.lives = START_LIVES

    def move_paddle(self, direction: int) -> None:
        """Shift the paddle by SPEED pixels per unit of direction."""
        self.paddle.x += SPEED * direction

    def remaining(self) -> int:
        """Number of bricks still standing."""
        return sum(cell for row in self.bricks for cell in row)

    def step(self) -> StepResult:
        """Move the ball once and resolve every collision."""
        ball = self.ball
        ball.x += self.vx
        ball.y += self.vy

        if ball.intersects(self.paddle):
            self.vy = -self.vy
        if ball.y <= 0:
            self.vy = -self.vy
        if ball.x <= 0 or ball.x + BALL_SIZE >= SCREEN_WIDTH:
            self.vx = -self.vx

        life_lost = False
        if ball.y + BALL_SIZE >= SCREEN_HEIGHT:
            self.vy = -self.vy
            self.lives -= 1
            life_lost = True

        if self.paddle.x <= 0:
            self.paddle.x = 0
        if self.paddle.right >= SCREEN_WIDTH:
            self.paddle.x = SCREEN_WIDTH - self.paddle.w

        hits = 0
        for row, cells in enumerate(self.bricks):
            for col, alive in enumerate(cells):
                if not alive:
                    continue
                brick = brick_rect(row, col)
                if not ball.intersects(brick):
                    continue
                cells[col] = False
                hits += 1
                from_above = ball.y + BALL_SIZE - self.vy <= brick.y
                from_below = ball.y - self.vy >= brick.bottom
                if from_above or from_below:
                    self.vy = -self.vy
                else:
                    self.vx = -self.vx

        if self.remaining() == 0:
            outcome = Outcome.WON
        elif self.lives <= 0:
            outcome = Outcome.LOST
        else:
            outcome = Outcome.PLAYING
        return StepResult(hits=hits, outcome=outcome, life_lost=life_lost)