from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

import shared


class GameState(str, Enum):
    START = "start"
    PLAYING = "playing"
    GAME_OVER = "gameOver"


@dataclass(frozen=True)
class Bird:
    x: float
    y: float
    velocity: float = 0.0

    def tilt(self):
        # Degrees, nose up while climbing
        return max(-30.0, min(30.0, self.velocity * 3))


@dataclass(frozen=True)
class Pipe:
    x: float
    top_height: float   # Bottom edge of the upper segment
    passed: bool = False

    @property
    def bottom_y(self):
        # Top edge of the lower segment
        return self.top_height + shared.CONSTANTS['PIPE_GAP']

    @property
    def right(self):
        return self.x + shared.CONSTANTS['PIPE_WIDTH']


def start_bird():
    return Bird(x=shared.CONSTANTS['BIRD_X'], y=shared.CONSTANTS['GAME_HEIGHT'] / 2, velocity=0.0)


@dataclass(frozen=True)
class GameSession:
    state: GameState = GameState.START
    score: int = 0
    high_score: int = 0
    bird: Bird = field(default_factory=start_bird)
    pipes: Tuple[Pipe, ...] = ()    # Oldest (smallest x) first


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a session handed to the render sink once per frame."""
    state: GameState
    score: int
    high_score: int
    bird: Bird
    pipes: Tuple[Pipe, ...]

    @classmethod
    def of(cls, session):
        return cls(state=session.state, score=session.score, high_score=session.high_score,
                   bird=session.bird, pipes=tuple(session.pipes))

    @property
    def is_new_high_score(self):
        return self.state is GameState.GAME_OVER and self.score > 0 and self.score == self.high_score
