# pylint: disable=missing-class-docstring
"""
Models related to the Twin Pong game
"""
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field


class Point(BaseModel):

    x: float
    y: float


class Velocity(BaseModel):

    x: float
    y: float


class Direction(Enum):
    UP = -1
    DOWN = 1
    STAYPUT = 0


class Key(Enum):
    UP = "up"
    DOWN = "down"
    PAUSE = "pause"


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"


class LaunchMode(Enum):
    """
    How the ball's launch angle is drawn after a score.
    BANDED keeps the angle within 60 degrees of horizontal and picks a random
    horizontal side, HALF_CIRCLE draws anywhere in [0, pi].
    """

    BANDED = "banded"
    HALF_CIRCLE = "half_circle"


class Bounds(BaseModel):
    width: float = Field(gt=0)
    height: float = Field(gt=0)


class Score(BaseModel):
    left: int = 0
    right: int = 0

    def increment(self, side: Side):
        """
        Adds a point for the given side
        """
        if side == Side.LEFT:
            self.left += 1
        else:
            self.right += 1

    def __str__(self):
        return f"{self.left} - {self.right}"


class InputState(BaseModel):
    """
    Keys held down this frame (in polling order) and keys whose press
    started this frame.
    """

    pressed: List[Key] = []
    just_pressed: List[Key] = []


class FrameResult(BaseModel):
    """
    Effects of a single simulation step
    """

    scored: Optional[Side] = None
    paused: bool = False
    delayed: bool = False


class PaddleView(BaseModel):
    x: float
    y: float
    width: float
    height: float


class BallView(BaseModel):
    x: float
    y: float
    radius: float


class RenderSnapshot(BaseModel):
    left_paddle: PaddleView
    right_paddle: PaddleView
    ball: BallView
    score_text: str
    paused: bool = False


class GameConfig(BaseModel):
    """
    Per-run behaviour of the simulation. The named presets live in
    the game factory.
    """

    pause_enabled: bool = False
    score_delay: float = Field(default=0.0, ge=0)
    launch_mode: LaunchMode = LaunchMode.BANDED
    ball_speed: float = Field(default=6.0, gt=0)
    paddle_speed: float = Field(default=5.0, gt=0)
