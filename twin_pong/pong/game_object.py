"""
Functionality related to the paddles and the ball.
Positions are floats in screen coordinates: the origin is the top-left
corner and y grows downwards.
"""

import math
import random
from abc import ABC, abstractmethod
from typing import Optional
from twin_pong.pong import constants
from twin_pong.models.pong import (
    BallView,
    Bounds,
    Direction,
    LaunchMode,
    PaddleView,
    Point,
    Side,
    Velocity,
)


class GameObject(ABC):
    """
    Abstract class with methods to be implemented by various game objects.
    """

    def __init__(self, x: float, y: float):
        self.position = Point(x=x, y=y)
        self.velocity = Velocity(x=0, y=0)

    @abstractmethod
    def update(self):
        """
        Advance the game object by one frame
        """

    @abstractmethod
    def reset(self, bounds: Bounds):
        """
        Put the game object back at its starting place
        """


class Paddle(GameObject):
    """
    Represents a paddle that slides vertically at a fixed x.
    The position is the top-left corner of the paddle.
    """

    @staticmethod
    def new(side: Side, bounds: Bounds) -> "Paddle":
        """
        Create a new paddle guarding the given side, vertically centered
        """
        paddle = Paddle(side, 0, 0)
        paddle.reset(bounds)
        return paddle

    def __init__(
        self,
        side: Side,
        x: float,
        y: float,
        width: float = constants.PADDLE_WIDTH,
        height: float = constants.PADDLE_HEIGHT,
    ):
        super().__init__(x, y)
        self.side = side
        self.width = width
        self.height = height

    @property
    def center_y(self) -> float:
        return self.position.y + self.height / 2

    def reset(self, bounds: Bounds):
        """
        Resets the paddle to the vertical center of the screen.
        The x is recomputed from the bounds in case the window size changed.
        """
        if self.side == Side.LEFT:
            self.position.x = constants.PADDLE_MARGIN
        else:
            self.position.x = bounds.width - self.width - constants.PADDLE_MARGIN
        self.position.y = bounds.height / 2 - self.height / 2
        self.velocity.y = 0

    def move(self, direction: Direction, speed: float = constants.PADDLE_SPEED):
        """
        Move essentially changes the velocity of the paddle so that it can
        move to another position in the next update
        """
        self.velocity.y = direction.value * speed

    def update(self):
        """
        Updates the position of the paddle. The paddle is not clamped
        to the screen.
        """
        self.position.y += self.velocity.y

    def offset_ratio(self, y: float) -> float:
        """
        Distance of y from the paddle center, where 1 is the paddle's edge
        """
        return (y - self.center_y) / (self.height / 2)

    def view(self) -> PaddleView:
        return PaddleView(
            x=self.position.x,
            y=self.position.y,
            width=self.width,
            height=self.height,
        )


class Ball(GameObject):
    """
    Represents the ball. The position is the center of the ball.
    """

    @staticmethod
    def new(
        bounds: Bounds,
        speed: float = constants.BALL_SPEED,
        launch_mode: LaunchMode = LaunchMode.BANDED,
        rng: Optional[random.Random] = None,
    ) -> "Ball":
        """
        Create a new ball at the center of the screen with a random velocity
        """
        ball = Ball(0, 0, speed=speed, launch_mode=launch_mode, rng=rng)
        ball.reset(bounds)
        return ball

    def __init__(
        self,
        x: float,
        y: float,
        radius: float = constants.BALL_RADIUS,
        speed: float = constants.BALL_SPEED,
        launch_mode: LaunchMode = LaunchMode.BANDED,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(x, y)
        self.radius = radius
        self.launch_speed = speed
        self.launch_mode = launch_mode
        self.rng = rng or random.Random()

    @staticmethod
    def random_velocity(
        speed: float, launch_mode: LaunchMode, rng: random.Random
    ) -> Velocity:
        """
        Draws a launch velocity with the given magnitude.

        BANDED avoids angles close to vertical so the ball always has a
        reasonable horizontal component, and serves to either side.
        HALF_CIRCLE draws over [0, pi] without a side flip, so it can produce
        steep launches and never launches upwards.
        """
        match (launch_mode):
            case LaunchMode.BANDED:
                angle = rng.uniform(
                    -constants.BALL_LAUNCH_MAX_ANGLE, constants.BALL_LAUNCH_MAX_ANGLE
                )
                x_direction = 1.0 if rng.random() < 0.5 else -1.0
                return Velocity(
                    x=x_direction * math.cos(angle) * speed,
                    y=math.sin(angle) * speed,
                )
            case LaunchMode.HALF_CIRCLE:
                angle = rng.uniform(0, math.pi)
                return Velocity(x=math.cos(angle) * speed, y=math.sin(angle) * speed)
            case _:
                raise ValueError(f"Invalid launch mode: {launch_mode}")

    @property
    def speed(self) -> float:
        return math.hypot(self.velocity.x, self.velocity.y)

    def reset(self, bounds: Bounds):
        """
        Recenters the ball and gives it a fresh random velocity
        """
        self.position.x = bounds.width / 2
        self.position.y = bounds.height / 2
        self.velocity = self.random_velocity(
            self.launch_speed, self.launch_mode, self.rng
        )

    def update(self):
        """
        Updates the position of the ball based on its velocity
        """
        self.position.x += self.velocity.x
        self.position.y += self.velocity.y

    def bounce_off_left_paddle(self, paddle: Paddle, speed: float) -> bool:
        """
        Sends the ball rightwards if its left edge is inside the band in front
        of the paddle's facing surface. The offset ratio is used as the
        bounce angle in radians; hits beyond the paddle's edge are ignored.
        The new velocity has the given speed.
        """
        surface_x = paddle.position.x + paddle.width
        leading_edge = self.position.x - self.radius
        if not surface_x - paddle.width < leading_edge < surface_x:
            return False

        angle = paddle.offset_ratio(self.position.y)
        if abs(angle) > 1:
            return False
        self.velocity = Velocity(x=math.cos(angle) * speed, y=math.sin(angle) * speed)
        return True

    def bounce_off_right_paddle(self, paddle: Paddle, speed: float) -> bool:
        """
        Mirror of bounce_off_left_paddle for the right paddle. The x component
        is negated since the ball travels leftwards after the bounce.
        """
        surface_x = paddle.position.x
        leading_edge = self.position.x + self.radius
        if not surface_x < leading_edge < surface_x + paddle.width:
            return False

        angle = paddle.offset_ratio(self.position.y)
        if abs(angle) > 1:
            return False
        self.velocity = Velocity(
            x=math.cos(angle) * -speed, y=math.sin(angle) * speed
        )
        return True

    def bounce_off_walls(self, y_bound: float) -> bool:
        """
        Reflects the vertical velocity when the ball touches the top or bottom
        wall. The position is not corrected, so the ball may sit slightly past
        the wall for a frame.
        """
        if self.position.y - self.radius < 0 or self.position.y + self.radius > y_bound:
            self.velocity.y = -self.velocity.y
            return True
        return False

    def has_passed_left_wall(self) -> bool:
        return self.position.x - self.radius < 0

    def has_passed_right_wall(self, x_bound: float) -> bool:
        return self.position.x + self.radius > x_bound

    def view(self) -> BallView:
        return BallView(x=self.position.x, y=self.position.y, radius=self.radius)
