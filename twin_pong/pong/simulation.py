"""
The per-frame Twin Pong simulation. It knows nothing about pygame: the
caller supplies the pressed keys, the elapsed time and the screen bounds.
"""

import random
from typing import Optional
from twin_pong.pong.game_object import Ball, Paddle
from twin_pong.models.pong import (
    Bounds,
    Direction,
    FrameResult,
    GameConfig,
    InputState,
    Key,
    RenderSnapshot,
    Score,
    Side,
)
from twin_pong.logger.logger import logger


class PongSimulation:
    """
    Holds the paddles, the ball, the score and the pause/delay session state
    """

    def __init__(
        self,
        bounds: Bounds,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or GameConfig()
        self.left_paddle = Paddle.new(Side.LEFT, bounds)
        self.right_paddle = Paddle.new(Side.RIGHT, bounds)
        self.ball = Ball.new(
            bounds,
            speed=self.config.ball_speed,
            launch_mode=self.config.launch_mode,
            rng=rng,
        )
        self.score = Score()
        self.paused = False
        self.delay = 0.0

    def reset(self, bounds: Bounds):
        """Start a fresh game: initial layout, zero score, no pause or delay."""
        self.reset_positions(bounds)
        self.score = Score()
        self.paused = False
        self.delay = 0.0

    def reset_positions(self, bounds: Bounds):
        """Recenter the ball with a new velocity and recenter both paddles."""
        self.ball.reset(bounds)
        self.left_paddle.reset(bounds)
        self.right_paddle.reset(bounds)
        logger.debug(
            "Ball launched with velocity (%.2f, %.2f)",
            self.ball.velocity.x,
            self.ball.velocity.y,
        )

    def handle_paddle_movement(self, input_state: InputState):
        """
        Both paddles follow the same keys. When several direction keys are
        held, the last one in polling order wins.
        """
        direction = Direction.STAYPUT
        for key in input_state.pressed:
            match (key):
                case Key.UP:
                    direction = Direction.UP
                case Key.DOWN:
                    direction = Direction.DOWN

        for paddle in (self.left_paddle, self.right_paddle):
            paddle.move(direction, self.config.paddle_speed)
            paddle.update()

    def handle_ball_movement(self, y_bound: float):
        """
        Moves the ball and bounces it off the paddles and the horizontal walls
        """
        self.ball.update()
        # both bounces keep the speed the ball had before either of them
        speed = self.ball.speed
        self.ball.bounce_off_left_paddle(self.left_paddle, speed)
        self.ball.bounce_off_right_paddle(self.right_paddle, speed)
        self.ball.bounce_off_walls(y_bound)

    def handle_potential_score(self, x_bound: float) -> Optional[Side]:
        """
        Awards a point when the ball leaves through a side wall and returns
        the side that scored, if any
        """
        if self.ball.has_passed_left_wall():
            scorer = Side.RIGHT
        elif self.ball.has_passed_right_wall(x_bound):
            scorer = Side.LEFT
        else:
            return None

        self.score.increment(scorer)
        return scorer

    def update(
        self, dt: float, input_state: InputState, bounds: Bounds
    ) -> FrameResult:
        """
        Advance the game by one frame.

        Args:
            dt (float): seconds elapsed since the previous frame
            input_state (InputState): keys held and keys just pressed
            bounds (Bounds): current drawable size

        Returns:
            FrameResult: what happened during the frame
        """
        if self.config.pause_enabled and Key.PAUSE in input_state.just_pressed:
            self.paused = not self.paused
            logger.debug("Paused" if self.paused else "Resumed")

        if self.paused:
            return FrameResult(paused=True)

        if self.delay > 0:
            self.delay = max(0.0, self.delay - dt)
            if self.delay == 0:
                logger.debug("Serve delay over")
            return FrameResult(delayed=True)

        self.handle_paddle_movement(input_state)
        self.handle_ball_movement(bounds.height)

        scorer = self.handle_potential_score(bounds.width)
        if scorer is None:
            return FrameResult()

        logger.info("%s player scores: %s", scorer.value.capitalize(), self.score)
        self.reset_positions(bounds)
        self.delay = self.config.score_delay
        return FrameResult(scored=scorer)

    def snapshot(self) -> RenderSnapshot:
        """Read-only view of everything the renderer draws."""
        return RenderSnapshot(
            left_paddle=self.left_paddle.view(),
            right_paddle=self.right_paddle.view(),
            ball=self.ball.view(),
            score_text=str(self.score),
            paused=self.paused,
        )
