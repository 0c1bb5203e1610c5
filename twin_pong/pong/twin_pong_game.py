# pylint: disable=no-member
"""
Functionality for wiring the Twin Pong simulation to pygame: the window,
the keyboard, the frame clock and the drawing.
"""
import random
from typing import Iterable, List, Optional
import pygame
from twin_pong.pong import constants
from twin_pong.pong.base_game import BasePongGame
from twin_pong.pong.simulation import PongSimulation
from twin_pong.models.pong import (
    Bounds,
    FrameResult,
    GameConfig,
    InputState,
    Key,
    RenderSnapshot,
)

# Polling order matters: when both are held, the later binding wins
MOVEMENT_BINDINGS = (
    (pygame.K_w, Key.UP),
    (pygame.K_UP, Key.UP),
    (pygame.K_s, Key.DOWN),
    (pygame.K_DOWN, Key.DOWN),
)
PAUSE_KEYS = (pygame.K_SPACE,)
QUIT_KEYS = (pygame.K_ESCAPE,)


def pressed_keys(key_state) -> List[Key]:
    """
    Maps pygame's held-key state to game keys, in binding order
    """
    return [key for code, key in MOVEMENT_BINDINGS if key_state[code]]


def just_pressed_keys(events: Iterable[pygame.event.Event]) -> List[Key]:
    """
    Maps this frame's KEYDOWN events to game keys
    """
    keys = []
    for event in events:
        if event.type == pygame.KEYDOWN and event.key in PAUSE_KEYS:
            keys.append(Key.PAUSE)
    return keys


class TwinPongGame(BasePongGame):
    """
    Twin Pong game class
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        headless: bool = False,
        fps: int = constants.FPS,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or GameConfig()
        self.headless = headless
        self.fps = fps
        if not headless:
            pygame.init()
            self.screen = pygame.display.set_mode(
                (constants.SCREEN_WIDTH, constants.SCREEN_HEIGHT)
            )
            pygame.display.set_caption(constants.SCREEN_CAPTION)
            self.score_font = pygame.font.Font(None, constants.SCORE_FONT_SIZE)
            self.pause_font = pygame.font.Font(None, constants.PAUSE_FONT_SIZE)
        else:
            # Off-screen surface so the bounds come from the same place
            self.screen = pygame.Surface(
                (constants.SCREEN_WIDTH, constants.SCREEN_HEIGHT)
            )
        self.clock = pygame.time.Clock()
        self.simulation = PongSimulation(self.bounds(), self.config, rng=rng)
        self.running = False

    def bounds(self) -> Bounds:
        """Current drawable size of the screen."""
        width, height = self.screen.get_size()
        return Bounds(width=width, height=height)

    def reset(self) -> RenderSnapshot:
        """Reset the game state and return the initial snapshot."""
        self.simulation.reset(self.bounds())
        return self.simulation.snapshot()

    def update(self, dt: float) -> FrameResult:
        """Poll the keyboard and advance the simulation by one frame."""
        if self.headless:
            return self.step(dt, InputState())

        events = pygame.event.get()
        for event in events:
            if event.type == pygame.QUIT or (
                event.type == pygame.KEYDOWN and event.key in QUIT_KEYS
            ):
                self.running = False

        input_state = InputState(
            pressed=pressed_keys(pygame.key.get_pressed()),
            just_pressed=just_pressed_keys(events),
        )
        return self.step(dt, input_state)

    def step(self, dt: float, input_state: InputState) -> FrameResult:
        """Advance the simulation with an explicit input state."""
        return self.simulation.update(dt, input_state, self.bounds())

    def render(self):
        """Render the current game state."""
        if self.headless:
            return
        snapshot = self.simulation.snapshot()
        width, height = self.screen.get_size()

        self.screen.fill(constants.BLACK)
        for paddle in (snapshot.left_paddle, snapshot.right_paddle):
            pygame.draw.rect(
                self.screen,
                constants.WHITE,
                pygame.Rect(paddle.x, paddle.y, paddle.width, paddle.height),
            )
        pygame.draw.circle(
            self.screen,
            constants.WHITE,
            (snapshot.ball.x, snapshot.ball.y),
            snapshot.ball.radius,
        )

        score_surface = self.score_font.render(
            snapshot.score_text, True, constants.WHITE
        )
        self._blit_centered(score_surface, width / 2, constants.SCORE_TEXT_Y, top=True)

        if snapshot.paused:
            pause_surface = self.pause_font.render(
                constants.PAUSE_TEXT, True, constants.RED
            )
            self._blit_centered(pause_surface, width / 2, height / 2)

        pygame.display.flip()

    def _blit_centered(
        self, surface: pygame.Surface, x: float, y: float, top: bool = False
    ):
        rect = surface.get_rect()
        if top:
            rect.midtop = (round(x), round(y))
        else:
            rect.center = (round(x), round(y))
        self.screen.blit(surface, rect)

    def close(self):
        """Close the Pygame window."""
        pygame.quit()

    def run(self, max_frames: Optional[int] = None):
        """
        Main game loop for human play. Runs until the window is closed, or
        for max_frames frames when given.
        """
        self.running = True
        frames = 0
        # The first tick only starts the clock
        self.clock.tick(self.fps)
        while self.running:
            dt = self.clock.tick(self.fps) / 1000
            self.update(dt)
            if not self.running:
                break
            self.render()

            frames += 1
            if max_frames is not None and frames >= max_frames:
                self.running = False

