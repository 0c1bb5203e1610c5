"""Shared pytest fixtures for Twin Pong tests."""

import os
import random

# pygame reads these when it is first imported
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from twin_pong.models.pong import Bounds, InputState, Key
from twin_pong.pong import constants
from twin_pong.pong.game_factory import get_game_config
from twin_pong.pong.simulation import PongSimulation


# =============================================================================
# Layout Fixtures
# =============================================================================


@pytest.fixture
def bounds() -> Bounds:
    """The default 800x600 screen."""
    return Bounds(width=constants.SCREEN_WIDTH, height=constants.SCREEN_HEIGHT)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so serves are repeatable."""
    return random.Random(1234)


# =============================================================================
# Simulation Fixtures
# =============================================================================


@pytest.fixture
def classic_sim(bounds, rng) -> PongSimulation:
    """Simulation without pause or serve delay."""
    return PongSimulation(bounds, get_game_config(constants.VARIANT_CLASSIC), rng=rng)


@pytest.fixture
def arcade_sim(bounds, rng) -> PongSimulation:
    """Simulation with pause and a one second serve delay."""
    return PongSimulation(bounds, get_game_config(constants.VARIANT_ARCADE), rng=rng)


# =============================================================================
# Input Fixtures
# =============================================================================


@pytest.fixture
def no_keys() -> InputState:
    return InputState()


@pytest.fixture
def up_key() -> InputState:
    return InputState(pressed=[Key.UP])


@pytest.fixture
def pause_key() -> InputState:
    return InputState(just_pressed=[Key.PAUSE])
