"""
Game factory to get the Twin Pong configuration based on the variant name
"""

from twin_pong.pong import constants
from twin_pong.models.pong import GameConfig, LaunchMode


def get_game_config(variant: str, **overrides) -> GameConfig:
    """
    Get the configuration preset for the variant, with any overrides applied.
    Overrides set to None are ignored.
    """
    match (variant):
        case constants.VARIANT_CLASSIC:
            preset = {
                "pause_enabled": False,
                "score_delay": 0.0,
                "launch_mode": LaunchMode.BANDED,
            }
        case constants.VARIANT_ARCADE:
            preset = {
                "pause_enabled": True,
                "score_delay": constants.SCORE_DELAY_SECONDS,
                "launch_mode": LaunchMode.HALF_CIRCLE,
            }
        case _:
            raise ValueError(f"Invalid variant name: {variant}")

    preset["ball_speed"] = constants.BALL_SPEED
    preset["paddle_speed"] = constants.PADDLE_SPEED
    preset.update({key: value for key, value in overrides.items() if value is not None})
    return GameConfig(**preset)


def get_launch_mode(name: str) -> LaunchMode:
    """
    Get the launch mode from its command line name
    """
    for mode in LaunchMode:
        if mode.value == name:
            return mode
    raise ValueError(f"Invalid launch mode: {name}")
