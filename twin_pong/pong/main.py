"""
Starting point of the Twin Pong game
"""

import argparse
import pygame
from twin_pong.pong.game_factory import get_game_config, get_launch_mode
from twin_pong.pong.twin_pong_game import TwinPongGame
from twin_pong.pong import constants
from twin_pong.models.pong import LaunchMode
from twin_pong.logger.logger import logger, set_debug
from twin_pong.utils.utils import print_horizontal_line


def parse_args(argv=None) -> argparse.Namespace:
    """
    Parse the command line arguments
    """
    parser = argparse.ArgumentParser(description="Play Twin Pong")

    parser.add_argument(
        f"--{constants.ARG_VARIANT}",
        type=str,
        choices=constants.VARIANTS,
        default=constants.VARIANT_ARCADE,
        help="Game variant: classic has no pause or serve delay",
    )
    parser.add_argument(
        f"--{constants.ARG_LAUNCH_MODE}",
        type=str,
        choices=[mode.value for mode in LaunchMode],
        default=None,
        help="Override how the serve angle is drawn",
    )
    parser.add_argument(
        f"--{constants.ARG_BALL_SPEED}",
        type=float,
        default=None,
        help="Override the ball speed (pixels per frame)",
    )
    parser.add_argument(
        f"--{constants.ARG_PADDLE_SPEED}",
        type=float,
        default=None,
        help="Override the paddle speed (pixels per frame)",
    )
    parser.add_argument(
        f"--{constants.ARG_FPS}",
        type=int,
        default=constants.FPS,
        help="Frame rate cap",
    )
    parser.add_argument(
        f"--{constants.ARG_DEBUG}",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def main(argv=None):
    """
    Starting point of Twin Pong game
    """
    args = parse_args(argv)
    set_debug(args.debug)

    config = get_game_config(
        args.variant,
        launch_mode=get_launch_mode(args.launch_mode) if args.launch_mode else None,
        ball_speed=args.ball_speed,
        paddle_speed=args.paddle_speed,
    )
    logger.info("Starting %s variant", args.variant)
    logger.debug("Config: %s", config)

    game = None
    try:
        game = TwinPongGame(config=config, fps=args.fps)
        game.run()
    finally:
        if game is not None:
            game.close()
        else:
            # the constructor may fail after pygame.init()
            pygame.quit()

    print_horizontal_line()
    logger.info("Final score: %s", game.simulation.score)
    print_horizontal_line()


if __name__ == "__main__":
    main()
