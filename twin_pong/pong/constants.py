"""
Constants related to the Twin Pong game
"""

import math

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
SCREEN_CAPTION = "Twin Pong"
FPS = 60

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)

PADDLE_WIDTH = 20.0
PADDLE_HEIGHT = 100.0
PADDLE_MARGIN = 20.0  # gap between a paddle and its side wall
PADDLE_SPEED = 5.0

BALL_RADIUS = 8.0
BALL_SPEED = 6.0
BALL_LAUNCH_MAX_ANGLE = math.pi / 3  # banded launches stay within 60 degrees

SCORE_DELAY_SECONDS = 1.0

SCORE_FONT_SIZE = 24
SCORE_TEXT_Y = 20
PAUSE_FONT_SIZE = 30
PAUSE_TEXT = "Paused"

VARIANT_CLASSIC = "classic"
VARIANT_ARCADE = "arcade"
VARIANTS = (VARIANT_CLASSIC, VARIANT_ARCADE)

ARG_VARIANT = "variant"
ARG_LAUNCH_MODE = "launch_mode"
ARG_BALL_SPEED = "ball_speed"
ARG_PADDLE_SPEED = "paddle_speed"
ARG_FPS = "fps"
ARG_DEBUG = "debug"
