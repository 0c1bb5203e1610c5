"""
Common utility functions used by various packages
"""

from twin_pong.logger.logger import logger


def print_horizontal_line(width: int = 40):
    """
    Print a horizontal line to the console
    """
    logger.info("=" * width)
