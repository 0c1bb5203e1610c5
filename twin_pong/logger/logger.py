"""
Logging module for the project
"""

import logging

# Set up logging
# Pass --debug on the command line for more detailed logging
logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)


def set_debug(enabled: bool):
    """
    Switch the project logger between INFO and DEBUG
    """
    logger.setLevel(logging.DEBUG if enabled else logging.INFO)
