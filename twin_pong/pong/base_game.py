"""
Common methods implemented by all Pong front ends
"""

from abc import ABC, abstractmethod
from twin_pong.models.pong import FrameResult, RenderSnapshot


class BasePongGame(ABC):
    """
    Interface implemented by all Pong front ends
    """

    @abstractmethod
    def reset(self) -> RenderSnapshot:
        """Reset the game state and return the initial snapshot."""

    @abstractmethod
    def update(self, dt: float) -> FrameResult:
        """Poll input and advance the game state by one frame."""

    @abstractmethod
    def render(self):
        """Render the current game state."""

    @abstractmethod
    def close(self):
        """Close the Pygame window."""

    @abstractmethod
    def run(self):
        """Main game loop for human play"""
