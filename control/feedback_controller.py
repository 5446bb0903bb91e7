from __future__ import annotations

from abc import ABC, abstractmethod


class FeedbackController(ABC):
    """Common surface of the loop controllers: one ``update`` per tick."""

    @abstractmethod
    def reset(self) -> None:
        """Clear run state; configuration is kept."""

    @abstractmethod
    def update(self, target: float, measured: float, dt: float) -> float:
        """Advance one control tick and return the new control value."""

    @abstractmethod
    def get_control_value(self) -> float:
        """Last computed control value, without recomputation."""
