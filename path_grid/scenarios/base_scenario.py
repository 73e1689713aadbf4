from abc import ABC, abstractmethod
from typing import Any


class BaseScenario(ABC):
    """Abstract base class for grid layouts applied to a session."""

    @abstractmethod
    def setup(self, session: Any) -> None:
        """Mutate ``session.grid`` and mark the session for recompute."""
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Return a human readable name for the scenario."""
        pass
