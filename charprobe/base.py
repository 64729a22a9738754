"""The interface shared by all charset probers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class ProbingState(Enum):
    """Where a prober stands in deciding on its charset."""

    DETECTING = 0
    FOUND_IT = 1
    NOT_ME = 2


class CharSetProber(ABC):
    """Consumes bytes and judges how likely they are in some charset."""

    @abstractmethod
    def feed(self, data: bytes) -> ProbingState:
        """Process a chunk of input and return the resulting state."""

    @abstractmethod
    def reset(self) -> None:
        """Forget everything seen so far."""

    @abstractmethod
    def confidence(self) -> float:
        """How sure the prober is, from 0.0 to 1.0."""

    @abstractmethod
    def charset_name(self) -> str:
        """Name of the charset this prober stands for."""

    @abstractmethod
    def state(self) -> ProbingState:
        """The current probing state."""