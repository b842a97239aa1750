"""Port for the external profanity filter."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ProfanityChecker(ABC):

    @abstractmethod
    def contains_profanity(self, text: str) -> bool:
        """Return True if *text* contains disallowed words."""
