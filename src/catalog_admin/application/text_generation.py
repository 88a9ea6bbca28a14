"""Port for the AI text service used by the product form.

Implementations must never raise for service problems: a missing
credential, network error or unusable response is reported as None,
and the caller leaves the field unchanged.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class TextGenerator(ABC):

    @abstractmethod
    def generate_description(self, name: str, brand: str, category: str) -> str | None:
        """Return a short marketing description, or None."""

    @abstractmethod
    def generate_disclaimer(self, category: str) -> str | None:
        """Return a one or two sentence disclaimer for *category*, or None."""
