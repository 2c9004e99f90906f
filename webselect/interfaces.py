"""
Abstract interfaces consumed by the selection core.

A client and every element it returns are both lookup scopes: a selection
resolves its first selector against the client and each following selector
against the elements found so far.

Implementations own their transport. Any exception they raise from
``get_elements`` is treated as a client failure and re-raised by the
selection core with chain-qualified context.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from webselect.models import Selector


class ElementScope(ABC):
    """Something elements can be looked up in."""

    @abstractmethod
    def get_elements(self, selector: "Selector") -> list["Element"]:
        """Find the elements matching a selector within this scope.

        Args:
            selector: Selector descriptor (strategy, value, index fields).

        Returns:
            Matching elements in document order.
        """
        ...


class Client(ElementScope):
    """Root lookup scope of a browser session."""

    pass


class Element(ElementScope):
    """Handle to a live element.

    Only ``is_displayed`` and ``is_equal_to`` are aggregated by the
    selection core. The remaining methods are delegated to unchanged.
    """

    # State checks

    @abstractmethod
    def is_displayed(self) -> bool:
        """Check if the element is displayed."""
        ...

    @abstractmethod
    def is_equal_to(self, other: "Element") -> bool:
        """Check if this handle refers to the same element as another."""
        ...

    @abstractmethod
    def is_selected(self) -> bool:
        """Check if the element (checkbox, radio, option) is selected."""
        ...

    @abstractmethod
    def is_enabled(self) -> bool:
        """Check if the element is enabled."""
        ...

    # Reads

    @abstractmethod
    def get_text(self) -> str:
        """Get the element's text."""
        ...

    @abstractmethod
    def get_attribute(self, name: str) -> Optional[str]:
        """Get an attribute value, or None when it is not set."""
        ...

    @abstractmethod
    def get_css_property(self, name: str) -> str:
        """Get the computed value of a CSS property."""
        ...

    # Actions

    @abstractmethod
    def click(self) -> None:
        """Click the element."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Clear the element's value."""
        ...

    @abstractmethod
    def send_keys(self, text: str) -> None:
        """Type text into the element."""
        ...

    @abstractmethod
    def submit(self) -> None:
        """Submit the form the element belongs to."""
        ...


__all__ = [
    "Client",
    "Element",
    "ElementScope",
]
