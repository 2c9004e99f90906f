"""
Core data models for webselect.

Defines the lookup strategies a selection can use and the descriptor that is
handed to a client (or a parent element) when elements are requested.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SelectorMethod(str, Enum):
    """Lookup strategy of a selector segment.

    LABEL never appears in a built chain: it is expanded to an XPath
    expression when appended.
    """

    CSS = "css"
    XPATH = "xpath"
    LINK_TEXT = "link_text"
    LABEL = "label"

    @property
    def using(self) -> str:
        """WebDriver locator strategy this method is sent as."""
        return _USING[self]

    @property
    def label(self) -> str:
        """Name used when rendering a segment of this method."""
        return _LABELS[self]


_USING = {
    SelectorMethod.CSS: "css selector",
    SelectorMethod.XPATH: "xpath",
    SelectorMethod.LINK_TEXT: "link text",
    SelectorMethod.LABEL: "xpath",
}

_LABELS = {
    SelectorMethod.CSS: "CSS",
    SelectorMethod.XPATH: "XPath",
    SelectorMethod.LINK_TEXT: "Link",
    SelectorMethod.LABEL: "XPath",
}


@dataclass(frozen=True)
class Selector:
    """Descriptor passed to ``get_elements``.

    Attributes:
        using: WebDriver locator strategy ("css selector", "xpath", "link text").
        value: Raw selector expression.
        index: Requested element index, meaningful only when ``indexed``.
        indexed: Whether an index was set (distinguishes "unindexed" from 0).
    """

    using: str
    value: str
    index: int = 0
    indexed: bool = False


LABEL_XPATH = (
    '//input[@id=(//label[normalize-space(text())="{name}"]/@for)]'
    ' | //label[normalize-space(text())="{name}"]/input'
)


def label_xpath(name: str) -> str:
    """Build the XPath that finds an input by the text of its label.

    Matches an input whose id is the ``for`` of a label with the given
    normalized text, or an input nested inside such a label.

    Args:
        name: Label text.

    Returns:
        XPath expression.
    """
    return LABEL_XPATH.format(name=name)


__all__ = [
    "LABEL_XPATH",
    "Selector",
    "SelectorMethod",
    "label_xpath",
]
