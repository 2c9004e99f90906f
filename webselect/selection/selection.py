"""
Selections of page elements.

A ``Selection`` describes how to find exactly one element; a
``MultiSelection`` describes a set of elements and answers questions about
all of them at once. Both are cheap, immutable values: building one never
talks to the client, and every terminal operation resolves the chain again.

Example:
    root = Selection(client)
    row = root.find("table.results").find_xpath(".//tr").at(2)
    row.find("a.edit").click()

    if root.find(".error").all().visible():
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from webselect.errors import (
    NOT_A_CHECKBOX,
    RETRIEVE_ELEMENTS_FOR,
    RETRIEVE_ELEMENTS_WITH,
    ComparisonError,
    ElementActionError,
    NoElementsFoundError,
    NotASelectionError,
    VisibilityError,
)
from webselect.models import SelectorMethod
from webselect.selection.chain import SelectorChain
from webselect.selection.resolver import resolve_all, resolve_element

if TYPE_CHECKING:
    from webselect.interfaces import Client, Element


class BaseSelection:
    """State shared by single and multi selections."""

    def __init__(self, client: "Client", chain: Optional[SelectorChain] = None) -> None:
        """Initialize a selection.

        Args:
            client: Client the chain is resolved against. Shared, never closed
                by the selection.
            chain: Selector chain, empty by default.
        """
        self.client = client
        self.chain = chain if chain is not None else SelectorChain()

    def count(self) -> int:
        """Count the elements the chain currently selects.

        Raises:
            ElementRetrievalError: If the selection could not be resolved.
        """
        return len(resolve_all(self.client, self.chain, str(self), RETRIEVE_ELEMENTS_FOR))

    def __str__(self) -> str:
        return str(self.chain)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} '{self}'>"


class Selection(BaseSelection):
    """Chain of lookups that must resolve to a single element."""

    # Chain building

    def _derive(self, chain: SelectorChain) -> "Selection":
        return Selection(self.client, chain)

    def find(self, selector: str) -> "Selection":
        """Narrow the selection with a CSS selector.

        Follows directly on an unindexed CSS lookup are merged into it
        (``find("#a").find("b")`` selects ``#a b``).
        """
        return self._derive(self.chain.append(SelectorMethod.CSS, selector))

    def find_xpath(self, selector: str) -> "Selection":
        """Narrow the selection with an XPath expression."""
        return self._derive(self.chain.append(SelectorMethod.XPATH, selector))

    def find_link(self, text: str) -> "Selection":
        """Narrow the selection to links with the given text."""
        return self._derive(self.chain.append(SelectorMethod.LINK_TEXT, text))

    def find_by_label(self, text: str) -> "Selection":
        """Narrow the selection to the input labelled with ``text``."""
        return self._derive(self.chain.append(SelectorMethod.LABEL, text))

    def at(self, index: int) -> "Selection":
        """Select only match ``index`` of the last lookup.

        Args:
            index: Zero-based position among the matches of each parent.

        Raises:
            EmptySelectionError: If nothing has been selected yet.
            ValueError: If ``index`` is negative.
        """
        return self._derive(self.chain.at(index))

    def all(self) -> "MultiSelection":
        """Select every match of the chain."""
        return MultiSelection(self.client, self.chain)

    # Resolution

    def _resolve_one(self) -> "Element":
        return resolve_element(self.client, self.chain, str(self))

    # Comparison

    def equals_element(self, other: Any) -> bool:
        """Check whether two selections refer to the same element.

        Args:
            other: Another ``Selection``.

        Returns:
            True if the client reports both elements as equal.

        Raises:
            NotASelectionError: If ``other`` is not a ``Selection``.
            ElementRetrievalError: If either selection does not resolve to
                exactly one element.
            ComparisonError: If the elements could not be compared.
        """
        if not isinstance(other, Selection):
            raise NotASelectionError()

        element = self._resolve_one()
        other_element = other._resolve_one()

        try:
            return element.is_equal_to(other_element)
        except Exception as e:
            raise ComparisonError(str(self), str(other), e) from e

    # Element operations

    def click(self) -> None:
        """Click the element."""
        self._resolve_one().click()

    def text(self) -> str:
        """Get the element's text."""
        return self._resolve_one().get_text()

    def attribute(self, name: str) -> Optional[str]:
        """Get an attribute of the element."""
        return self._resolve_one().get_attribute(name)

    def css(self, name: str) -> str:
        """Get a CSS property of the element."""
        return self._resolve_one().get_css_property(name)

    def selected(self) -> bool:
        """Check whether the element is selected."""
        return self._resolve_one().is_selected()

    def visible(self) -> bool:
        """Check whether the element is displayed."""
        return self._resolve_one().is_displayed()

    def enabled(self) -> bool:
        """Check whether the element is enabled."""
        return self._resolve_one().is_enabled()

    def clear(self) -> None:
        """Clear the element's value."""
        self._resolve_one().clear()

    def fill(self, text: str) -> None:
        """Replace the element's value with ``text``."""
        element = self._resolve_one()
        element.clear()
        element.send_keys(text)

    def submit(self) -> None:
        """Submit the form containing the element."""
        self._resolve_one().submit()

    def check(self) -> None:
        """Check a checkbox, clicking it only if it is unchecked."""
        self._set_checked(True)

    def uncheck(self) -> None:
        """Uncheck a checkbox, clicking it only if it is checked."""
        self._set_checked(False)

    def _set_checked(self, checked: bool) -> None:
        element = self._resolve_one()

        if element.get_attribute("type") != "checkbox":
            raise ElementActionError(NOT_A_CHECKBOX.format(selection=self), str(self))

        if element.is_selected() != checked:
            element.click()


class MultiSelection(BaseSelection):
    """Chain of lookups selecting any number of elements."""

    def visible(self) -> bool:
        """Check whether every selected element is displayed.

        Returns:
            True only if all elements are displayed.

        Raises:
            ElementRetrievalError: If the selection could not be resolved.
            NoElementsFoundError: If nothing is selected.
            VisibilityError: If an element's visibility could not be read.
        """
        rendered = str(self)
        elements = resolve_all(self.client, self.chain, rendered, RETRIEVE_ELEMENTS_WITH)

        if not elements:
            raise NoElementsFoundError(rendered)

        visible = True
        for element in elements:
            try:
                displayed = element.is_displayed()
            except Exception as e:
                raise VisibilityError(rendered, e) from e
            visible = visible and displayed

        return visible

    def __str__(self) -> str:
        return f"{self.chain} - All"


__all__ = [
    "BaseSelection",
    "MultiSelection",
    "Selection",
]
