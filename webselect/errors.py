"""
Errors raised by webselect.

Every failure of the selection core is a ``SelectionError``. The message of
each error is part of the public contract: it names the rendered selection
and, for wrapped failures, appends the original cause after a colon.
"""

from __future__ import annotations

from typing import Optional, Union

# Message families. "elements for" is used by count(), "elements with" by
# aggregate operations, "element with" by single-element operations.
RETRIEVE_ELEMENTS_FOR = "failed to retrieve elements for '{selection}': {cause}"
RETRIEVE_ELEMENTS_WITH = "failed to retrieve elements with '{selection}': {cause}"
RETRIEVE_ELEMENT_WITH = "failed to retrieve element with '{selection}': {cause}"

EMPTY_SELECTION = "empty selection"
NO_ELEMENT_FOUND = "no element found"
MULTIPLE_ELEMENTS = "multiple elements ({count}) were selected"
INDEX_OUT_OF_RANGE = "element index out of range (>{max_index})"
NO_ELEMENTS_FOUND = "no elements found for '{selection}'"
NOT_A_SELECTION = "provided object is not a selection"
COMPARE_FAILED = "failed to compare '{selection}' to '{other}': {cause}"
VISIBILITY_FAILED = "failed to determine whether '{selection}' is visible: {cause}"
NOT_A_CHECKBOX = "'{selection}' does not refer to a checkbox"


class SelectionError(Exception):
    """Base class for selection failures."""

    pass


class EmptySelectionError(SelectionError):
    """Raised when a selection without any selectors is resolved."""

    def __init__(self) -> None:
        super().__init__(EMPTY_SELECTION)


class ElementIndexError(SelectionError, IndexError):
    """Raised when an indexed selector asks for more elements than matched.

    The message reports the highest valid index, not the number of matches.
    """

    def __init__(self, index: int, available: int) -> None:
        self.index = index
        self.available = available
        super().__init__(INDEX_OUT_OF_RANGE.format(max_index=available - 1))


class ElementRetrievalError(SelectionError):
    """Raised when a selection could not be resolved to elements."""

    def __init__(
        self,
        template: str,
        selection: str,
        cause: Union[BaseException, str],
    ) -> None:
        self.selection = selection
        self.cause = cause
        super().__init__(template.format(selection=selection, cause=cause))


class ElementNotFoundError(ElementRetrievalError):
    """Raised when a single-element selection matched nothing."""

    def __init__(self, selection: str) -> None:
        super().__init__(RETRIEVE_ELEMENT_WITH, selection, NO_ELEMENT_FOUND)


class MultipleElementsError(ElementRetrievalError):
    """Raised when a single-element selection matched several elements."""

    def __init__(self, selection: str, count: int) -> None:
        self.count = count
        super().__init__(
            RETRIEVE_ELEMENT_WITH,
            selection,
            MULTIPLE_ELEMENTS.format(count=count),
        )


class NoElementsFoundError(SelectionError):
    """Raised when an aggregate operation has no elements to aggregate."""

    def __init__(self, selection: str) -> None:
        self.selection = selection
        super().__init__(NO_ELEMENTS_FOUND.format(selection=selection))


class NotASelectionError(SelectionError, TypeError):
    """Raised when a selection is compared with something else."""

    def __init__(self) -> None:
        super().__init__(NOT_A_SELECTION)


class ComparisonError(SelectionError):
    """Raised when two resolved elements could not be compared."""

    def __init__(self, selection: str, other: str, cause: BaseException) -> None:
        self.selection = selection
        self.other = other
        self.cause = cause
        super().__init__(
            COMPARE_FAILED.format(selection=selection, other=other, cause=cause)
        )


class VisibilityError(SelectionError):
    """Raised when the visibility of an element could not be determined."""

    def __init__(self, selection: str, cause: BaseException) -> None:
        self.selection = selection
        self.cause = cause
        super().__init__(VISIBILITY_FAILED.format(selection=selection, cause=cause))


class ElementActionError(SelectionError):
    """Raised when an element does not support the requested action."""

    def __init__(self, message: str, selection: Optional[str] = None) -> None:
        self.selection = selection
        super().__init__(message)


__all__ = [
    "SelectionError",
    "EmptySelectionError",
    "ElementIndexError",
    "ElementRetrievalError",
    "ElementNotFoundError",
    "MultipleElementsError",
    "NoElementsFoundError",
    "NotASelectionError",
    "ComparisonError",
    "VisibilityError",
    "ElementActionError",
    "RETRIEVE_ELEMENTS_FOR",
    "RETRIEVE_ELEMENTS_WITH",
    "RETRIEVE_ELEMENT_WITH",
    "NOT_A_CHECKBOX",
]
