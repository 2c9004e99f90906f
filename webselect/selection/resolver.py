"""
Chain resolution.

Turns a selector chain into element handles by walking it segment by
segment: the first segment is looked up in the client, every following
segment in each element found so far. Nothing is cached; each call performs
its own round trips.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from webselect.errors import (
    RETRIEVE_ELEMENT_WITH,
    ElementIndexError,
    ElementNotFoundError,
    ElementRetrievalError,
    EmptySelectionError,
    MultipleElementsError,
)

if TYPE_CHECKING:
    from webselect.interfaces import Element, ElementScope
    from webselect.selection.chain import Segment, SelectorChain

logger = logging.getLogger(__name__)


def retrieve_elements(scope: "ElementScope", segment: "Segment") -> list["Element"]:
    """Look up one segment in one scope, applying its index.

    Args:
        scope: Client or parent element.
        segment: Segment to look up.

    Returns:
        All matches, or only the indexed match.

    Raises:
        ElementIndexError: If the segment is indexed past the last match.
    """
    logger.debug(f"Resolving '{segment}' against {scope!r}")
    elements = scope.get_elements(segment.to_selector())

    if segment.indexed:
        if segment.index >= len(elements):
            raise ElementIndexError(segment.index, len(elements))
        return [elements[segment.index]]

    return list(elements)


def resolve_elements(client: "ElementScope", chain: "SelectorChain") -> list["Element"]:
    """Resolve a chain to every element it selects.

    Args:
        client: Root scope.
        chain: Chain to resolve.

    Returns:
        Flattened matches of the terminal segment, in parent order.

    Raises:
        EmptySelectionError: If the chain has no segments.
        ElementIndexError: If any indexed segment is out of range.
        Exception: Whatever the client or an element raised.
    """
    if not chain:
        raise EmptySelectionError()

    segments = iter(chain)
    elements = retrieve_elements(client, next(segments))

    for segment in segments:
        children: list["Element"] = []
        for parent in elements:
            children.extend(retrieve_elements(parent, segment))
        elements = children

    return elements


def resolve_element(
    client: "ElementScope",
    chain: "SelectorChain",
    rendered: str,
) -> "Element":
    """Resolve a chain that must select exactly one element.

    Args:
        client: Root scope.
        chain: Chain to resolve.
        rendered: Rendering of the selection used in error messages.

    Returns:
        The selected element.

    Raises:
        ElementRetrievalError: If resolution failed.
        ElementNotFoundError: If nothing matched.
        MultipleElementsError: If more than one element matched.
    """
    try:
        elements = resolve_elements(client, chain)
    except Exception as e:
        logger.debug(f"Failed to resolve '{rendered}': {e}")
        raise ElementRetrievalError(RETRIEVE_ELEMENT_WITH, rendered, e) from e

    if not elements:
        raise ElementNotFoundError(rendered)
    if len(elements) > 1:
        raise MultipleElementsError(rendered, len(elements))

    return elements[0]


def resolve_all(
    client: "ElementScope",
    chain: "SelectorChain",
    rendered: str,
    template: str,
) -> list["Element"]:
    """Resolve a chain to all of its elements with a wrapped failure message.

    Args:
        client: Root scope.
        chain: Chain to resolve.
        rendered: Rendering of the selection used in error messages.
        template: Message family to wrap failures with.

    Raises:
        ElementRetrievalError: If resolution failed.
    """
    try:
        return resolve_elements(client, chain)
    except Exception as e:
        logger.debug(f"Failed to resolve '{rendered}': {e}")
        raise ElementRetrievalError(template, rendered, e) from e


__all__ = [
    "resolve_all",
    "resolve_element",
    "resolve_elements",
    "retrieve_elements",
]
