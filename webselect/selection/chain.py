"""
Selector chains.

A chain is the ordered path of lookups a selection resolves, from the client
down to the target elements. Chains are immutable: every append or index
returns a new chain, so selections derived from the same parent never share
or overwrite each other's segments.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator

from webselect.errors import EmptySelectionError
from webselect.models import Selector, SelectorMethod, label_xpath

SEGMENT_SEPARATOR = " | "


@dataclass(frozen=True)
class Segment:
    """One lookup criterion of a chain."""

    method: SelectorMethod
    value: str
    index: int = 0
    indexed: bool = False

    def accepts_merge(self, method: SelectorMethod) -> bool:
        """Whether a new selector of ``method`` folds into this segment.

        Only unindexed CSS segments merge, and only with more CSS.
        """
        return (
            not self.indexed
            and self.method == SelectorMethod.CSS
            and method == SelectorMethod.CSS
        )

    def merged(self, value: str) -> "Segment":
        """Return this segment with ``value`` appended as a descendant CSS part."""
        return replace(self, value=f"{self.value} {value}")

    def at(self, index: int) -> "Segment":
        """Return this segment narrowed to one match."""
        return replace(self, index=index, indexed=True)

    def to_selector(self) -> Selector:
        """Convert to the descriptor sent to a client."""
        return Selector(
            using=self.method.using,
            value=self.value,
            index=self.index,
            indexed=self.indexed,
        )

    def __str__(self) -> str:
        value = self.value
        if self.method == SelectorMethod.LINK_TEXT:
            value = f'"{value}"'
        rendered = f"{self.method.label}: {value}"
        if self.indexed:
            rendered += f" [{self.index}]"
        return rendered


@dataclass(frozen=True)
class SelectorChain:
    """Ordered, immutable sequence of segments."""

    segments: tuple[Segment, ...] = ()

    def append(self, method: SelectorMethod, value: str) -> "SelectorChain":
        """Return a chain with one more lookup.

        Consecutive unindexed CSS lookups are merged into one segment so the
        client receives a single descendant selector. Labels are expanded to
        their XPath form.

        Args:
            method: Lookup strategy.
            value: Selector value (or label text for LABEL).

        Returns:
            New chain.
        """
        if method == SelectorMethod.LABEL:
            method, value = SelectorMethod.XPATH, label_xpath(value)

        if self.segments and self.segments[-1].accepts_merge(method):
            return SelectorChain(self.segments[:-1] + (self.segments[-1].merged(value),))

        return SelectorChain(self.segments + (Segment(method, value),))

    def at(self, index: int) -> "SelectorChain":
        """Return a chain whose last segment selects only match ``index``.

        Earlier segments are left as they are.

        Raises:
            EmptySelectionError: If the chain has no segments.
            ValueError: If ``index`` is negative.
        """
        if not self.segments:
            raise EmptySelectionError()
        if index < 0:
            raise ValueError(f"Index must be non-negative, got {index}")
        return SelectorChain(self.segments[:-1] + (self.segments[-1].at(index),))

    @property
    def last(self) -> Segment:
        """The terminal segment."""
        if not self.segments:
            raise EmptySelectionError()
        return self.segments[-1]

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __bool__(self) -> bool:
        return bool(self.segments)

    def __str__(self) -> str:
        return SEGMENT_SEPARATOR.join(str(segment) for segment in self.segments)


__all__ = [
    "SEGMENT_SEPARATOR",
    "Segment",
    "SelectorChain",
]
