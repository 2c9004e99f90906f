"""
Document client for webselect.

A ``Client`` over an HTML document parsed with lxml. It lets selections be
resolved and acted on without a browser, which suits static pages, saved
snapshots and tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional
from urllib.parse import urljoin

from lxml import html
from lxml.etree import _Element, tostring

from webselect.config import DocumentOptions
from webselect.document.element import DocumentElement, find_nodes
from webselect.interfaces import Client

if TYPE_CHECKING:
    from webselect.models import Selector

logger = logging.getLogger(__name__)


@dataclass
class FormSubmission:
    """A form submitted through ``DocumentElement.submit``."""

    action: Optional[str]
    method: str
    data: dict[str, str] = field(default_factory=dict)


def form_data(form: _Element) -> dict[str, str]:
    """Extract the successful controls of a form.

    Args:
        form: The form node.

    Returns:
        Dictionary of control names and values.
    """
    data = {}

    for input_el in form.xpath(".//input"):
        name = input_el.get("name")
        if not name or input_el.get("disabled") is not None:
            continue

        input_type = input_el.get("type", "text").lower()

        if input_type in ("checkbox", "radio"):
            if input_el.get("checked") is not None:
                data[name] = input_el.get("value", "on")
        elif input_type not in ("button", "submit", "reset", "image", "file"):
            data[name] = input_el.get("value", "")

    for textarea in form.xpath(".//textarea"):
        name = textarea.get("name")
        if name and textarea.get("disabled") is None:
            data[name] = textarea.text or ""

    for select in form.xpath(".//select"):
        name = select.get("name")
        if not name or select.get("disabled") is not None:
            continue

        options = select.xpath(".//option")
        selected = [opt for opt in options if opt.get("selected") is not None]
        chosen = selected[0] if selected else (options[0] if options else None)
        if chosen is not None:
            data[name] = chosen.get("value") or chosen.text_content().strip()

    return data


class DocumentClient(Client):
    """Client resolving selectors against a parsed HTML document.

    Example:
        client = DocumentClient.from_html(page_source)
        root = Selection(client)
        root.find_by_label("Email").fill("me@example.com")
        root.find("form button").submit()
        print(client.submissions)
    """

    def __init__(
        self,
        root: _Element,
        options: Optional[DocumentOptions] = None,
    ) -> None:
        """Initialize DocumentClient.

        Args:
            root: Root node of the parsed document.
            options: Document options.
        """
        self._root = root
        self.options = options or DocumentOptions()
        self.submissions: list[FormSubmission] = []

    @classmethod
    def from_html(
        cls,
        html_content: str,
        options: Optional[DocumentOptions] = None,
    ) -> "DocumentClient":
        """Create a client from an HTML string.

        Args:
            html_content: HTML content to parse.
            options: Document options.

        Returns:
            DocumentClient over the parsed document.
        """
        return cls(html.document_fromstring(html_content), options=options)

    @property
    def root(self) -> _Element:
        """Root node of the document."""
        return self._root

    @property
    def html(self) -> str:
        """Serialize the document in its current state."""
        return tostring(self._root, encoding="unicode", method="html")

    def get_elements(self, selector: "Selector") -> list[DocumentElement]:
        """Find elements anywhere in the document."""
        nodes = find_nodes(self._root, selector, self.options, include_self=True)
        logger.debug(f"{selector.using} '{selector.value}' matched {len(nodes)} element(s)")
        return [DocumentElement(el, self) for el in nodes]

    def record_submission(self, form: _Element) -> FormSubmission:
        """Record the submission of a form.

        Args:
            form: The submitted form node.

        Returns:
            The recorded submission.
        """
        action = form.get("action")
        if action is not None and self.options.base_url:
            action = urljoin(self.options.base_url, action)

        submission = FormSubmission(
            action=action,
            method=form.get("method", "get").lower(),
            data=form_data(form),
        )
        self.submissions.append(submission)
        logger.debug(f"Submitted form to {submission.action}")
        return submission

    def __repr__(self) -> str:
        return f"<DocumentClient <{self._root.tag}>>"


__all__ = [
    "DocumentClient",
    "FormSubmission",
    "form_data",
]
