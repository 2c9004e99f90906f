"""
Document element for webselect.

Element handle over a node of an lxml-parsed HTML document. Lookups follow
WebDriver semantics: CSS and link text search the node's descendants, XPath
is evaluated with the node as context. State is read from attributes and
inline styles since no layout engine is involved.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from cssselect import HTMLTranslator, SelectorError
from lxml.etree import XPathError, _Element

from webselect.errors import ElementActionError
from webselect.interfaces import Element

if TYPE_CHECKING:
    from webselect.config import DocumentOptions
    from webselect.document.client import DocumentClient
    from webselect.models import Selector

logger = logging.getLogger(__name__)

_translator = HTMLTranslator()

CHECKABLE_TYPES = ("checkbox", "radio")
NON_TEXT_INPUT_TYPES = ("checkbox", "radio", "button", "submit", "reset", "image", "file")


class DocumentError(Exception):
    """Document lookup error."""

    pass


class InvalidSelectorError(DocumentError):
    """The selector expression could not be compiled or evaluated."""

    def __init__(self, using: str, value: str, reason: str) -> None:
        self.using = using
        self.value = value
        self.reason = reason
        super().__init__(f"invalid {using} '{value}': {reason}")


class UnsupportedLocatorError(DocumentError):
    """The locator strategy is not known to the document client."""

    def __init__(self, using: str) -> None:
        self.using = using
        super().__init__(f"unsupported locator strategy: {using}")


def normalize_space(text: str) -> str:
    """Collapse runs of whitespace like XPath's normalize-space()."""
    return " ".join(text.split())


def parse_style(style: str) -> dict[str, str]:
    """Parse an inline style attribute into property/value pairs."""
    declarations = {}
    for declaration in style.split(";"):
        if ":" not in declaration:
            continue
        name, value = declaration.split(":", 1)
        declarations[name.strip().lower()] = value.strip()
    return declarations


def find_nodes(
    node: _Element,
    selector: "Selector",
    options: "DocumentOptions",
    include_self: bool = False,
) -> list[_Element]:
    """Evaluate a selector descriptor against a node.

    Args:
        node: Context node.
        selector: Selector descriptor; index fields are ignored, indexing is
            applied by the caller.
        options: Document options.
        include_self: Whether ``node`` itself may match CSS and link text
            lookups (true for the document root).

    Returns:
        Matching element nodes in document order.

    Raises:
        InvalidSelectorError: If the expression is invalid.
        UnsupportedLocatorError: If the strategy is unknown.
    """
    axis = "descendant-or-self::" if include_self else "descendant::"

    if selector.using == "css selector":
        try:
            expression = _translator.css_to_xpath(selector.value, prefix=axis)
        except SelectorError as e:
            logger.debug(f"CSS compilation failed: {e}")
            raise InvalidSelectorError(selector.using, selector.value, str(e)) from e
    elif selector.using == "xpath":
        expression = selector.value
    elif selector.using == "link text":
        normalize = normalize_space if options.link_text_normalize else str
        wanted = normalize(selector.value)
        return [
            anchor
            for anchor in node.xpath(f"{axis}a")
            if normalize(anchor.text_content()) == wanted
        ]
    else:
        raise UnsupportedLocatorError(selector.using)

    try:
        results = node.xpath(expression)
    except XPathError as e:
        logger.debug(f"XPath evaluation failed: {e}")
        raise InvalidSelectorError(selector.using, selector.value, str(e)) from e

    if not isinstance(results, list):
        raise InvalidSelectorError(
            selector.using, selector.value, "expression does not select elements"
        )

    return [el for el in results if isinstance(el, _Element)]


class DocumentElement(Element):
    """Element handle backed by an lxml node.

    Example:
        client = DocumentClient.from_html(html)
        (field,) = client.get_elements(Selector("css selector", "#email"))
        field.send_keys("me@example.com")
    """

    def __init__(self, element: _Element, client: "DocumentClient") -> None:
        """Initialize DocumentElement.

        Args:
            element: The lxml node to wrap.
            client: Owning document client.
        """
        self._element = element
        self._client = client

    @property
    def node(self) -> _Element:
        """The wrapped lxml node."""
        return self._element

    @property
    def tag(self) -> str:
        """Lowercase tag name."""
        return str(self._element.tag).lower()

    @property
    def _input_type(self) -> Optional[str]:
        if self.tag != "input":
            return None
        return self._element.get("type", "text").lower()

    # Lookup

    def get_elements(self, selector: "Selector") -> list["DocumentElement"]:
        """Find elements within this element."""
        nodes = find_nodes(self._element, selector, self._client.options)
        return [DocumentElement(el, self._client) for el in nodes]

    # State checks

    def is_displayed(self) -> bool:
        """Check if the element would be displayed.

        This is a heuristic based on attributes and inline styles of the
        element and its ancestors.
        """
        if self._input_type == "hidden":
            return False

        hidden_styles = self._client.options.hidden_styles
        node: Optional[_Element] = self._element
        while node is not None:
            if node.get("hidden") is not None:
                return False
            style = "".join(node.get("style", "").split()).lower()
            if any(declaration in style.split(";") for declaration in hidden_styles):
                return False
            node = node.getparent()

        return True

    def is_equal_to(self, other: Element) -> bool:
        """Check if both handles wrap the same node."""
        return isinstance(other, DocumentElement) and other._element is self._element

    def is_selected(self) -> bool:
        """Check if a checkbox, radio button or option is selected."""
        if self._input_type in CHECKABLE_TYPES:
            return self._element.get("checked") is not None
        if self.tag == "option":
            return self._element.get("selected") is not None
        return False

    def is_enabled(self) -> bool:
        """Check if the element is enabled."""
        return self._element.get("disabled") is None

    # Reads

    def get_text(self) -> str:
        """Get the text content of the element (including children)."""
        return normalize_space(self._element.text_content())

    def get_attribute(self, name: str) -> Optional[str]:
        """Get an attribute value."""
        return self._element.get(name)

    def get_css_property(self, name: str) -> str:
        """Get a property from the inline style, empty when not set."""
        return parse_style(self._element.get("style", "")).get(name.lower(), "")

    # Actions

    def click(self) -> None:
        """Click the element.

        Toggles checkboxes, selects radio buttons and options. Clicks on
        other elements, or on disabled ones, change nothing.
        """
        if not self.is_enabled():
            return

        input_type = self._input_type
        if input_type == "checkbox":
            self._set_flag("checked", not self.is_selected())
        elif input_type == "radio":
            self._select_radio()
        elif self.tag == "option":
            self._select_option()

    def clear(self) -> None:
        """Clear the value of a text input or textarea."""
        self._set_value("")

    def send_keys(self, text: str) -> None:
        """Append text to the value of a text input or textarea."""
        self._set_value(self._current_value() + text)

    def submit(self) -> None:
        """Submit the form containing the element.

        Raises:
            ElementActionError: If the element is not inside a form.
        """
        forms = self._element.xpath("ancestor-or-self::form")
        if not forms:
            raise ElementActionError(f"<{self.tag}> element is not in a form")
        self._client.record_submission(forms[-1])

    # Helpers

    def _set_flag(self, name: str, enabled: bool) -> None:
        if enabled:
            self._element.set(name, name)
        elif name in self._element.attrib:
            del self._element.attrib[name]

    def _select_radio(self) -> None:
        name = self._element.get("name")
        if name:
            forms = self._element.xpath("ancestor::form")
            scope = forms[-1] if forms else self._element.getroottree().getroot()
            for radio in scope.xpath(".//input[@type='radio']"):
                if radio.get("name") == name and radio is not self._element:
                    DocumentElement(radio, self._client)._set_flag("checked", False)
        self._set_flag("checked", True)

    def _select_option(self) -> None:
        selects = self._element.xpath("ancestor::select")
        if selects and selects[-1].get("multiple") is None:
            for option in selects[-1].xpath(".//option"):
                DocumentElement(option, self._client)._set_flag("selected", False)
            self._set_flag("selected", True)
        else:
            self._set_flag("selected", not self.is_selected())

    def _current_value(self) -> str:
        if self.tag == "textarea":
            return self._element.text or ""
        return self._element.get("value", "")

    def _set_value(self, value: str) -> None:
        if self.tag == "textarea":
            self._element.text = value
        elif self.tag == "input" and self._input_type not in NON_TEXT_INPUT_TYPES:
            self._element.set("value", value)
        else:
            raise ElementActionError(f"<{self.tag}> element is not editable")

    def __repr__(self) -> str:
        attrs = " ".join(f'{k}="{v}"' for k, v in list(self._element.attrib.items())[:3])
        if attrs:
            return f"<DocumentElement <{self.tag} {attrs}>>"
        return f"<DocumentElement <{self.tag}>>"


__all__ = [
    "DocumentElement",
    "DocumentError",
    "InvalidSelectorError",
    "UnsupportedLocatorError",
    "find_nodes",
    "normalize_space",
    "parse_style",
]
