"""
webselect: lazy, chainable element selections for browser automation.

Selections describe how to reach elements (CSS, XPath, link text, label) and
are resolved against a client on every access, with strict rules about how
many elements an operation accepts.

Basic usage:
    from webselect import Selection

    root = Selection(client)
    root.find("#login").find_by_label("Email").fill("me@example.com")
    root.find("#login").find_link("Sign in").click()

    errors = root.find(".error").all()
    if errors.visible():
        print(f"{errors.count()} errors shown")

Without a browser:
    from webselect.document import DocumentClient

    root = Selection(DocumentClient.from_html(source))
"""

__version__ = "0.1.0"
__license__ = "MIT"

from webselect.errors import (
    ComparisonError,
    ElementActionError,
    ElementIndexError,
    ElementNotFoundError,
    ElementRetrievalError,
    EmptySelectionError,
    MultipleElementsError,
    NoElementsFoundError,
    NotASelectionError,
    SelectionError,
    VisibilityError,
)
from webselect.interfaces import Client, Element, ElementScope
from webselect.models import Selector, SelectorMethod
from webselect.selection import MultiSelection, Selection, SelectorChain

__all__ = [
    # Version
    "__version__",
    # Selections
    "Selection",
    "MultiSelection",
    "SelectorChain",
    # Models
    "Selector",
    "SelectorMethod",
    # Interfaces
    "Client",
    "Element",
    "ElementScope",
    # Errors
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
]
