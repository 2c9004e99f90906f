"""
Document-backed client for webselect.

Resolves selections against an HTML document parsed with lxml instead of a
live browser.

Example usage:

    from webselect import Selection
    from webselect.document import DocumentClient

    client = DocumentClient.from_html(source)
    root = Selection(client)

    root.find_by_label("Remember me").check()
    print(root.find("ul.items li").count())
"""

from webselect.document.client import DocumentClient, FormSubmission, form_data
from webselect.document.element import (
    DocumentElement,
    DocumentError,
    InvalidSelectorError,
    UnsupportedLocatorError,
)

__all__ = [
    "DocumentClient",
    "DocumentElement",
    "FormSubmission",
    "form_data",
    # Errors
    "DocumentError",
    "InvalidSelectorError",
    "UnsupportedLocatorError",
]
