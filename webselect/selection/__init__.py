"""
Selection system for webselect.

- **Selection**: chain of lookups resolving to exactly one element
- **MultiSelection**: chain of lookups resolving to a set of elements
- **SelectorChain**: immutable lookup path shared by both

Example usage:

    from webselect import Selection

    root = Selection(client)
    login = root.find("form#login")

    login.find_by_label("Email").fill("me@example.com")
    login.find_link("Forgot password?").click()

    print(login.find("li.error").count())
    print(login.find("li.error").all().visible())

Rendering:

    str(root.find("#a").find_xpath("b").at(1))   # "CSS: #a | XPath: b [1]"
    str(root.find("#a").find("#b"))              # "CSS: #a #b"
    str(root.find("#a").all())                   # "CSS: #a - All"
"""

from webselect.selection.chain import SEGMENT_SEPARATOR, Segment, SelectorChain
from webselect.selection.resolver import (
    resolve_all,
    resolve_element,
    resolve_elements,
)
from webselect.selection.selection import BaseSelection, MultiSelection, Selection

__all__ = [
    # Selections
    "BaseSelection",
    "Selection",
    "MultiSelection",
    # Chain
    "SEGMENT_SEPARATOR",
    "Segment",
    "SelectorChain",
    # Resolution
    "resolve_all",
    "resolve_element",
    "resolve_elements",
]
