"""
Locator template composition.

Template locators carry positional ``{}`` slots that are filled with the
element's template identifiers when it is resolved, e.g.

    //tr[td[contains(.,'{}')]]/td[{}]

Relative elements prefix their parent's effective locator verbatim; no
separator is inserted, so fragments must be written to concatenate cleanly
(typically an XPath step starting with ``/``).
"""

from typing import Iterable, List, Optional

from .exceptions import InsufficientArgumentsError


def format_identifier(identifier: str) -> str:
    """Normalize an identifier before substitution"""
    return identifier.strip()


def fill_template(template: str, identifiers: Iterable[str]) -> str:
    """Substitute identifiers into the template's slots in order.

    Extra identifiers are ignored. Missing ones raise InsufficientArgumentsError.
    """
    values: List[str] = [format_identifier(i) for i in identifiers]
    try:
        return template.format(*values)
    except (IndexError, KeyError, ValueError) as e:
        raise InsufficientArgumentsError(template, values, e) from e


def compose(parent_locator: Optional[str], fragment: str) -> str:
    """Prefix the fragment with the parent's locator, if any"""
    if parent_locator is None:
        return fragment
    return parent_locator + fragment
