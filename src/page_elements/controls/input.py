"""
Shared builder for <input> elements differentiated by their type attribute
"""

from ..base import LookUp, OwningPage
from ..builder import ElementBuilder, H


class InputBuilder(ElementBuilder[H]):
    """
    Builds elements located with ``/input[@type='<type>' <identifier>]``.

    The identifier is an XPath predicate joined with ``and``; without one the
    slot is left empty and the padding space before ``]`` is kept.
    """

    DEFAULT_LOOKUP = LookUp.BY_XPATH
    INPUT_TYPE = "text"
    DEFAULT_IDENTIFIER = ""

    @classmethod
    def template(cls) -> str:
        return "/input[@type='" + cls.INPUT_TYPE + "' {}]"

    @classmethod
    def from_identifier(cls, parent: OwningPage, identifier: str):
        """Default lookup, differentiated by an XPath predicate such as ``@id='user'``"""
        return cls(parent, cls.DEFAULT_LOOKUP, cls.template().format(f"and {identifier}"))

    @classmethod
    def default(cls, parent: OwningPage):
        return cls(parent, cls.DEFAULT_LOOKUP, cls.template().format(cls.DEFAULT_IDENTIFIER))
