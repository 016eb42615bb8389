"""
Button inputs
"""

from enum import Enum

from ..base import LookUp, OwningPage
from ..builder import LinkableBuilder
from ..handle import Element


class Button(Element):

    class Type(Enum):
        STANDARD = "button"
        SUBMIT = "submit"


class ButtonBuilder(LinkableBuilder[Button]):
    element_class = Button

    DEFAULT_LOOKUP = LookUp.BY_XPATH
    STANDARD_TEMPLATE = "//input[@type='button' {}]"
    SUBMIT_TEMPLATE = "//input[@type='submit' {}]"
    DEFAULT_IDENTIFIER = ""

    @classmethod
    def _template(cls, button_type: Button.Type) -> str:
        if button_type is Button.Type.SUBMIT:
            return cls.SUBMIT_TEMPLATE
        return cls.STANDARD_TEMPLATE

    @classmethod
    def from_identifier(cls, parent: OwningPage, button_type: Button.Type, identifier: str) -> "ButtonBuilder":
        return cls(parent, cls.DEFAULT_LOOKUP, cls._template(button_type).format(f"and {identifier}"))

    @classmethod
    def default(cls, parent: OwningPage, button_type: Button.Type) -> "ButtonBuilder":
        return cls(parent, cls.DEFAULT_LOOKUP, cls._template(button_type).format(cls.DEFAULT_IDENTIFIER))
