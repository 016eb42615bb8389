"""
Text label rendered as an anchor
"""

from ..base import LookUp, OwningPage
from ..builder import LinkableBuilder
from ..handle import Element


class Label(Element):
    pass


class LabelBuilder(LinkableBuilder[Label]):
    element_class = Label

    DEFAULT_LOOKUP = LookUp.BY_XPATH
    TEMPLATE = "//a[contains(.,'{}')]"

    @classmethod
    def from_identifier(cls, parent: OwningPage, identifier: str) -> "LabelBuilder":
        """Match the anchor containing the identifier text"""
        return cls(parent, cls.DEFAULT_LOOKUP, cls.TEMPLATE.format(identifier))
