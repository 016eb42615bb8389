"""
<select> element
"""

from typing import List, Optional

from ..base import LookUp, Node, OwningPage
from ..builder import LinkableBuilder
from ..handle import Element


class Dropdown(Element):
    """A single or multiple choice <select>"""

    def is_multiple(self) -> bool:
        return self.get_attribute("multiple") is not None

    def get_options(self) -> List[Node]:
        return self._invoke("get_options")

    def select_by_value(self, value: str) -> "Dropdown":
        self._invoke("select_option", value, None, None)
        return self

    def select_by_visible_text(self, text: str) -> "Dropdown":
        self._invoke("select_option", None, text, None)
        return self

    def select_by_index(self, index: int) -> "Dropdown":
        self._invoke("select_option", None, None, index)
        return self

    def get_options_when_visible(self, timeout: Optional[float] = None) -> List[Node]:
        return self._when_visible(timeout, self.get_options)

    def select_by_value_when_visible(self, value: str, timeout: Optional[float] = None) -> "Dropdown":
        return self._when_visible(timeout, self.select_by_value, value)

    def select_by_visible_text_when_visible(self, text: str, timeout: Optional[float] = None) -> "Dropdown":
        return self._when_visible(timeout, self.select_by_visible_text, text)

    def select_by_index_when_visible(self, index: int, timeout: Optional[float] = None) -> "Dropdown":
        return self._when_visible(timeout, self.select_by_index, index)


class DropdownBuilder(LinkableBuilder[Dropdown]):
    element_class = Dropdown

    DEFAULT_LOOKUP = LookUp.BY_XPATH
    WITHOUT_ID_TEMPLATE = "/select"
    WITH_ID_TEMPLATE = "/select[contains(.,'{}')]"

    @classmethod
    def from_identifier(cls, parent: OwningPage, identifier: str) -> "DropdownBuilder":
        return cls(parent, cls.DEFAULT_LOOKUP, cls.WITH_ID_TEMPLATE.format(identifier))

    @classmethod
    def default(cls, parent: OwningPage) -> "DropdownBuilder":
        return cls(parent, cls.DEFAULT_LOOKUP, cls.WITHOUT_ID_TEMPLATE)
