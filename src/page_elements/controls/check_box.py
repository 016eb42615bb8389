"""
Checkbox input
"""

from ..handle import Element
from .input import InputBuilder


class CheckBox(Element):
    """A checkbox with idempotent check/uncheck helpers"""

    def check(self) -> "CheckBox":
        if not self.is_selected():
            self.click()
        return self

    def uncheck(self) -> "CheckBox":
        if self.is_selected():
            self.click()
        return self

    def go_to_link(self, page_type=None):
        raise NotImplementedError("The CheckBox element does not support links.")


class CheckBoxBuilder(InputBuilder[CheckBox]):
    element_class = CheckBox
    INPUT_TYPE = "checkbox"
