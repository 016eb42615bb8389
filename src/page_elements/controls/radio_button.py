"""
Radio button input
"""

from ..handle import Element
from .input import InputBuilder


class RadioButton(Element):

    def go_to_link(self, page_type=None):
        raise NotImplementedError("The RadioButton element does not support links.")


class RadioButtonBuilder(InputBuilder[RadioButton]):
    element_class = RadioButton
    INPUT_TYPE = "radio"
