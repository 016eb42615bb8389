"""
Single-line text input
"""

from ..handle import Element
from .input import InputBuilder


class TextBox(Element):
    """A text input; cannot link to another page"""

    def go_to_link(self, page_type=None):
        raise NotImplementedError("The TextBox element does not support links.")


class TextBoxBuilder(InputBuilder[TextBox]):
    element_class = TextBox
    INPUT_TYPE = "text"
