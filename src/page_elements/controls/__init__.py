"""
Primitive controls built on the Element contract
"""

from .button import Button, ButtonBuilder
from .check_box import CheckBox, CheckBoxBuilder
from .dropdown import Dropdown, DropdownBuilder
from .input import InputBuilder
from .label import Label, LabelBuilder
from .radio_button import RadioButton, RadioButtonBuilder
from .text_box import TextBox, TextBoxBuilder

__all__ = [
    'Button',
    'ButtonBuilder',
    'CheckBox',
    'CheckBoxBuilder',
    'Dropdown',
    'DropdownBuilder',
    'InputBuilder',
    'Label',
    'LabelBuilder',
    'RadioButton',
    'RadioButtonBuilder',
    'TextBox',
    'TextBoxBuilder',
]
