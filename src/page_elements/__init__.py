"""
Page Elements

A declarative page-object layer: pages declare their controls as lazily
resolved elements, which are re-resolved against the live browser session on
every operation.
"""

from .base import Dimension, Driver, LookUp, Node, OpensNewWindow, OwningPage, Point
from .builder import ElementBuilder, LinkableBuilder
from .config import SessionParameters
from .driver import PlaywrightDriver, PlaywrightNode
from .exceptions import (
    AutomationError,
    DriverError,
    InsufficientArgumentsError,
    LinkNotConfiguredError,
    LocalizationMismatchError,
    NodeNotVisibleError,
    NonExistentElementError,
    PageElementsError,
    StaleNodeError,
    TemplateMisuseError,
    WaitTimeoutError,
)
from .handle import Element
from .null_element import NonExistentElement
from .page import NewWindowPage, Page
from .registry import ElementCollection
from .waiter import VisibilityWaiter

__all__ = [
    'AutomationError',
    'Dimension',
    'Driver',
    'DriverError',
    'Element',
    'ElementBuilder',
    'ElementCollection',
    'InsufficientArgumentsError',
    'LinkNotConfiguredError',
    'LinkableBuilder',
    'LocalizationMismatchError',
    'LookUp',
    'NewWindowPage',
    'Node',
    'NodeNotVisibleError',
    'NonExistentElement',
    'NonExistentElementError',
    'OpensNewWindow',
    'OwningPage',
    'Page',
    'PageElementsError',
    'PlaywrightDriver',
    'PlaywrightNode',
    'Point',
    'SessionParameters',
    'StaleNodeError',
    'TemplateMisuseError',
    'VisibilityWaiter',
    'WaitTimeoutError',
]
