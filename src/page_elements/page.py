"""
Minimal owning pages for declaring elements
"""

from typing import Any, Optional, Type

from .base import Driver, OpensNewWindow, WaitDelegate
from .config import SessionParameters
from .registry import E, ElementCollection


class Page:
    """
    A page of the application under test.

    Subclasses declare their elements in __init__ with builders and put them
    in ``self.elements``.
    """

    def __init__(self, driver: Driver, title: str, parameters: Optional[SessionParameters] = None):
        if driver is None:
            raise ValueError("driver cannot be None")
        if title is None:
            raise ValueError("title cannot be None")
        self.driver = driver
        self.title = title
        self.parameters = parameters if parameters is not None else SessionParameters()
        if self.parameters.debug:
            self.parameters.configure_logging()
        self.elements = ElementCollection.create()

    def get_driver(self) -> Driver:
        return self.driver

    def get_default_wait_seconds(self) -> int:
        return self.parameters.default_wait_seconds

    def get_wait_delegate(self) -> Optional[WaitDelegate]:
        return self.parameters.wait_delegate

    def get_poll_interval_seconds(self) -> float:
        return self.parameters.poll_interval_seconds

    def get_link_settle_seconds(self) -> float:
        return self.parameters.link_settle_seconds

    def find(self, label: str, *identifiers: str, of_type: Optional[Type[E]] = None) -> E:
        return self.elements.find(label, *identifiers, of_type=of_type)

    def __str__(self):
        return self.title


class NewWindowPage(Page, OpensNewWindow):
    """A page that a link opens in a separate browser window"""

    def __init__(self, driver: Driver, title: str, parameters: Optional[SessionParameters] = None):
        super().__init__(driver, title, parameters)
        self._window_handle: Any = None

    def set_window_handle(self, handle: Any) -> None:
        self._window_handle = handle

    def get_window_handle(self) -> Any:
        return self._window_handle

    def switch_to(self) -> "NewWindowPage":
        """Make this page's window the driver's current window"""
        if self._window_handle is None:
            raise ValueError(f"No window handle has been assigned to {self.title}")
        self.driver.switch_to_window(self._window_handle)
        return self
