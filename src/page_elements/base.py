"""
Base types and driver-facing interfaces for the page element layer
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Protocol, runtime_checkable


class LookUp(Enum):
    """Strategy used to locate an element with its locator string"""
    BY_CLASS_NAME = "class name"
    BY_CSS_SELECTOR = "css selector"
    BY_ID = "id"
    BY_LINK_TEXT = "link text"
    BY_NAME = "name"
    BY_PARTIAL_LINK_TEXT = "partial link text"
    BY_TAG_NAME = "tag name"
    BY_XPATH = "xpath"


@dataclass(frozen=True)
class Point:
    """Location of a node relative to the top-left of the page"""
    x: int
    y: int


@dataclass(frozen=True)
class Dimension:
    """Rendered width and height of a node"""
    width: int
    height: int


WaitDelegate = Callable[[], Any]


@runtime_checkable
class Node(Protocol):
    """A live node returned by the driver.

    References may go stale between calls; adapters raise StaleNodeError when
    that happens and DriverError for any other transport failure.
    """

    def click(self) -> None: ...

    def clear(self) -> None: ...

    def get_attribute(self, name: str) -> Optional[str]: ...

    def get_tag_name(self) -> str: ...

    def get_text(self) -> str: ...

    def is_enabled(self) -> bool: ...

    def is_selected(self) -> bool: ...

    def send_keys(self, *keys: str) -> None: ...

    def submit(self) -> None: ...

    def is_displayed(self) -> bool: ...

    def get_css_value(self, name: str) -> str: ...

    def get_location(self) -> Point: ...

    def get_size(self) -> Dimension: ...

    def find_node(self, lookup: LookUp, locator: str) -> Optional["Node"]: ...

    def find_nodes(self, lookup: LookUp, locator: str) -> List["Node"]: ...

    def select_option(self, value: Optional[str] = None, label: Optional[str] = None,
                      index: Optional[int] = None) -> List[str]: ...

    def get_options(self) -> List["Node"]: ...


@runtime_checkable
class Driver(Protocol):
    """The browser session the elements resolve against"""

    def find_node(self, lookup: LookUp, locator: str) -> Optional[Node]: ...

    def find_nodes(self, lookup: LookUp, locator: str) -> List[Node]: ...

    def get_window_handle(self) -> Any: ...

    def get_window_handles(self) -> List[Any]: ...

    def switch_to_window(self, handle: Any) -> None: ...


class OwningPage(Protocol):
    """What an element needs from the page that declares it"""

    def get_driver(self) -> Driver: ...

    def get_default_wait_seconds(self) -> int: ...

    def get_wait_delegate(self) -> Optional[WaitDelegate]: ...


class OpensNewWindow(ABC):
    """Marks a page that is opened in its own browser window"""

    @abstractmethod
    def set_window_handle(self, handle: Any) -> None:
        pass

    @abstractmethod
    def get_window_handle(self) -> Any:
        pass
