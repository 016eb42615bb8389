"""
Lazily resolved element handle.

An Element describes how to find a control (lookup strategy + locator) and is
declared before any browser session exists. Nothing is cached: every
operation asks the driver for the node again, because a navigation or refresh
between two calls invalidates earlier references.
"""

import logging
import threading
import time
from typing import Any, Callable, List, Optional, Type, TypeVar, Union

from .base import Dimension, LookUp, Node, OpensNewWindow, OwningPage, Point, WaitDelegate
from .exceptions import (
    AutomationError,
    DriverError,
    InsufficientArgumentsError,
    LinkNotConfiguredError,
    NodeNotVisibleError,
    NonExistentElementError,
    TemplateMisuseError,
    WaitTimeoutError,
)
from .locator import compose, fill_template, format_identifier
from .null_element import NonExistentElement
from .waiter import VisibilityWaiter

logger = logging.getLogger(__name__)

P = TypeVar("P")

DEFAULT_POLL_INTERVAL = 0.5
DEFAULT_LINK_SETTLE = 2.0


class Element:
    """
    Base class for every primitive control.

    WARNING: the browser driver is not thread safe. The per-element lock only
    guards this object's configuration; driver calls are not serialized.
    """

    def __init__(self, parent: OwningPage, lookup: LookUp, locator: str,
                 label: Optional[str] = None, link: Optional[Any] = None):
        if parent is None:
            raise ValueError("parent page cannot be None")
        if lookup is None:
            raise ValueError("lookup cannot be None")
        if locator is None:
            raise ValueError("locator cannot be None")

        self._parent = parent
        self._lookup = lookup
        self._locator = locator
        self._label = label
        self._link = link

        self._lock = threading.RLock()
        self._localizations: List[str] = []
        self._template_identifiers: List[str] = []
        self._required = False
        self._is_template = False
        self._timeout: float = 0
        self._relative_parent: Optional["Element"] = None
        self._multiples_locator: Optional[str] = None

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _check_template(self):
        if self.is_template() and not self.get_template_identifiers():
            raise TemplateMisuseError(
                "An identifier must be set using set_template_identifier() for any "
                f"element behaving as a template. {self}"
            )

    def get_node(self) -> Union[Node, NonExistentElement]:
        """Resolve this element to a live node, or to the null object when absent"""
        try:
            return self.resolve()
        except DriverError as e:
            raise AutomationError(f"{e} {self}") from e

    def resolve(self) -> Union[Node, NonExistentElement]:
        """
        Like get_node(), but driver errors (StaleNodeError included) are
        raised unwrapped so that a poller can tell staleness apart.
        """
        self._check_template()
        locator = self.get_locator()

        node = self._parent.get_driver().find_node(self._lookup, locator)
        if node is None:
            logger.debug("No match for %s %r", self._lookup.name, locator)
            return NonExistentElement(self)
        return node

    def get_nodes(self) -> List[Node]:
        """Resolve every node matching the multiples locator (or the locator)"""
        self._check_template()
        with self._lock:
            multiples = self._multiples_locator
        locator = multiples if multiples is not None else self.get_locator()

        try:
            return list(self._parent.get_driver().find_nodes(self._lookup, locator))
        except DriverError as e:
            raise AutomationError(f"{e} {self}") from e

    def _automation_error(self, error: Exception) -> AutomationError:
        return AutomationError(f"Automation Exception thrown for -> {self} : {error}")

    def _invoke(self, operation: str, *args):
        node = self.get_node()
        try:
            return getattr(node, operation)(*args)
        except DriverError as e:
            raise self._automation_error(e) from e

    # ------------------------------------------------------------------
    # Interaction
    # ------------------------------------------------------------------

    def clear(self) -> "Element":
        self._invoke("clear")
        return self

    def click(self) -> "Element":
        self._invoke("click")
        return self

    def find_node(self, lookup: LookUp, locator: str) -> Optional[Node]:
        """Find one node below this element"""
        return self._invoke("find_node", lookup, locator)

    def find_nodes(self, lookup: LookUp, locator: str) -> List[Node]:
        """Find every node below this element"""
        return self._invoke("find_nodes", lookup, locator)

    def get_attribute(self, name: str) -> Optional[str]:
        return self._invoke("get_attribute", name)

    def get_tag_name(self) -> str:
        return self._invoke("get_tag_name")

    def get_text(self) -> str:
        return self._invoke("get_text")

    def is_enabled(self) -> bool:
        """A missing or hidden element reports False instead of raising"""
        node = self.get_node()
        try:
            return node.is_enabled()
        except NonExistentElementError:
            return self.is_valid()
        except NodeNotVisibleError:
            return False
        except DriverError as e:
            raise self._automation_error(e) from e

    def is_selected(self) -> bool:
        return self._invoke("is_selected")

    def send_keys(self, *keys: str) -> "Element":
        self._invoke("send_keys", *keys)
        return self

    def type(self, *keys: str) -> "Element":
        return self.send_keys(*keys)

    def submit(self) -> "Element":
        self._invoke("submit")
        return self

    def is_displayed(self) -> bool:
        return self._invoke("is_displayed")

    def get_css_value(self, name: str) -> str:
        return self._invoke("get_css_value", name)

    def get_location(self) -> Point:
        return self._invoke("get_location")

    def get_size(self) -> Dimension:
        return self._invoke("get_size")

    def is_valid(self) -> bool:
        """True when the driver currently finds a node for this element"""
        return not isinstance(self.get_node(), NonExistentElement)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def get_parent_page(self) -> OwningPage:
        return self._parent

    def get_lookup(self) -> LookUp:
        return self._lookup

    def get_locator(self) -> str:
        """The effective locator: parent's locator + this (filled) locator"""
        with self._lock:
            relative_parent = self._relative_parent
            is_template = self._is_template

        parent_locator = relative_parent.get_locator() if relative_parent is not None else None

        if is_template:
            fragment = fill_template(self._locator, self.get_template_identifiers())
        else:
            fragment = self._locator

        return compose(parent_locator, fragment)

    @property
    def label(self) -> Optional[str]:
        return self._label

    def has_label(self) -> bool:
        return self._label is not None

    def get_label(self) -> str:
        if self._label is None:
            raise ValueError("The label for this element was not set through its builder.")
        return self._label

    def set_required(self) -> "Element":
        with self._lock:
            self._required = True
        return self

    def is_required(self) -> bool:
        with self._lock:
            return self._required

    def set_relative_to_parent(self, parent: Optional["Element"]) -> "Element":
        with self._lock:
            self._relative_parent = parent
        return self

    def is_relative_to_parent(self) -> bool:
        with self._lock:
            return self._relative_parent is not None

    def get_relative_parent(self) -> Optional["Element"]:
        with self._lock:
            return self._relative_parent

    def add_localization(self, localization: str) -> "Element":
        with self._lock:
            if localization not in self._localizations:
                self._localizations.append(localization)
        return self

    def get_localizations(self) -> List[str]:
        """Copy of the localizations, including the label"""
        with self._lock:
            localizations = list(self._localizations)
        if self._label is not None and self._label not in localizations:
            localizations.append(self._label)
        return localizations

    def has_localizations(self) -> bool:
        with self._lock:
            return len(self._localizations) > 0

    def set_is_template(self) -> "Element":
        with self._lock:
            self._is_template = True
        return self

    def is_template(self) -> bool:
        with self._lock:
            return self._is_template

    def set_template_identifier(self, identifier: str) -> "Element":
        with self._lock:
            self._template_identifiers = [format_identifier(identifier)]
        return self

    def set_template_identifiers(self, *identifiers: str) -> "Element":
        with self._lock:
            self._template_identifiers = [format_identifier(i) for i in identifiers]
        return self

    def get_template_identifiers(self) -> List[str]:
        with self._lock:
            # Inherit from a template parent the first time none are set locally
            parent = self._relative_parent
            if (self._is_template and not self._template_identifiers
                    and parent is not None and parent.is_template()):
                self._template_identifiers.extend(
                    format_identifier(s) for s in parent.get_template_identifiers()
                )
            return list(self._template_identifiers)

    def set_timeout(self, seconds: float) -> "Element":
        with self._lock:
            self._timeout = seconds
        return self

    def get_timeout(self) -> float:
        with self._lock:
            return self._timeout

    def set_multiples_locator(self, locator: str) -> "Element":
        with self._lock:
            self._multiples_locator = locator
        return self

    def get_multiples_locator(self) -> Optional[str]:
        with self._lock:
            return self._multiples_locator

    def has_multiples(self) -> bool:
        with self._lock:
            return self._multiples_locator is not None

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------

    def has_link(self) -> bool:
        return self._link is not None

    def get_link(self, page_type: Optional[Type[P]] = None) -> P:
        if page_type is not None and not isinstance(self._link, page_type):
            raise TypeError(f"Link {self._link!r} is not a {page_type.__name__}")
        return self._link

    def go_to_link(self, page_type: Optional[Type[P]] = None) -> P:
        """Click through to the linked page and return it"""
        if self._link is None:
            raise LinkNotConfiguredError(
                f"The link for this element was not set through its builder. {self}"
            )
        if page_type is not None and not isinstance(self._link, page_type):
            raise TypeError(f"Link {self._link!r} is not a {page_type.__name__}")

        # WARNING: naive, assumes at most one window opens per click. Window
        # handles are opaque, so the new one can only be told apart by
        # diffing against the handle that was current before the click.
        driver = self._parent.get_driver()
        parent_window = driver.get_window_handle()

        self.click().pause(self._page_setting("get_link_settle_seconds", DEFAULT_LINK_SETTLE))

        if isinstance(self._link, OpensNewWindow):
            for handle in driver.get_window_handles():
                if handle == parent_window:
                    continue
                logger.debug("Assigning window %r to %r", handle, self._link)
                self._link.set_window_handle(handle)
                break

        return self._link

    # ------------------------------------------------------------------
    # Waiting
    # ------------------------------------------------------------------

    def _page_setting(self, getter: str, default):
        method = getattr(self._parent, getter, None)
        if method is None:
            return default
        value = method()
        return default if value is None else value

    def pause(self, seconds: float) -> "Element":
        """Sleep unconditionally; an interrupted sleep is logged, not raised"""
        try:
            time.sleep(seconds)
        except InterruptedError:
            # sleep retries on EINTR (PEP 475); only a signal handler raising this lands here
            logger.warning("Pause of %ss interrupted for %s", seconds, self)
        return self

    def wait_until_visible(self, seconds: Optional[float] = None) -> "Element":
        timeout = self.get_timeout() if seconds is None else seconds
        delegate: Optional[WaitDelegate] = self._page_setting("get_wait_delegate", None)
        poll_interval = self._page_setting("get_poll_interval_seconds", DEFAULT_POLL_INTERVAL)

        VisibilityWaiter(self, timeout, delegate, poll_interval).until_visible()
        return self

    def _when_visible(self, timeout: Optional[float], operation: Callable, *args):
        try:
            self.wait_until_visible(timeout)
        except WaitTimeoutError as e:
            raise self._automation_error(e) from e
        return operation(*args)

    def clear_when_visible(self, timeout: Optional[float] = None) -> "Element":
        return self._when_visible(timeout, self.clear)

    def click_when_visible(self, timeout: Optional[float] = None) -> "Element":
        return self._when_visible(timeout, self.click)

    def find_nodes_when_visible(self, lookup: LookUp, locator: str,
                                timeout: Optional[float] = None) -> List[Node]:
        return self._when_visible(timeout, self.find_nodes, lookup, locator)

    def get_attribute_when_visible(self, name: str, timeout: Optional[float] = None) -> Optional[str]:
        return self._when_visible(timeout, self.get_attribute, name)

    def get_tag_name_when_visible(self, timeout: Optional[float] = None) -> str:
        return self._when_visible(timeout, self.get_tag_name)

    def get_text_when_visible(self, timeout: Optional[float] = None) -> str:
        return self._when_visible(timeout, self.get_text)

    def is_enabled_when_visible(self, timeout: Optional[float] = None) -> bool:
        return self._when_visible(timeout, self.is_enabled)

    def is_selected_when_visible(self, timeout: Optional[float] = None) -> bool:
        return self._when_visible(timeout, self.is_selected)

    def send_keys_when_visible(self, *keys: str, timeout: Optional[float] = None) -> "Element":
        return self._when_visible(timeout, self.send_keys, *keys)

    def type_when_visible(self, *keys: str, timeout: Optional[float] = None) -> "Element":
        return self.send_keys_when_visible(*keys, timeout=timeout)

    def submit_when_visible(self, timeout: Optional[float] = None) -> "Element":
        return self._when_visible(timeout, self.submit)

    def is_displayed_when_visible(self, timeout: Optional[float] = None) -> bool:
        return self._when_visible(timeout, self.is_displayed)

    def get_css_value_when_visible(self, name: str, timeout: Optional[float] = None) -> str:
        return self._when_visible(timeout, self.get_css_value, name)

    def get_location_when_visible(self, timeout: Optional[float] = None) -> Point:
        return self._when_visible(timeout, self.get_location)

    def get_size_when_visible(self, timeout: Optional[float] = None) -> Dimension:
        return self._when_visible(timeout, self.get_size)

    # ------------------------------------------------------------------

    def get_descriptor(self) -> str:
        try:
            locator = self.get_locator()
        except InsufficientArgumentsError:
            locator = self._locator

        page_class = type(self._parent)
        element_class = type(self)
        return (
            f"Parent Page : {page_class.__module__}.{page_class.__qualname__}"
            f" Element : {element_class.__module__}.{element_class.__qualname__}"
            f" LookUp : {self._lookup.name}"
            f" Locator : {locator}"
            f" HasLocalizations : {self.has_localizations()}"
            f" HasLabel : {self.has_label()}"
            f" IsRelativeToParent : {self.is_relative_to_parent()}"
            f" IsTemplate : {self.is_template()}"
        )

    def __str__(self):
        return self.get_descriptor()

    def __repr__(self):
        return f"<{type(self).__name__} {self._lookup.name} {self._locator!r} label={self._label!r}>"
