"""Shared fakes for driving elements without a browser."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import pytest

from page_elements import Dimension, LookUp, Page, Point, SessionParameters


class FakeNode:
    """In-memory node; ``errors`` maps an operation name to the exception it raises."""

    def __init__(self, text: str = "", tag: str = "input", displayed: bool = True,
                 enabled: bool = True, selected: bool = False,
                 attributes: Optional[Dict[str, str]] = None):
        self.text = text
        self.tag = tag
        self.displayed = displayed
        self.enabled = enabled
        self.selected = selected
        self.attributes = attributes or {}
        self.errors: Dict[str, Exception] = {}
        self.calls: List[Tuple[str, tuple]] = []
        self.children: Dict[Tuple[LookUp, str], List["FakeNode"]] = {}
        self.options: List["FakeNode"] = []

    def _record(self, operation: str, *args):
        self.calls.append((operation, args))
        error = self.errors.get(operation)
        if error is not None:
            raise error

    def click(self):
        self._record("click")
        self.selected = not self.selected

    def clear(self):
        self._record("clear")
        self.attributes["value"] = ""

    def get_attribute(self, name):
        self._record("get_attribute", name)
        return self.attributes.get(name)

    def get_tag_name(self):
        self._record("get_tag_name")
        return self.tag

    def get_text(self):
        self._record("get_text")
        return self.text

    def is_enabled(self):
        self._record("is_enabled")
        return self.enabled

    def is_selected(self):
        self._record("is_selected")
        return self.selected

    def send_keys(self, *keys):
        self._record("send_keys", *keys)
        self.attributes["value"] = self.attributes.get("value", "") + "".join(keys)

    def submit(self):
        self._record("submit")

    def is_displayed(self):
        self._record("is_displayed")
        return self.displayed

    def get_css_value(self, name):
        self._record("get_css_value", name)
        return "rgb(0, 0, 0)"

    def get_location(self):
        self._record("get_location")
        return Point(10, 20)

    def get_size(self):
        self._record("get_size")
        return Dimension(100, 30)

    def find_node(self, lookup, locator):
        self._record("find_node", lookup, locator)
        found = self.children.get((lookup, locator), [])
        return found[0] if found else None

    def find_nodes(self, lookup, locator):
        self._record("find_nodes", lookup, locator)
        return list(self.children.get((lookup, locator), []))

    def select_option(self, value=None, label=None, index=None):
        self._record("select_option", value, label, index)
        return [value or label or str(index)]

    def get_options(self):
        self._record("get_options")
        return list(self.options)


class FakeDriver:
    """Driver whose DOM is a dict of (lookup, locator) -> node, list of nodes or exception."""

    def __init__(self):
        self.nodes: Dict[Tuple[LookUp, str], Any] = {}
        self.lookups: List[Tuple[LookUp, str]] = []
        self.windows: List[str] = ["main"]
        self.current_window = "main"
        self.on_click_open: Optional[str] = None

    def add(self, lookup: LookUp, locator: str, node: Any) -> Any:
        self.nodes[(lookup, locator)] = node
        return node

    def find_node(self, lookup, locator):
        self.lookups.append((lookup, locator))
        value = self.nodes.get((lookup, locator))
        if isinstance(value, Exception):
            raise value
        if isinstance(value, list):
            return value[0] if value else None
        return value

    def find_nodes(self, lookup, locator):
        self.lookups.append((lookup, locator))
        value = self.nodes.get((lookup, locator))
        if isinstance(value, Exception):
            raise value
        if value is None:
            return []
        return value if isinstance(value, list) else [value]

    def get_window_handle(self):
        return self.current_window

    def get_window_handles(self):
        return list(self.windows)

    def switch_to_window(self, handle):
        self.current_window = handle


LOCATOR = "//div[@id='locator']"
PARENT_LOCATOR = "//div[@id='parent']"


@pytest.fixture()
def driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture()
def parameters() -> SessionParameters:
    return SessionParameters(poll_interval_seconds=0.05, link_settle_seconds=0)


@pytest.fixture()
def page(driver, parameters) -> Page:
    return Page(driver, "Test Page", parameters)


@pytest.fixture()
def node(driver) -> FakeNode:
    return driver.add(LookUp.BY_XPATH, LOCATOR, FakeNode(text="Hello", attributes={"id": "locator"}))
