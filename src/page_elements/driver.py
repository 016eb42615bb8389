"""
Playwright adapter for the Driver/Node interfaces
"""

import json
import logging
from typing import Any, List, Optional

from playwright.sync_api import ElementHandle, Error as PlaywrightError, Page

from .base import Dimension, LookUp, Point
from .exceptions import DriverError, NodeNotVisibleError, StaleNodeError

logger = logging.getLogger(__name__)

# Substrings of Playwright error messages, lowercased
STALE_MARKERS = (
    'not attached to the dom',
    'element is detached',
    'has been disposed',
    'execution context was destroyed',
)
HIDDEN_MARKERS = (
    'element is not visible',
    'element is outside of the viewport',
)


def to_selector(lookup: LookUp, locator: str) -> str:
    """Translate a lookup strategy and locator into a Playwright selector"""
    if lookup is LookUp.BY_XPATH:
        return f'xpath={locator}'
    if lookup is LookUp.BY_CSS_SELECTOR:
        return f'css={locator}'
    if lookup is LookUp.BY_CLASS_NAME:
        return f'css=.{locator}'
    if lookup is LookUp.BY_TAG_NAME:
        return f'css={locator}'
    if lookup is LookUp.BY_ID:
        return f'css=[id={json.dumps(locator)}]'
    if lookup is LookUp.BY_NAME:
        return f'css=[name={json.dumps(locator)}]'
    if lookup is LookUp.BY_LINK_TEXT:
        return f'css=a:text-is({json.dumps(locator)})'
    if lookup is LookUp.BY_PARTIAL_LINK_TEXT:
        return f'css=a:has-text({json.dumps(locator)})'
    raise ValueError(f"Unsupported lookup: {lookup}")


def translate_error(error: PlaywrightError) -> DriverError:
    """Map a Playwright error onto the driver error taxonomy"""
    message = str(error)
    lowered = message.lower()
    if any(marker in lowered for marker in STALE_MARKERS):
        return StaleNodeError(message)
    if any(marker in lowered for marker in HIDDEN_MARKERS):
        return NodeNotVisibleError(message)
    return DriverError(message)


def _call(func, *args, **kwargs):
    try:
        return func(*args, **kwargs)
    except PlaywrightError as e:
        raise translate_error(e) from e


SUBMIT_SCRIPT = '''(el) => {
    const form = el.form || el.closest('form');
    if (!form) {
        throw new Error('element is not inside a form');
    }
    if (form.requestSubmit) {
        form.requestSubmit();
    } else {
        form.submit();
    }
}'''


class PlaywrightNode:
    """Node backed by a Playwright ElementHandle"""

    def __init__(self, handle: ElementHandle):
        self.handle = handle

    def click(self) -> None:
        _call(self.handle.click)

    def clear(self) -> None:
        _call(self.handle.fill, '')

    def get_attribute(self, name: str) -> Optional[str]:
        return _call(self.handle.get_attribute, name)

    def get_tag_name(self) -> str:
        return _call(self.handle.evaluate, 'el => el.tagName.toLowerCase()')

    def get_text(self) -> str:
        return _call(self.handle.inner_text)

    def is_enabled(self) -> bool:
        return _call(self.handle.is_enabled)

    def is_selected(self) -> bool:
        return _call(self.handle.evaluate, 'el => !!(el.checked || el.selected)')

    def send_keys(self, *keys: str) -> None:
        _call(self.handle.type, ''.join(keys))

    def submit(self) -> None:
        _call(self.handle.evaluate, SUBMIT_SCRIPT)

    def is_displayed(self) -> bool:
        return _call(self.handle.is_visible)

    def get_css_value(self, name: str) -> str:
        return _call(self.handle.evaluate,
                     '(el, name) => getComputedStyle(el).getPropertyValue(name)', name)

    def _bounding_box(self):
        box = _call(self.handle.bounding_box)
        if box is None:
            raise NodeNotVisibleError('element is not visible: no bounding box')
        return box

    def get_location(self) -> Point:
        box = self._bounding_box()
        return Point(int(box['x']), int(box['y']))

    def get_size(self) -> Dimension:
        box = self._bounding_box()
        return Dimension(int(box['width']), int(box['height']))

    def find_node(self, lookup: LookUp, locator: str) -> Optional['PlaywrightNode']:
        found = _call(self.handle.query_selector, to_selector(lookup, locator))
        return PlaywrightNode(found) if found is not None else None

    def find_nodes(self, lookup: LookUp, locator: str) -> List['PlaywrightNode']:
        return [PlaywrightNode(h) for h in _call(self.handle.query_selector_all, to_selector(lookup, locator))]

    def select_option(self, value: Optional[str] = None, label: Optional[str] = None,
                      index: Optional[int] = None) -> List[str]:
        return _call(self.handle.select_option, value=value, label=label, index=index)

    def get_options(self) -> List['PlaywrightNode']:
        return [PlaywrightNode(h) for h in _call(self.handle.query_selector_all, 'option')]


class PlaywrightDriver:
    """
    Driver backed by a Playwright sync Page.

    Window handles are the Page objects of the page's browser context.
    """

    def __init__(self, page: Page):
        self.page = page

    def find_node(self, lookup: LookUp, locator: str) -> Optional[PlaywrightNode]:
        found = _call(self.page.query_selector, to_selector(lookup, locator))
        return PlaywrightNode(found) if found is not None else None

    def find_nodes(self, lookup: LookUp, locator: str) -> List[PlaywrightNode]:
        return [PlaywrightNode(h) for h in _call(self.page.query_selector_all, to_selector(lookup, locator))]

    def get_window_handle(self) -> Page:
        return self.page

    def get_window_handles(self) -> List[Page]:
        return list(self.page.context.pages)

    def switch_to_window(self, handle: Any) -> None:
        logger.debug("Switching to window %s", getattr(handle, 'url', handle))
        _call(handle.bring_to_front)
        self.page = handle
