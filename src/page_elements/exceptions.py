"""
Exception hierarchy for the page element layer
"""

from typing import List, Optional


class PageElementsError(Exception):
    """Base class for every error raised by page_elements"""


class NonExistentElementError(PageElementsError):
    """No node matches the element, or a collection lookup missed"""


class AutomationError(PageElementsError):
    """The driver failed while interacting with a resolved element"""


class TemplateMisuseError(PageElementsError):
    """A template element was resolved without any identifiers"""


class InsufficientArgumentsError(PageElementsError):
    """Fewer template identifiers than placeholders in the locator"""

    def __init__(self, template: str, identifiers: List[str], cause: Optional[Exception] = None):
        self.template = template
        self.identifiers = list(identifiers)
        self.cause = cause
        super().__init__(
            f"Either the type or quantity of arguments supplied for the template "
            f"[{template}] is incorrect -> {self.identifiers} : {cause}"
        )


class LocalizationMismatchError(PageElementsError):
    """A collection key is not a localization of the element it points at"""


class WaitTimeoutError(PageElementsError):
    """An element did not become visible within the wait budget"""

    def __init__(self, timeout: float, elapsed: float, description: str = ""):
        self.timeout = timeout
        self.elapsed = elapsed
        message = f"Element not visible after {elapsed:.2f}s (timeout {timeout}s)"
        if description:
            message = f"{message} : {description}"
        super().__init__(message)


class LinkNotConfiguredError(PageElementsError):
    """go_to_link() was called on an element built without links_to()"""


# Driver-level signals raised by Driver/Node adapters

class DriverError(PageElementsError):
    """Transport or execution failure reported by the browser driver"""


class StaleNodeError(DriverError):
    """The node reference was invalidated by a navigation or DOM update"""


class NodeNotVisibleError(DriverError):
    """The node exists but cannot be interacted with because it is hidden"""
