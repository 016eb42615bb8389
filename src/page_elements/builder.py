"""
Fluent builders used by pages to declare their elements
"""

from typing import Any, Generic, List, Optional, Type, TypeVar

from .base import LookUp, OwningPage
from .handle import Element

H = TypeVar("H", bound=Element)
B = TypeVar("B", bound="ElementBuilder")


class ElementBuilder(Generic[H]):
    """
    Collects the configuration of an element and builds it.

    Subclasses set ``element_class`` and usually add classmethod constructors
    that fill a family template with an identifier.
    """

    element_class: Type[H] = Element

    def __init__(self, parent: OwningPage, lookup: LookUp, locator: str):
        if parent is None:
            raise ValueError("parent page cannot be None")
        if lookup is None:
            raise ValueError("lookup cannot be None")
        if locator is None:
            raise ValueError("locator cannot be None")

        self.parent = parent
        self.lookup = lookup
        self.locator = locator

        self._label: Optional[str] = None
        self._link: Optional[Any] = None
        self._localizations: List[str] = []
        self._is_template = False
        self._required = False
        self._multiples_locator: Optional[str] = None
        self._default_wait_interval = 0

    def label(self: B, label: str) -> B:
        self._label = label
        return self

    def add_localization(self: B, localization: str) -> B:
        self._localizations.append(localization)
        return self

    def is_template(self: B) -> B:
        self._is_template = True
        return self

    def required(self: B) -> B:
        self._required = True
        return self

    def default_wait_interval(self: B, seconds: int) -> B:
        self._default_wait_interval = seconds
        return self

    def has_multiples(self: B, locator: str) -> B:
        self._multiples_locator = locator
        return self

    def build(self) -> H:
        control = self.element_class(self.parent, self.lookup, self.locator,
                                     label=self._label, link=self._link)
        self.configure(control)
        return control

    def configure(self, control: Element) -> None:
        """Apply the optional configuration to a newly built element"""
        # Localizations are template variants of a single label
        if self._localizations:
            control.set_is_template()
            for localization in self._localizations:
                control.add_localization(localization)

        if self._is_template:
            control.set_is_template()

        if self._required:
            control.set_required()

        if self._multiples_locator is not None:
            control.set_multiples_locator(self._multiples_locator)

        self._set_wait_timeout(control)

    def _set_wait_timeout(self, control: Element):
        # The builder interval always wins over the page default
        if self._default_wait_interval > 0:
            control.set_timeout(self._default_wait_interval)
        else:
            page_default = self.parent.get_default_wait_seconds()
            if page_default > 0:
                control.set_timeout(page_default)

    def __str__(self):
        title = getattr(self.parent, "title", type(self.parent).__name__)
        builder_class = type(self)
        return (f"Parent : {title}"
                f" Element : {builder_class.__module__}.{builder_class.__qualname__}"
                f" LookUp : {self.lookup.name}"
                f" Locator : {self.locator}")


class LinkableBuilder(ElementBuilder[H]):
    """Builder for elements that can navigate to another page"""

    def links_to(self: B, page: Any) -> B:
        self._link = page
        return self
