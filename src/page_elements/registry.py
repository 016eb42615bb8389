"""
Labelled collection of the elements declared by a page
"""

from typing import Dict, Iterator, List, Optional, Type, TypeVar

from .exceptions import LocalizationMismatchError, NonExistentElementError
from .handle import Element

E = TypeVar("E", bound=Element)


class ElementCollection:
    """
    Maps labels (and localized aliases) to a page's elements.

    An element with localizations is registered once per alias, so size()
    counts keys rather than distinct elements.
    """

    def __init__(self):
        self._map: Dict[str, Element] = {}

    @classmethod
    def create(cls) -> "ElementCollection":
        return cls()

    def put(self, element: Element, key: Optional[str] = None) -> "ElementCollection":
        """Register an element under its label and localizations, or under key"""
        if element is None:
            raise ValueError("element cannot be None")

        if key is not None:
            self._create_localized_entries(element)
            self._map[key] = element
        elif element.has_localizations():
            self._create_localized_entries(element)
        else:
            self._map[element.get_label()] = element

        return self

    def _create_localized_entries(self, element: Element):
        if element.has_localizations():
            for localization in element.get_localizations():
                self._map[localization] = element

    def find(self, label: str, *identifiers: str, of_type: Optional[Type[E]] = None) -> E:
        """
        Look up an element by label.

        Args:
            label: the label, localization or explicit key the element was put under
            identifiers: template identifiers; replace the element's current ones
            of_type: expected element class

        With no identifiers, a localized label becomes the element's template
        identifier, so finding by localized name also parameterizes it.
        """
        if label is None:
            raise ValueError("label cannot be None")

        element = self._map.get(label)
        if element is None:
            raise NonExistentElementError(
                f"The ElementCollection does not contain an element with the label : {label}"
            )

        if of_type is not None and not isinstance(element, of_type):
            raise NonExistentElementError(
                f"The ElementCollection does not contain an element with the type : "
                f"{of_type.__name__} and the label : {label}"
            )

        if identifiers:
            element.set_template_identifiers(*identifiers)
        else:
            self._set_localization(label, element)

        return element

    def _set_localization(self, label: str, element: Element):
        if not element.has_localizations():
            return
        if label in element.get_localizations():
            element.set_template_identifier(label)
        else:
            raise LocalizationMismatchError(
                f"The label : {label} is not a localization of the element : {element}"
            )

    def get_elements_by_type(self, element_type: Type[E]) -> List[E]:
        """Every entry whose element is an instance of element_type"""
        if element_type is None:
            raise ValueError("element_type cannot be None")
        return [element for element in self._map.values() if isinstance(element, element_type)]

    def size(self) -> int:
        return len(self._map)

    def __len__(self):
        return len(self._map)

    def __contains__(self, label: str) -> bool:
        return label in self._map

    def __iter__(self) -> Iterator[str]:
        return iter(self._map)

    def __str__(self):
        lines = ["ElementCollection : "]
        for key, element in self._map.items():
            lines.append(f"Key : {key}")
            lines.append(f"Value : {element}")
        return "\n".join(lines)
