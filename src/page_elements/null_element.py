"""
Null object returned when an element cannot be resolved
"""

from typing import TYPE_CHECKING, NoReturn

from .exceptions import NonExistentElementError

if TYPE_CHECKING:
    from .handle import Element


class NonExistentElement:
    """
    Stand-in for a node the driver could not find.

    Every operation raises NonExistentElementError naming the operation and
    the element that failed to resolve, so a missing element surfaces where it
    is actually used instead of as an AttributeError on None somewhere later.
    Only is_valid() and str() are safe to call.
    """

    __slots__ = ("_caller",)

    def __init__(self, caller: "Element"):
        if caller is None:
            raise ValueError("caller cannot be None")
        self._caller = caller

    def _fail(self, operation: str) -> NoReturn:
        raise NonExistentElementError(
            f"Attempt to call {operation}() on an element that cannot be found. {self._caller}"
        )

    def __str__(self):
        return "Non-existent Element."

    def __repr__(self):
        return "<NonExistentElement>"

    def is_valid(self) -> bool:
        return False

    # Node surface

    def clear(self): self._fail("clear")
    def click(self): self._fail("click")
    def find_node(self, lookup, locator): self._fail("find_node")
    def find_nodes(self, lookup, locator): self._fail("find_nodes")
    def get_attribute(self, name): self._fail("get_attribute")
    def get_tag_name(self): self._fail("get_tag_name")
    def get_text(self): self._fail("get_text")
    def is_enabled(self): self._fail("is_enabled")
    def is_selected(self): self._fail("is_selected")
    def send_keys(self, *keys): self._fail("send_keys")
    def submit(self): self._fail("submit")
    def is_displayed(self): self._fail("is_displayed")
    def get_css_value(self, name): self._fail("get_css_value")
    def get_location(self): self._fail("get_location")
    def get_size(self): self._fail("get_size")
    def select_option(self, value=None, label=None, index=None): self._fail("select_option")
    def get_options(self): self._fail("get_options")

    # Element surface

    def type(self, *keys): self._fail("type")
    def get_node(self): self._fail("get_node")
    def resolve(self): self._fail("resolve")
    def get_nodes(self): self._fail("get_nodes")
    def get_parent_page(self): self._fail("get_parent_page")
    def get_locator(self): self._fail("get_locator")
    def get_lookup(self): self._fail("get_lookup")
    def get_descriptor(self): self._fail("get_descriptor")

    @property
    def label(self): self._fail("label")

    def has_label(self): self._fail("has_label")
    def get_label(self): self._fail("get_label")
    def set_required(self): self._fail("set_required")
    def is_required(self): self._fail("is_required")
    def set_relative_to_parent(self, parent): self._fail("set_relative_to_parent")
    def is_relative_to_parent(self): self._fail("is_relative_to_parent")
    def get_relative_parent(self): self._fail("get_relative_parent")
    def add_localization(self, localization): self._fail("add_localization")
    def get_localizations(self): self._fail("get_localizations")
    def has_localizations(self): self._fail("has_localizations")
    def has_link(self): self._fail("has_link")
    def get_link(self, page_type=None): self._fail("get_link")
    def go_to_link(self, page_type=None): self._fail("go_to_link")
    def set_is_template(self): self._fail("set_is_template")
    def is_template(self): self._fail("is_template")
    def set_template_identifier(self, identifier): self._fail("set_template_identifier")
    def set_template_identifiers(self, *identifiers): self._fail("set_template_identifiers")
    def get_template_identifiers(self): self._fail("get_template_identifiers")
    def set_multiples_locator(self, locator): self._fail("set_multiples_locator")
    def get_multiples_locator(self): self._fail("get_multiples_locator")
    def has_multiples(self): self._fail("has_multiples")
    def pause(self, seconds): self._fail("pause")
    def wait_until_visible(self, seconds=None): self._fail("wait_until_visible")
    def set_timeout(self, seconds): self._fail("set_timeout")
    def get_timeout(self): self._fail("get_timeout")

    # Wait-then-act surface

    def clear_when_visible(self, timeout=None): self._fail("clear_when_visible")
    def click_when_visible(self, timeout=None): self._fail("click_when_visible")
    def find_nodes_when_visible(self, lookup, locator, timeout=None): self._fail("find_nodes_when_visible")
    def get_attribute_when_visible(self, name, timeout=None): self._fail("get_attribute_when_visible")
    def get_tag_name_when_visible(self, timeout=None): self._fail("get_tag_name_when_visible")
    def get_text_when_visible(self, timeout=None): self._fail("get_text_when_visible")
    def is_enabled_when_visible(self, timeout=None): self._fail("is_enabled_when_visible")
    def is_selected_when_visible(self, timeout=None): self._fail("is_selected_when_visible")
    def send_keys_when_visible(self, *keys, timeout=None): self._fail("send_keys_when_visible")
    def type_when_visible(self, *keys, timeout=None): self._fail("type_when_visible")
    def submit_when_visible(self, timeout=None): self._fail("submit_when_visible")
    def is_displayed_when_visible(self, timeout=None): self._fail("is_displayed_when_visible")
    def get_css_value_when_visible(self, name, timeout=None): self._fail("get_css_value_when_visible")
    def get_location_when_visible(self, timeout=None): self._fail("get_location_when_visible")
    def get_size_when_visible(self, timeout=None): self._fail("get_size_when_visible")
