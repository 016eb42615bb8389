"""Tests for page_elements.registry.ElementCollection."""

from __future__ import annotations

import pytest

from conftest import LOCATOR
from page_elements import (
    Element,
    ElementCollection,
    LocalizationMismatchError,
    LookUp,
    NonExistentElementError,
)
from page_elements.controls import Button, TextBox


def element(page, label="Label", locator=LOCATOR, cls=Element) -> Element:
    return cls(page, LookUp.BY_XPATH, locator, label=label)


@pytest.fixture()
def collection() -> ElementCollection:
    return ElementCollection.create()


class TestPut:

    def test_put_by_label(self, page, collection) -> None:
        registered = element(page)
        collection.put(registered)

        assert collection.size() == 1
        assert len(collection) == 1
        assert "Label" in collection
        assert collection.find("Label") is registered

    def test_put_with_localizations_adds_every_alias(self, page, collection) -> None:
        localized = element(page, locator="//a[.='{}']").set_is_template()
        localized.add_localization("Accueil").add_localization("Inicio")

        collection.put(localized)

        assert collection.size() == 3
        assert sorted(collection) == ["Accueil", "Inicio", "Label"]
        assert collection.find("Accueil") is localized
        assert collection.find("Inicio") is localized
        assert collection.find("Label") is localized

    def test_put_with_key(self, page, collection) -> None:
        registered = element(page)
        collection.put(registered, "custom")

        assert collection.size() == 1
        assert collection.find("custom") is registered
        assert "Label" not in collection

    def test_put_with_key_and_localizations(self, page, collection) -> None:
        localized = element(page, locator="//a[.='{}']").set_is_template()
        localized.add_localization("Accueil")

        collection.put(localized, "custom")

        assert sorted(collection) == ["Accueil", "Label", "custom"]

    def test_put_without_label(self, page, collection) -> None:
        with pytest.raises(ValueError):
            collection.put(element(page, label=None))

    def test_put_none(self, collection) -> None:
        with pytest.raises(ValueError):
            collection.put(None)

    def test_put_is_fluent(self, page, collection) -> None:
        result = collection.put(element(page, "One")).put(element(page, "Two"))
        assert result is collection
        assert collection.size() == 2

    def test_later_put_replaces(self, page, collection) -> None:
        first = element(page)
        second = element(page)
        collection.put(first).put(second)

        assert collection.size() == 1
        assert collection.find("Label") is second


class TestFind:

    def test_unknown_label(self, collection) -> None:
        with pytest.raises(NonExistentElementError, match="with the label : Missing"):
            collection.find("Missing")

    def test_type_mismatch(self, page, collection) -> None:
        collection.put(element(page, cls=TextBox))

        with pytest.raises(NonExistentElementError, match="with the type : Button"):
            collection.find("Label", of_type=Button)

    def test_type_match(self, page, collection) -> None:
        text_box = element(page, cls=TextBox)
        collection.put(text_box)

        assert collection.find("Label", of_type=TextBox) is text_box
        assert collection.find("Label", of_type=Element) is text_box

    def test_identifiers_overwrite(self, page, collection) -> None:
        row = element(page, locator="//tr[{}]/td[{}]").set_is_template()
        collection.put(row)

        collection.find("Label", "1", "2")
        assert row.get_locator() == "//tr[1]/td[2]"

        collection.find("Label", "3", "4")
        assert row.get_template_identifiers() == ["3", "4"]
        assert row.get_locator() == "//tr[3]/td[4]"

    def test_localized_label_becomes_identifier(self, page, collection) -> None:
        localized = element(page, locator="//a[.='{}']").set_is_template()
        localized.add_localization("Accueil")
        collection.put(localized)

        collection.find("Accueil")
        assert localized.get_locator() == "//a[.='Accueil']"

        collection.find("Label")
        assert localized.get_locator() == "//a[.='Label']"

    def test_key_that_is_not_a_localization(self, page, collection) -> None:
        localized = element(page, locator="//a[.='{}']").set_is_template()
        localized.add_localization("Accueil")
        collection.put(localized, "custom")

        with pytest.raises(LocalizationMismatchError):
            collection.find("custom")

    def test_plain_element_keeps_identifiers(self, page, collection) -> None:
        row = element(page, locator="//tr[{}]").set_is_template()
        row.set_template_identifier("7")
        collection.put(row)

        collection.find("Label")

        assert row.get_template_identifiers() == ["7"]

    def test_page_find_delegates(self, page) -> None:
        registered = element(page, cls=TextBox)
        page.elements.put(registered)

        assert page.find("Label", of_type=TextBox) is registered


class TestQueries:

    def test_get_elements_by_type(self, page, collection) -> None:
        text_box = element(page, "Name", cls=TextBox)
        button = element(page, "Save", cls=Button)
        collection.put(text_box).put(button)

        assert collection.get_elements_by_type(TextBox) == [text_box]
        assert collection.get_elements_by_type(Button) == [button]
        assert len(collection.get_elements_by_type(Element)) == 2

    def test_get_elements_by_type_counts_aliases(self, page, collection) -> None:
        localized = element(page, locator="//a[.='{}']", cls=TextBox).set_is_template()
        localized.add_localization("Accueil")
        collection.put(localized)

        assert collection.get_elements_by_type(TextBox) == [localized, localized]

    def test_str(self, page, collection) -> None:
        collection.put(element(page))

        rendered = str(collection)

        assert rendered.startswith("ElementCollection : ")
        assert "Key : Label" in rendered
        assert "Value : Parent Page : page_elements.page.Page Element : page_elements.handle.Element" in rendered
