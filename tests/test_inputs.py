"""Tests for reading and writing input fields."""

from unittest.mock import patch

import pytest
from conftest import FakeDriver, FakeElement, LateDriver
from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.common.by import By

from seleniumext.enums import InputFieldType
from seleniumext.inputs import get_input_field_value, get_input_field_values, set_input_field_value

FIELD = (By.NAME, "field")


def select_box(*options: tuple[str, bool], multiple: bool = False) -> FakeElement:
    return FakeElement(
        tag_name="select",
        multiple=multiple,
        options=[FakeElement(tag_name="option", text=text, selected=selected) for text, selected in options],
    )


class TestTextFields:
    """Tests for text and password fields."""

    @pytest.mark.parametrize("field_type", [InputFieldType.TEXT, InputFieldType.PASSWORD])
    def test_set_then_get_returns_value(self, driver: FakeDriver, field_type: InputFieldType) -> None:
        driver.add(FIELD, FakeElement(value="old value"))

        set_input_field_value(driver, FIELD, field_type, "new value")

        assert get_input_field_value(driver, FIELD, field_type) == "new value"

    def test_field_is_scrolled_into_view(self, driver: FakeDriver) -> None:
        field = driver.add(FIELD, FakeElement(value="x"))

        get_input_field_value(driver, FIELD, InputFieldType.TEXT)

        assert [args for _, args in driver.scripts] == [(field,)]

    def test_values_of_text_field_is_single_entry_list(self, driver: FakeDriver) -> None:
        driver.add(FIELD, FakeElement(value="abc"))

        assert get_input_field_values(driver, FIELD, InputFieldType.TEXT) == ["abc"]

    def test_missing_value_attribute_reads_as_empty_string(self, driver: FakeDriver) -> None:
        class NoValueElement(FakeElement):
            def get_attribute(self, name: str) -> None:
                return None

        driver.add(FIELD, NoValueElement())

        assert get_input_field_value(driver, FIELD, "text") == ""

    def test_password_is_not_logged(self, driver: FakeDriver, caplog: pytest.LogCaptureFixture) -> None:
        driver.add(FIELD, FakeElement())
        caplog.set_level("DEBUG", logger="seleniumext")

        set_input_field_value(driver, FIELD, InputFieldType.PASSWORD, "s3cr3t")

        assert "s3cr3t" not in caplog.text
        assert "<sensitive>" in caplog.text

    def test_missing_field_raises(self, driver: FakeDriver) -> None:
        with pytest.raises(NoSuchElementException):
            get_input_field_value(driver, FIELD, InputFieldType.TEXT)

    def test_field_attached_late_is_found(self) -> None:
        driver = LateDriver(missing_lookups=2)
        field = FakeElement(value="late")
        driver.pending[FIELD] = [field]

        assert get_input_field_value(driver, FIELD, InputFieldType.TEXT) == "late"
        assert len(driver.lookups) == 3
        assert [args for _, args in driver.scripts] == [(field,)]

    def test_set_text_field_with_boolean(self, driver: FakeDriver) -> None:
        field = driver.add(FIELD, FakeElement(value="old"))

        set_input_field_value(driver, FIELD, InputFieldType.TEXT, True)

        assert field.value == "True"


class TestSelectFields:
    """Tests for drop-downs and multi-select boxes."""

    def test_multi_select_returns_all_selected_in_document_order(self, driver: FakeDriver) -> None:
        driver.add(FIELD, select_box(("A", True), ("B", False), ("C", True), multiple=True))

        assert get_input_field_values(driver, FIELD, InputFieldType.MULTI_SELECT_BOX) == ["A", "C"]

    def test_multi_select_single_value_is_first_selected(self, driver: FakeDriver) -> None:
        driver.add(FIELD, select_box(("A", False), ("B", True), ("C", True), multiple=True))

        assert get_input_field_value(driver, FIELD, InputFieldType.MULTI_SELECT_BOX) == "B"

    def test_dropdown_value(self, driver: FakeDriver) -> None:
        driver.add(FIELD, select_box(("Red", False), ("Green", True)))

        assert get_input_field_value(driver, FIELD, InputFieldType.DROPDOWN) == "Green"
        assert get_input_field_values(driver, FIELD, InputFieldType.DROPDOWN) == ["Green"]

    @pytest.mark.parametrize("field_type", [InputFieldType.DROPDOWN, InputFieldType.MULTI_SELECT_BOX])
    def test_set_selects_by_visible_text(self, driver: FakeDriver, field_type: InputFieldType) -> None:
        field = driver.add(FIELD, select_box(("Red", True), ("Green", False)))

        with patch("seleniumext.inputs.Select") as select_class:
            set_input_field_value(driver, FIELD, field_type, "Green")

        select_class.assert_called_once_with(field)
        select_class.return_value.select_by_visible_text.assert_called_once_with("Green")


class TestCheckedFields:
    """Tests for checkboxes and radio buttons."""

    @pytest.mark.parametrize("input_type", ["checkbox", "radio"])
    def test_get_checked_state(self, driver: FakeDriver, input_type: str) -> None:
        field = driver.add(FIELD, FakeElement(attributes={"type": input_type}))
        field_type = InputFieldType.CHECKBOX if input_type == "checkbox" else InputFieldType.RADIO_BUTTON

        assert get_input_field_value(driver, FIELD, field_type) == "false"
        field.selected = True
        assert get_input_field_value(driver, FIELD, field_type) == "true"

    def test_set_checkbox_twice_toggles_once(self, driver: FakeDriver) -> None:
        checkbox = driver.add(FIELD, FakeElement(attributes={"type": "checkbox"}))

        set_input_field_value(driver, FIELD, InputFieldType.CHECKBOX, "true")
        set_input_field_value(driver, FIELD, InputFieldType.CHECKBOX, "true")

        assert checkbox.clicks == 1
        assert checkbox.selected is True

    def test_set_radio_button_is_case_insensitive(self, driver: FakeDriver) -> None:
        radio = driver.add(FIELD, FakeElement(attributes={"type": "radio"}, selected=True))

        set_input_field_value(driver, FIELD, InputFieldType.RADIO_BUTTON, "TRUE")

        assert radio.clicks == 0

    def test_set_checkbox_with_boolean(self, driver: FakeDriver) -> None:
        checkbox = driver.add(FIELD, FakeElement(attributes={"type": "checkbox"}, selected=True))

        set_input_field_value(driver, FIELD, InputFieldType.CHECKBOX, False)

        assert checkbox.clicks == 1
        assert checkbox.selected is False


class TestInvalidFieldType:
    """Tests for invalid field types."""

    @pytest.mark.parametrize("operation", [get_input_field_value, get_input_field_values])
    def test_get_with_invalid_type_raises(self, driver: FakeDriver, operation: object) -> None:
        driver.add(FIELD, FakeElement())

        with pytest.raises(ValueError, match="textarea"):
            operation(driver, FIELD, "textarea")

        assert driver.scripts == []

    def test_set_with_invalid_type_raises(self, driver: FakeDriver) -> None:
        driver.add(FIELD, FakeElement())

        with pytest.raises(ValueError, match="textarea"):
            set_input_field_value(driver, FIELD, "textarea", "value")

        assert driver.scripts == []

    def test_type_given_as_string(self, driver: FakeDriver) -> None:
        driver.add(FIELD, FakeElement(value="abc"))

        assert get_input_field_value(driver, FIELD, "password") == "abc"
