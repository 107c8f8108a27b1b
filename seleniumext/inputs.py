"""Read and write the values of HTML input fields.

The behavior depends on the InputFieldType of the field:

| Field type       | Read                           | Write                              |
| ---------------- | ------------------------------ | ---------------------------------- |
| TEXT / PASSWORD  | "value" attribute              | clear the field and type the value |
| DROPDOWN         | text of the selected option    | select option by visible text      |
| MULTI_SELECT_BOX | texts of all selected options  | select option by visible text      |
| CHECKBOX / RADIO | "true" or "false"              | click if state differs from value  |

"""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright 2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

import logging

from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support.ui import Select

from seleniumext.elements import find_element
from seleniumext.enums import InputFieldType
from seleniumext.visibility import Locator, scroll_into_view

default_logger = logging.getLogger("seleniumext.inputs")


def _checked_state(input_field: WebElement) -> str:
    return "true" if input_field.is_selected() else "false"


def _locate_input_field(driver: WebDriver, locator: Locator, logger: logging.Logger) -> WebElement:
    input_field = find_element(driver, locator, logger=logger)
    scroll_into_view(driver, input_field)

    return input_field


def get_input_field_values(
    driver: WebDriver,
    locator: Locator,
    field_type: InputFieldType | str,
    logger: logging.Logger = default_logger,
) -> list[str]:
    """Return the current value(s) of a given input field.

    Args:
        driver (WebDriver):
            The web driver of the browser session.
        locator (Locator):
            The locator for the input field.
        field_type (InputFieldType | str):
            The type of the input field.
        logger (logging.Logger, optional):
            The logging object to use for all log messages.

    Returns:
        list[str]:
            The current value(s) of the input field. For a multi-select box
            these are the texts of all selected options in document order.
            All other field types return a list with a single entry.

    Raises:
        ValueError:
            If field_type is not a valid input field type.

    """

    field_type = InputFieldType(field_type)

    if field_type is InputFieldType.MULTI_SELECT_BOX:
        input_field = _locate_input_field(driver, locator, logger)
        values = [option.text for option in Select(input_field).all_selected_options]
        logger.debug("Input field -> %s has selected options -> %s", locator, values)
        return values

    return [get_input_field_value(driver, locator, field_type, logger=logger)]


def get_input_field_value(
    driver: WebDriver,
    locator: Locator,
    field_type: InputFieldType | str,
    logger: logging.Logger = default_logger,
) -> str:
    """Return the current value of a given input field.

    Args:
        driver (WebDriver):
            The web driver of the browser session.
        locator (Locator):
            The locator for the input field.
        field_type (InputFieldType | str):
            The type of the input field.
        logger (logging.Logger, optional):
            The logging object to use for all log messages.

    Returns:
        str:
            The current value of the input field. Checkboxes and radio
            buttons return "true" or "false".

    Raises:
        ValueError:
            If field_type is not a valid input field type.

    """

    field_type = InputFieldType(field_type)
    input_field = _locate_input_field(driver, locator, logger)

    match field_type:
        case InputFieldType.TEXT | InputFieldType.PASSWORD:
            return input_field.get_attribute("value") or ""
        case InputFieldType.DROPDOWN | InputFieldType.MULTI_SELECT_BOX:
            return Select(input_field).first_selected_option.text
        case InputFieldType.CHECKBOX | InputFieldType.RADIO_BUTTON:
            return _checked_state(input_field)
        case _:
            msg = "{} is not a valid input field type.".format(field_type)
            raise ValueError(msg)


def set_input_field_value(
    driver: WebDriver,
    locator: Locator,
    field_type: InputFieldType | str,
    value: str | bool,
    logger: logging.Logger = default_logger,
) -> None:
    """Set the value of an input field.

    Checkboxes and radio buttons are only clicked if their current state
    differs from the requested one, so calling this twice with the same
    value does not toggle the field back.

    Args:
        driver (WebDriver):
            The web driver of the browser session.
        locator (Locator):
            The locator for the input field to populate.
        field_type (InputFieldType | str):
            The type of the input field.
        value (str | bool):
            The value to populate the input field with. For checkboxes and
            radio buttons "true" or "false" (case-insensitive) or a boolean.
        logger (logging.Logger, optional):
            The logging object to use for all log messages.

    Raises:
        ValueError:
            If field_type is not a valid input field type.

    """

    field_type = InputFieldType(field_type)
    input_field = _locate_input_field(driver, locator, logger)

    if field_type is InputFieldType.PASSWORD:
        logger.debug("Set input field -> %s to value -> <sensitive>...", locator)
    else:
        logger.debug("Set input field -> %s to value -> %s...", locator, value)

    match field_type:
        case InputFieldType.TEXT | InputFieldType.PASSWORD:
            input_field.clear()
            input_field.send_keys(str(value))
        case InputFieldType.DROPDOWN | InputFieldType.MULTI_SELECT_BOX:
            Select(input_field).select_by_visible_text(value)
        case InputFieldType.CHECKBOX | InputFieldType.RADIO_BUTTON:
            current_value = _checked_state(input_field)
            if current_value != str(value).lower():
                input_field.click()
            else:
                logger.debug("Input field -> %s already in desired state -> %s", locator, current_value)
        case _:
            msg = "{} is not a valid input field type.".format(field_type)
            raise ValueError(msg)
