"""seleniumext - Retry-hardened Selenium operations for dynamic web pages."""

from .browser_automation import BrowserAutomation
from .click import (
    click_and_confirm_by_alert,
    click_and_confirm_by_condition,
    click_and_confirm_by_element_visibility,
    click_and_confirm_by_stale_element,
)
from .elements import find_element, get_element_texts
from .enums import ClickType, ElementState, InputFieldType
from .exceptions import BrowserAutomationError, ClickNotConfirmedError
from .inputs import get_input_field_value, get_input_field_values, set_input_field_value
from .stale import is_stale
from .visibility import ElementProbe, element_is_displayed, probe_element, scroll_into_view, wait_until_displayed

__all__ = [
    "BrowserAutomation",
    "BrowserAutomationError",
    "ClickNotConfirmedError",
    "ClickType",
    "ElementProbe",
    "ElementState",
    "InputFieldType",
    "click_and_confirm_by_alert",
    "click_and_confirm_by_condition",
    "click_and_confirm_by_element_visibility",
    "click_and_confirm_by_stale_element",
    "element_is_displayed",
    "find_element",
    "get_element_texts",
    "get_input_field_value",
    "get_input_field_values",
    "is_stale",
    "probe_element",
    "scroll_into_view",
    "set_input_field_value",
    "wait_until_displayed",
]
