"""Closed sets of values used by the seleniumext operations."""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright 2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

from enum import Enum


class InputFieldType(Enum):
    """Kinds of HTML form controls. Determines how a value is read and written."""

    TEXT = "text"
    PASSWORD = "password"
    DROPDOWN = "dropdown"
    CHECKBOX = "checkbox"
    MULTI_SELECT_BOX = "multi_select_box"
    RADIO_BUTTON = "radio_button"


class ClickType(Enum):
    """Pointer gestures that can be issued on an element."""

    SINGLE = "single"
    DOUBLE = "double"
    RIGHT = "right"


class ElementState(Enum):
    """Outcome of looking up an element in the live document."""

    LIVE = "live"
    STALE = "stale"
    NOT_FOUND = "not_found"
