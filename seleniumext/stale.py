"""Check web elements for stale references."""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright 2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

from selenium.common.exceptions import StaleElementReferenceException
from selenium.webdriver.remote.webelement import WebElement


def is_stale(element: WebElement) -> bool:
    """Check whether the element is stale.

    An element is stale if the DOM node it was located from has been
    removed from the document or replaced since it was found.

    Args:
        element (WebElement):
            Web element that has been identified before.

    Returns:
        bool:
            True if the given element is stale, False otherwise.

    """

    try:
        element.is_enabled()
    except StaleElementReferenceException:
        return True

    return False
