"""Locate elements and read their texts while tolerating transient driver errors."""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright 2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

import logging

from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from seleniumext.helper.retry import (
    get_text_list,
    get_text_list_without_empty_strings,
    handle_driver_exception,
)
from seleniumext.visibility import Locator

default_logger = logging.getLogger("seleniumext.elements")


def find_element(
    driver: WebDriver,
    locator: Locator,
    retry_count: int | None = None,
    logger: logging.Logger = default_logger,
) -> WebElement:
    """Find a page element, retrying while the driver raises exceptions.

    This handles elements that are not (yet) attached to the document
    or not (yet) interactable.

    Args:
        driver (WebDriver):
            The web driver of the browser session.
        locator (Locator):
            The locator for the element, e.g. (By.ID, "otds_username").
        retry_count (int | None, optional):
            The number of retries. Defaults to the driver_exception_retry_count setting.
        logger (logging.Logger, optional):
            The logging object to use for all log messages.

    Returns:
        WebElement:
            The web element.

    Raises:
        WebDriverException:
            The last exception if the element could not be found with all retries.

    """

    policy = handle_driver_exception(retry_count=retry_count).with_logger(logger)

    return policy.execute(driver.find_element, *locator)


def get_element_texts(
    driver: WebDriver,
    locator: Locator,
    allow_empty_strings: bool = True,
    retry_count: int | None = None,
    seconds_between_attempts: float | None = None,
    logger: logging.Logger = default_logger,
) -> list[str]:
    """Get the texts of all elements matching a locator.

    Retries until at least one element is found (and - if empty strings are
    not allowed - until all texts are non-empty).

    Args:
        driver (WebDriver):
            The web driver of the browser session.
        locator (Locator):
            The locator for the elements.
        allow_empty_strings (bool, optional):
            If False, the retry continues while any of the texts is empty.
            Defaults to True.
        retry_count (int | None, optional):
            The number of retries. Defaults to the text_list_retry_count setting.
        seconds_between_attempts (float | None, optional):
            The wait time between retries. Defaults to the seconds_between_attempts setting.
        logger (logging.Logger, optional):
            The logging object to use for all log messages.

    Returns:
        list[str]:
            The texts in document order. Can be empty or incomplete if the
            retries have been exhausted.

    """

    policy_factory = get_text_list if allow_empty_strings else get_text_list_without_empty_strings
    policy = policy_factory(
        retry_count=retry_count,
        seconds_between_attempts=seconds_between_attempts,
    ).with_logger(logger)

    texts = policy.execute(lambda: [element.text for element in driver.find_elements(*locator)])
    if not texts:
        logger.warning("Cannot find any text for elements -> %s", locator)

    return texts
