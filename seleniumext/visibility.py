"""Scroll elements into view and check their visibility.

Visibility checks never raise for elements that do not exist - absence of
an element is a legitimate outcome on a dynamic page and is reported as
"not displayed". Elements that go stale while they are checked are looked
up again a limited number of times.
"""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright 2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

import logging
from dataclasses import dataclass

from selenium.common.exceptions import NoSuchElementException, StaleElementReferenceException
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from seleniumext.enums import ElementState
from seleniumext.helper.retry import RetryPolicy, handle_boolean
from seleniumext.settings import retry_settings

default_logger = logging.getLogger("seleniumext.visibility")

# A Selenium locator, e.g. (By.ID, "loginbutton")
Locator = tuple[str, str]

SCROLL_INTO_VIEW_SCRIPT = "arguments[0].scrollIntoView({ behavior: 'auto', block: 'center', inline: 'start' });"


@dataclass(frozen=True)
class ElementProbe:
    """Result of looking up an element and reading its display status."""

    state: ElementState
    displayed: bool = False


def scroll_into_view(driver: WebDriver, target: Locator | WebElement) -> None:
    """Move an element into the center of the viewport.

    There is no confirmation that the scrolling has completed.

    Args:
        driver (WebDriver):
            The web driver of the browser session.
        target (Locator | WebElement):
            Either a locator for the element or an element that has been
            identified before.

    Raises:
        NoSuchElementException:
            If a locator is given that does not match any element.

    """

    element = driver.find_element(*target) if isinstance(target, tuple) else target
    driver.execute_script(SCROLL_INTO_VIEW_SCRIPT, element)


def probe_element(driver: WebDriver, locator: Locator) -> ElementProbe:
    """Scroll an element into view, locate it and read its display status.

    Args:
        driver (WebDriver):
            The web driver of the browser session.
        locator (Locator):
            The locator for the element to check.

    Returns:
        ElementProbe:
            NOT_FOUND if the locator matches nothing, STALE if the element
            went stale during the check, LIVE (with the display status) otherwise.

    """

    try:
        scroll_into_view(driver, locator)
        element = driver.find_element(*locator)
        return ElementProbe(state=ElementState.LIVE, displayed=element.is_displayed())
    except NoSuchElementException:
        return ElementProbe(state=ElementState.NOT_FOUND)
    except StaleElementReferenceException:
        return ElementProbe(state=ElementState.STALE)


def element_is_displayed(
    driver: WebDriver,
    locator: Locator,
    retry_count: int | None = None,
    logger: logging.Logger = default_logger,
) -> bool:
    """Check the display status of an element without raising for non-existing elements.

    Args:
        driver (WebDriver):
            The web driver of the browser session.
        locator (Locator):
            The locator for the element to check the visibility of.
        retry_count (int | None, optional):
            How often the check is repeated if the element goes stale
            during the check. Defaults to the visibility_retry_count setting.
        logger (logging.Logger, optional):
            The logging object to use for all log messages.

    Returns:
        bool:
            True if the locator finds an element which is displayed on the page,
            False otherwise.

    """

    policy = RetryPolicy(
        retry_count=retry_settings.visibility_retry_count if retry_count is None else retry_count,
        seconds_between_attempts=retry_settings.seconds_between_attempts,
        retry_on_result=lambda probe: probe.state is ElementState.STALE,
        name="stale visibility check",
        logger=logger,
    )
    probe = policy.execute(probe_element, driver, locator)

    if probe.state is ElementState.STALE:
        logger.warning(
            "Element -> %s kept going stale after %s attempts. Treating it as not displayed.",
            locator,
            policy.max_attempts,
        )
        return False

    return probe.displayed


def wait_until_displayed(
    driver: WebDriver,
    locator: Locator,
    displayed: bool = True,
    retry_count: int | None = None,
    seconds_between_attempts: float | None = None,
    logger: logging.Logger = default_logger,
) -> bool:
    """Wait until an element is displayed (or not displayed).

    Args:
        driver (WebDriver):
            The web driver of the browser session.
        locator (Locator):
            The locator for the element to wait for.
        displayed (bool, optional):
            True = wait for the element to be displayed,
            False = wait for the element to disappear. Defaults to True.
        retry_count (int | None, optional):
            The number of times to check again. Defaults to the
            boolean_retry_count setting.
        seconds_between_attempts (float | None, optional):
            The number of seconds to wait between two checks. Defaults to the
            seconds_between_attempts setting.
        logger (logging.Logger, optional):
            The logging object to use for all log messages.

    Returns:
        bool:
            True if the element reached the desired display status in time,
            False otherwise.

    """

    policy = handle_boolean(
        condition_to_handle=False,
        retry_count=retry_count,
        seconds_between_attempts=seconds_between_attempts,
    ).with_logger(logger)

    reached = policy.execute(lambda: element_is_displayed(driver, locator, logger=logger) == displayed)
    if not reached:
        logger.debug(
            "Element -> %s did not become %s after %s attempts.",
            locator,
            "visible" if displayed else "invisible",
            policy.max_attempts,
        )

    return reached
