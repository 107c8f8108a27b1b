"""Click elements and confirm that the click registered.

Due to the nature of the web it is not uncommon for an element to be clicked
without the click actually registering. The functions in this module click a
given element and then poll a confirmation condition. If the condition does
not become true the click is repeated:

    Idle -> Attempting-Click -> Confirming -> Succeeded
                 ^                  |
                 +---- (False) -----+----> Exhausted

* The click is repeated up to click_retry_count (20) times.
* After each click the condition is polled up to
  click_confirmation_retry_count (5) more times. Driver exceptions raised
  by the condition are retried as well.
* If the very first click cannot be dispatched the exception is raised
  immediately. Later click exceptions are ignored as the click may have
  partially succeeded - the condition decides.

Confirmation strategies:

| Function                                | Condition                                        |
| --------------------------------------- | ------------------------------------------------ |
| click_and_confirm_by_condition          | any callable returning True on success           |
| click_and_confirm_by_element_visibility | an element is (or is not) displayed              |
| click_and_confirm_by_stale_element      | an element found before the click has gone stale |
| click_and_confirm_by_alert              | a browser alert is present                       |

"""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright 2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

import logging
from collections.abc import Callable
from dataclasses import replace

from selenium.common.exceptions import NoAlertPresentException, WebDriverException
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from seleniumext.enums import ClickType
from seleniumext.exceptions import ClickNotConfirmedError
from seleniumext.helper.retry import handle_boolean_or_driver_exception, is_driver_exception
from seleniumext.settings import retry_settings
from seleniumext.stale import is_stale
from seleniumext.visibility import Locator, element_is_displayed, scroll_into_view

default_logger = logging.getLogger("seleniumext.click")


def _dispatch_click(driver: WebDriver, element: WebElement, click_type: ClickType) -> None:
    match click_type:
        case ClickType.SINGLE:
            element.click()
        case ClickType.DOUBLE:
            ActionChains(driver).double_click(element).perform()
        case ClickType.RIGHT:
            ActionChains(driver).context_click(element).perform()
        case _:
            msg = "{} is not a valid click type.".format(click_type)
            raise ValueError(msg)


def click_and_confirm_by_condition(
    driver: WebDriver,
    click_locator: Locator,
    condition: Callable[[], bool],
    click_type: ClickType | str = ClickType.SINGLE,
    *,
    retry_count: int | None = None,
    confirmation_retry_count: int | None = None,
    seconds_between_attempts: float | None = None,
    raise_on_failure: bool = False,
    logger: logging.Logger = default_logger,
) -> bool:
    """Click an element and confirm the click registered by checking the result of a condition.

    Args:
        driver (WebDriver):
            The web driver of the browser session.
        click_locator (Locator):
            The locator for the element to click.
        condition (Callable[[], bool]):
            The function confirming the click. Returning False triggers
            another poll and eventually another click.
        click_type (ClickType | str, optional):
            Single click, double click or right click. Defaults to a single click.
        retry_count (int | None, optional):
            How often the click is repeated. Defaults to the click_retry_count setting (20).
        confirmation_retry_count (int | None, optional):
            How often the condition is polled again after each click.
            Defaults to the click_confirmation_retry_count setting (5).
        seconds_between_attempts (float | None, optional):
            Wait time between clicks and between polls. Defaults to the
            seconds_between_attempts setting (0.5).
        raise_on_failure (bool, optional):
            If True, raise ClickNotConfirmedError if the click could not be
            confirmed. Defaults to False.
        logger (logging.Logger, optional):
            The logging object to use for all log messages.

    Returns:
        bool:
            True if the click was confirmed, False otherwise.

    Raises:
        ValueError:
            If click_type is not a valid click type.
        WebDriverException:
            If the first click cannot be dispatched, or the last attempt
            ended with a driver exception.
        ClickNotConfirmedError:
            If raise_on_failure is True and the click could not be confirmed.

    """

    click_type = ClickType(click_type)
    has_clicked_element = False
    click_attempts = 0

    confirmation_policy = handle_boolean_or_driver_exception(
        condition_to_handle=False,
        retry_count=(
            retry_settings.click_confirmation_retry_count if confirmation_retry_count is None else confirmation_retry_count
        ),
        seconds_between_attempts=seconds_between_attempts,
    ).with_logger(logger)

    click_policy = handle_boolean_or_driver_exception(
        condition_to_handle=False,
        retry_count=retry_settings.click_retry_count if retry_count is None else retry_count,
        seconds_between_attempts=seconds_between_attempts,
    ).with_logger(logger)
    # A failing first click must not be retried:
    click_policy = replace(
        click_policy,
        retry_on_exception=lambda exception: has_clicked_element and is_driver_exception(exception),
    )

    def click_and_confirm() -> bool:
        nonlocal has_clicked_element, click_attempts

        click_attempts += 1
        try:
            scroll_into_view(driver, click_locator)
            click_element = driver.find_element(*click_locator)
            _dispatch_click(driver, click_element, click_type)
        except WebDriverException as e:
            if not has_clicked_element:
                logger.error("Cannot click page element -> %s! Error -> %s", click_locator, str(e))
                raise
            logger.debug("Repeated click on page element -> %s failed. Checking confirmation anyway.", click_locator)

        has_clicked_element = True

        return confirmation_policy.execute(lambda: bool(condition()))

    logger.debug("Click page element -> %s (%s click) and wait for confirmation...", click_locator, click_type.value)

    confirmed = click_policy.execute(click_and_confirm)
    if confirmed:
        logger.debug("Successfully clicked page element -> %s", click_locator)
        return True

    msg = "Cannot confirm click on page element -> {} after {} attempts!".format(click_locator, click_attempts)
    logger.error(msg)
    if raise_on_failure:
        raise ClickNotConfirmedError(msg)

    return False


def click_and_confirm_by_element_visibility(
    driver: WebDriver,
    click_locator: Locator,
    confirmation_locator: Locator,
    confirm_element_is_visible: bool = True,
    click_type: ClickType | str = ClickType.SINGLE,
    **kwargs: object,
) -> bool:
    """Click an element and confirm the click by the visibility of another element.

    As an example, a click on a Save button could be confirmed by the
    appearance of a confirmation message.

    Args:
        driver (WebDriver):
            The web driver of the browser session.
        click_locator (Locator):
            The locator for the element to click.
        confirmation_locator (Locator):
            The locator for the element confirming the click.
        confirm_element_is_visible (bool, optional):
            True = confirm by visibility, False = confirm by non-visibility
            of the confirmation element. Defaults to True.
        click_type (ClickType | str, optional):
            Single click, double click or right click. Defaults to a single click.
        kwargs (object):
            Further options of click_and_confirm_by_condition().

    Returns:
        bool:
            True if the click was confirmed, False otherwise.

    """

    return click_and_confirm_by_condition(
        driver,
        click_locator,
        lambda: element_is_displayed(driver, confirmation_locator) == confirm_element_is_visible,
        click_type,
        **kwargs,
    )


def click_and_confirm_by_stale_element(
    driver: WebDriver,
    click_locator: Locator,
    confirmation_locator: Locator,
    click_type: ClickType | str = ClickType.SINGLE,
    **kwargs: object,
) -> bool:
    """Click an element and confirm the click by another element going stale.

    This is useful if the click refreshes a section of the page but may not
    result in any visible change. The confirmation element is located once
    before the click; the click is confirmed once this element has been
    removed from (or replaced in) the document.

    If the confirmation element is not displayed before the click there is
    nothing that can go stale. In this case the click is confirmed by the
    confirmation element becoming visible instead.

    Args:
        driver (WebDriver):
            The web driver of the browser session.
        click_locator (Locator):
            The locator for the element to click.
        confirmation_locator (Locator):
            The locator for the element confirming the click.
        click_type (ClickType | str, optional):
            Single click, double click or right click. Defaults to a single click.
        kwargs (object):
            Further options of click_and_confirm_by_condition().

    Returns:
        bool:
            True if the click was confirmed, False otherwise.

    """

    if not element_is_displayed(driver, confirmation_locator):
        return click_and_confirm_by_element_visibility(
            driver,
            click_locator,
            confirmation_locator,
            True,
            click_type,
            **kwargs,
        )

    initial_confirmation_element = driver.find_element(*confirmation_locator)

    return click_and_confirm_by_condition(
        driver,
        click_locator,
        lambda: is_stale(initial_confirmation_element),
        click_type,
        **kwargs,
    )


def click_and_confirm_by_alert(
    driver: WebDriver,
    click_locator: Locator,
    accept_alert: bool | None = True,
    click_type: ClickType | str = ClickType.SINGLE,
    **kwargs: object,
) -> bool:
    """Click an element and confirm the click by the presence of an alert box.

    Args:
        driver (WebDriver):
            The web driver of the browser session.
        click_locator (Locator):
            The locator for the element to click.
        accept_alert (bool | None, optional):
            True = accept the alert, False = dismiss the alert,
            None = leave the alert box active. Defaults to True.
        click_type (ClickType | str, optional):
            Single click, double click or right click. Defaults to a single click.
        kwargs (object):
            Further options of click_and_confirm_by_condition().

    Returns:
        bool:
            True if the click was confirmed, False otherwise.

    """

    def alert_is_present() -> bool:
        try:
            alert = driver.switch_to.alert
        except NoAlertPresentException:
            return False

        if accept_alert is None:
            return True
        if accept_alert:
            alert.accept()
        else:
            alert.dismiss()

        return True

    return click_and_confirm_by_condition(driver, click_locator, alert_is_present, click_type, **kwargs)
