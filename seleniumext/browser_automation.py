"""browser_automation Module to drive a Chrome browser session with retry-hardened operations.

The BrowserAutomation class owns a Selenium web driver and exposes the
operations of seleniumext (visibility checks, input field access and
confirmed clicks) as methods. Elements are identified by a name and a
find method (e.g. "id" or "xpath") so callers do not need to import the
Selenium "By" class.
"""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright 2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

import logging
import os
import tempfile
from collections.abc import Callable

import chromedriver_autoinstaller
import urllib3
from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver

from seleniumext.click import (
    click_and_confirm_by_alert,
    click_and_confirm_by_condition,
    click_and_confirm_by_element_visibility,
    click_and_confirm_by_stale_element,
)
from seleniumext.elements import get_element_texts
from seleniumext.enums import ClickType, InputFieldType
from seleniumext.exceptions import BrowserAutomationError
from seleniumext.helper.logadapter import AutomationLogAdapter
from seleniumext.inputs import get_input_field_value, get_input_field_values, set_input_field_value
from seleniumext.visibility import Locator, element_is_displayed, scroll_into_view, wait_until_displayed

default_logger = logging.getLogger("seleniumext.browser_automation")

# We don't want to expose class "By" outside this module,
# so we map string values to the By class values:
FIND_METHODS = {
    "id": By.ID,
    "name": By.NAME,
    "class_name": By.CLASS_NAME,
    "xpath": By.XPATH,
    "css_selector": By.CSS_SELECTOR,
    "link_text": By.LINK_TEXT,
    "tag_name": By.TAG_NAME,
}


class BrowserAutomation:
    """Class to automate a web site via a browser interface."""

    logger: logging.Logger = default_logger
    browser: WebDriver | None = None
    owns_browser: bool = False

    def __init__(
        self,
        base_url: str = "",
        download_directory: str | None = None,
        take_screenshots: bool = False,
        automation_name: str = "",
        headless: bool = True,
        logger: logging.Logger = default_logger,
        driver: WebDriver | None = None,
    ) -> None:
        """Initialize the object.

        Args:
            base_url (str, optional):
                The base URL of the website to automate. Defaults to "".
            download_directory (str | None, optional):
                A download directory used for download links. If None,
                a temporary directory is automatically used.
            take_screenshots (bool, optional):
                For debugging purposes, screenshots can be taken.
                Defaults to False.
            automation_name (str, optional):
                The name of the automation. Used as prefix of all log messages
                and for the names of screenshot files. Defaults to "".
            headless (bool, optional):
                If True, the browser will be started in headless mode. Defaults to True.
            logger (logging.Logger, optional):
                The logging object to use for all log messages. Defaults to default_logger.
            driver (WebDriver | None, optional):
                An existing web driver to use. If None, a new Chrome browser
                is started. An existing driver is not quit when this object
                is destroyed.

        Raises:
            BrowserAutomationError:
                If the Chrome browser cannot be started.

        """

        if not download_directory:
            download_directory = os.path.join(
                tempfile.gettempdir(),
                "browser_automations",
                automation_name,
                "downloads",
            )

        if logger != default_logger:
            self.logger = logger.getChild("browserautomation")
            for logfilter in logger.filters:
                self.logger.addFilter(logfilter)
        if automation_name:
            self.logger = AutomationLogAdapter(self.logger, automation_name)

        self.base_url = base_url
        self.logged_in = False
        self.download_directory = download_directory
        self.headless = headless

        self.take_screenshots = take_screenshots
        self.screenshot_names = automation_name or "screen"
        self.screen_counter = 1

        self.screenshot_directory = os.path.join(
            tempfile.gettempdir(),
            "browser_automations",
            automation_name,
            "screenshots",
        )

        if self.take_screenshots and not os.path.exists(self.screenshot_directory):
            os.makedirs(self.screenshot_directory)

        # A driver passed in by the caller stays under the control of the caller:
        self.owns_browser = driver is None
        if driver is not None:
            self.browser = driver
            return

        try:
            chromedriver_autoinstaller.install()
            self.browser = webdriver.Chrome(options=self.set_chrome_options())
        except WebDriverException as e:
            msg = "Failed to start Chrome browser! Error -> {}".format(str(e))
            self.logger.error(msg)
            raise BrowserAutomationError(msg) from e

        self.logger.info("Browser automation initialized.")

    # end method definition

    def __del__(self) -> None:
        """Object destructor."""

        try:
            if self.browser and self.owns_browser:
                self.browser.quit()
            self.browser = None
        except (WebDriverException, AttributeError, TypeError, OSError):
            # Log or silently handle exceptions during interpreter shutdown
            pass

    # end method definition

    def set_chrome_options(self) -> Options:
        """Set chrome options for Selenium.

        Returns:
            Options: Options to call the browser with

        """

        chrome_options = Options()
        if self.headless:
            chrome_options.add_argument("--headless")
        chrome_options.add_argument("--no-sandbox")
        chrome_options.add_argument("--disable-dev-shm-usage")

        chrome_options.add_experimental_option(
            "prefs",
            {"download.default_directory": self.download_directory},
        )

        return chrome_options

    # end method definition

    def take_screenshot(self) -> bool:
        """Take a screenshot of the current browser window and save it as PNG file.

        Returns:
            bool:
                True if successful, False otherwise

        """

        screenshot_file = "{}/{}-{}.png".format(
            self.screenshot_directory,
            self.screenshot_names,
            self.screen_counter,
        )
        self.logger.debug("Save browser screenshot to -> %s", screenshot_file)
        result = self.browser.get_screenshot_as_file(screenshot_file)
        self.screen_counter += 1

        return result

    # end method definition

    def get_page(self, url: str = "") -> bool:
        """Load a page into the browser based on a given URL.

        Args:
            url (str):
                URL to load. If empty just the base URL will be used
        Returns:
            bool:
                True if successful, False otherwise

        """

        page_url = self.base_url + url

        try:
            self.logger.debug("Load page -> %s", page_url)
            self.browser.get(page_url)

        except (WebDriverException, urllib3.exceptions.ReadTimeoutError):
            self.logger.error(
                "Cannot load page -> %s!",
                page_url,
            )
            return False

        self.logger.debug("Page title after get page -> %s", self.browser.title)

        if self.take_screenshots:
            self.take_screenshot()

        return True

    # end method definition

    def get_title(self) -> str | None:
        """Get the browser title.

        This is handy to validate a certain page is loaded after get_page()

        Returns:
            str | None:
                The title of the browser window.

        """

        if not self.browser:
            self.logger.error("Browser not initialized!")
            return None

        return self.browser.title

    # end method definition

    def locator(self, find_elem: str, find_method: str = "id") -> Locator:
        """Build a Selenium locator for a page element.

        Args:
            find_elem (str):
                The identifier of the page element.
            find_method (str, optional):
                One of "id", "name", "class_name", "xpath", "css_selector",
                "link_text" or "tag_name". Defaults to "id".

        Returns:
            Locator:
                The locator tuple.

        Raises:
            ValueError:
                If the find method is not supported.

        """

        if find_method not in FIND_METHODS:
            msg = "Unsupported find method -> '{}'! Supported are -> {}".format(
                find_method, ", ".join(FIND_METHODS)
            )
            raise ValueError(msg)

        return (FIND_METHODS[find_method], find_elem)

    # end method definition

    def scroll_into_view(self, find_elem: str, find_method: str = "id") -> None:
        """Scroll a page element into the center of the viewport.

        Args:
            find_elem (str):
                The identifier of the page element.
            find_method (str, optional):
                A method to find the element. Defaults to "id".

        """

        scroll_into_view(self.browser, self.locator(find_elem, find_method))

    # end method definition

    def is_displayed(self, find_elem: str, find_method: str = "id") -> bool:
        """Check if a page element exists and is displayed.

        Args:
            find_elem (str):
                The identifier of the page element.
            find_method (str, optional):
                A method to find the element. Defaults to "id".

        Returns:
            bool:
                True if the element is displayed, False otherwise.

        """

        return element_is_displayed(self.browser, self.locator(find_elem, find_method), logger=self.logger)

    # end method definition

    def wait_until_displayed(
        self,
        find_elem: str,
        find_method: str = "id",
        displayed: bool = True,
        retry_count: int | None = None,
    ) -> bool:
        """Wait for a page element to become visible (or invisible).

        Args:
            find_elem (str):
                The identifier of the page element.
            find_method (str, optional):
                A method to find the element. Defaults to "id".
            displayed (bool, optional):
                The display status to wait for. Defaults to True.
            retry_count (int | None, optional):
                How often to check again. Defaults to the boolean_retry_count setting.

        Returns:
            bool:
                True if the element reached the display status, False otherwise.

        """

        return wait_until_displayed(
            self.browser,
            self.locator(find_elem, find_method),
            displayed=displayed,
            retry_count=retry_count,
            logger=self.logger,
        )

    # end method definition

    def get_texts(self, find_elem: str, find_method: str = "id", allow_empty_strings: bool = True) -> list[str]:
        """Get the texts of all page elements matching the identifier.

        Args:
            find_elem (str):
                The identifier of the page elements.
            find_method (str, optional):
                A method to find the elements. Defaults to "id".
            allow_empty_strings (bool, optional):
                If False, wait until none of the texts is empty. Defaults to True.

        Returns:
            list[str]:
                The texts of the elements.

        """

        return get_element_texts(
            self.browser,
            self.locator(find_elem, find_method),
            allow_empty_strings=allow_empty_strings,
            logger=self.logger,
        )

    # end method definition

    def get_value(
        self,
        find_elem: str,
        field_type: InputFieldType | str = InputFieldType.TEXT,
        find_method: str = "id",
    ) -> str:
        """Get the current value of an input field.

        Args:
            find_elem (str):
                The identifier of the input field.
            field_type (InputFieldType | str, optional):
                The type of the input field. Defaults to InputFieldType.TEXT.
            find_method (str, optional):
                A method to find the element. Defaults to "id".

        Returns:
            str:
                The current value.

        """

        return get_input_field_value(
            self.browser,
            self.locator(find_elem, find_method),
            field_type,
            logger=self.logger,
        )

    # end method definition

    def get_values(
        self,
        find_elem: str,
        field_type: InputFieldType | str = InputFieldType.MULTI_SELECT_BOX,
        find_method: str = "id",
    ) -> list[str]:
        """Get the current values of an input field (e.g. a multi-select box).

        Args:
            find_elem (str):
                The identifier of the input field.
            field_type (InputFieldType | str, optional):
                The type of the input field. Defaults to InputFieldType.MULTI_SELECT_BOX.
            find_method (str, optional):
                A method to find the element. Defaults to "id".

        Returns:
            list[str]:
                The current values.

        """

        return get_input_field_values(
            self.browser,
            self.locator(find_elem, find_method),
            field_type,
            logger=self.logger,
        )

    # end method definition

    def set_value(
        self,
        find_elem: str,
        elem_value: str | bool,
        field_type: InputFieldType | str = InputFieldType.TEXT,
        find_method: str = "id",
    ) -> bool:
        """Find an input field and set its value.

        Args:
            find_elem (str):
                The identifier of the input field.
            elem_value (str | bool):
                The new value for the input field.
            field_type (InputFieldType | str, optional):
                The type of the input field. Defaults to InputFieldType.TEXT.
            find_method (str, optional):
                A method to find the element. Defaults to "id".

        Returns:
            bool:
                True if successful, False otherwise.

        """

        try:
            set_input_field_value(
                self.browser,
                self.locator(find_elem, find_method),
                field_type,
                elem_value,
                logger=self.logger,
            )
        except WebDriverException as e:
            self.logger.error("Cannot set page element -> %s! Error -> %s", find_elem, str(e))
            return False

        if self.take_screenshots:
            self.take_screenshot()

        return True

    # end method definition

    def click_and_confirm(
        self,
        find_elem: str,
        condition: Callable[[], bool],
        find_method: str = "id",
        click_type: ClickType | str = ClickType.SINGLE,
    ) -> bool:
        """Click a page element and confirm the click with a condition function.

        Args:
            find_elem (str):
                The identifier of the page element to click.
            condition (Callable[[], bool]):
                Returns True once the click has registered.
            find_method (str, optional):
                A method to find the element. Defaults to "id".
            click_type (ClickType | str, optional):
                The click gesture. Defaults to a single click.

        Returns:
            bool:
                True if the click was confirmed, False otherwise.

        """

        result = click_and_confirm_by_condition(
            self.browser,
            self.locator(find_elem, find_method),
            condition,
            click_type,
            logger=self.logger,
        )
        if self.take_screenshots:
            self.take_screenshot()

        return result

    # end method definition

    def click_and_confirm_by_element_visibility(
        self,
        find_elem: str,
        confirmation_elem: str,
        find_method: str = "id",
        confirm_element_is_visible: bool = True,
        click_type: ClickType | str = ClickType.SINGLE,
    ) -> bool:
        """Click a page element and confirm the click by the visibility of another element.

        Args:
            find_elem (str):
                The identifier of the page element to click.
            confirmation_elem (str):
                The identifier of the confirmation element (same find method).
            find_method (str, optional):
                A method to find both elements. Defaults to "id".
            confirm_element_is_visible (bool, optional):
                Confirm by visibility (True) or non-visibility (False).
            click_type (ClickType | str, optional):
                The click gesture. Defaults to a single click.

        Returns:
            bool:
                True if the click was confirmed, False otherwise.

        """

        result = click_and_confirm_by_element_visibility(
            self.browser,
            self.locator(find_elem, find_method),
            self.locator(confirmation_elem, find_method),
            confirm_element_is_visible,
            click_type,
            logger=self.logger,
        )
        if self.take_screenshots:
            self.take_screenshot()

        return result

    # end method definition

    def click_and_confirm_by_stale_element(
        self,
        find_elem: str,
        confirmation_elem: str,
        find_method: str = "id",
        click_type: ClickType | str = ClickType.SINGLE,
    ) -> bool:
        """Click a page element and confirm the click by another element going stale.

        Args:
            find_elem (str):
                The identifier of the page element to click.
            confirmation_elem (str):
                The identifier of the confirmation element (same find method).
            find_method (str, optional):
                A method to find both elements. Defaults to "id".
            click_type (ClickType | str, optional):
                The click gesture. Defaults to a single click.

        Returns:
            bool:
                True if the click was confirmed, False otherwise.

        """

        result = click_and_confirm_by_stale_element(
            self.browser,
            self.locator(find_elem, find_method),
            self.locator(confirmation_elem, find_method),
            click_type,
            logger=self.logger,
        )
        if self.take_screenshots:
            self.take_screenshot()

        return result

    # end method definition

    def click_and_confirm_by_alert(
        self,
        find_elem: str,
        find_method: str = "id",
        accept_alert: bool | None = True,
    ) -> bool:
        """Click a page element and confirm the click by an alert box.

        Args:
            find_elem (str):
                The identifier of the page element to click.
            find_method (str, optional):
                A method to find the element. Defaults to "id".
            accept_alert (bool | None, optional):
                True = accept, False = dismiss, None = leave the alert open.

        Returns:
            bool:
                True if the click was confirmed, False otherwise.

        """

        return click_and_confirm_by_alert(
            self.browser,
            self.locator(find_elem, find_method),
            accept_alert,
            logger=self.logger,
        )

    # end method definition

    def run_login(
        self,
        user_name: str,
        user_password: str,
        user_field: str = "otds_username",
        password_field: str = "otds_password",
        login_button: str = "loginbutton",
        page: str = "",
    ) -> bool:
        """Login to target system via the browser.

        The click on the login button is confirmed by the login button
        going stale (the login page is replaced by the next page).

        Args:
            user_name (str):
                The user name to log in with.
            user_password (str):
                The password of the user.
            user_field (str, optional):
                The id of the HTML field to enter the user name. Defaults to "otds_username".
            password_field (str, optional):
                The id of the HTML field to enter the password. Defaults to "otds_password".
            login_button (str, optional):
                The id of the HTML login button. Defaults to "loginbutton".
            page (str, optional):
                The URL to the login page. Defaults to "".

        Returns:
            bool: True = success, False = error.

        """

        self.logged_in = False

        if (
            not self.get_page(url=page)  # assuming the base URL leads towards the login page
            or not self.set_value(find_elem=user_field, elem_value=user_name)
            or not self.set_value(
                find_elem=password_field,
                elem_value=user_password,
                field_type=InputFieldType.PASSWORD,
            )
        ):
            self.logger.error(
                "Cannot log into target system using URL -> %s and user -> %s",
                self.base_url,
                user_name,
            )
            return False

        try:
            confirmed = self.click_and_confirm_by_stale_element(
                find_elem=login_button,
                confirmation_elem=login_button,
            )
        except WebDriverException as e:
            self.logger.error("Cannot click login button -> %s! Error -> %s", login_button, str(e))
            return False

        if not confirmed:
            self.logger.error("Login page did not change after clicking -> %s!", login_button)
            return False

        self.logger.debug("Page title after login -> %s", self.browser.title)

        if "Login" in self.browser.title:
            self.logger.error(
                "Authentication failed. You may have given the wrong password!",
            )
            return False

        self.logged_in = True

        return True

    # end method definition

    def implicit_wait(self, wait_time: float) -> None:
        """Wait for the browser to finish tasks (e.g. fully loading a page).

        This setting is valid for the whole browser session and not just
        for a single command.

        Args:
            wait_time (float): time in seconds to wait

        """

        self.logger.debug("Implicit wait for max -> %s seconds...", str(wait_time))
        self.browser.implicitly_wait(wait_time)

    # end method definition

    def end_session(self) -> None:
        """End the browser session. This is just like closing a tab not ending the browser."""

        self.browser.close()
        self.logged_in = False

    # end method definition
