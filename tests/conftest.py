"""Shared fixtures: a small in-memory stand-in for a Selenium browser session."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from selenium.common.exceptions import (
    NoAlertPresentException,
    NoSuchElementException,
    StaleElementReferenceException,
)
from selenium.webdriver.common.by import By

from seleniumext.settings import retry_settings


class FakeElement:
    """A DOM node. Raises StaleElementReferenceException once detached."""

    def __init__(
        self,
        tag_name: str = "input",
        text: str = "",
        value: str = "",
        selected: bool = False,
        displayed: bool = True,
        enabled: bool = True,
        attributes: dict | None = None,
        options: list[FakeElement] | None = None,
        multiple: bool = False,
        on_click: Callable[[FakeElement], None] | None = None,
    ) -> None:
        self.tag_name = tag_name
        self._text = text
        self.value = value
        self.selected = selected
        self.displayed = displayed
        self.enabled = enabled
        self.attributes = attributes or {}
        self.options = options or []
        self.multiple = multiple
        self.on_click = on_click
        self.stale = False
        self.clicks = 0

    def _check(self) -> None:
        if self.stale:
            msg = "stale element reference: element is not attached to the page document"
            raise StaleElementReferenceException(msg)

    @property
    def text(self) -> str:
        self._check()
        return self._text

    def is_displayed(self) -> bool:
        self._check()
        return self.displayed

    def is_enabled(self) -> bool:
        self._check()
        return self.enabled

    def is_selected(self) -> bool:
        self._check()
        return self.selected

    def get_attribute(self, name: str) -> str | None:
        self._check()
        if name == "value":
            return self.value
        if name == "multiple":
            return "true" if self.multiple else None
        return self.attributes.get(name)

    def get_dom_attribute(self, name: str) -> str | None:
        return self.get_attribute(name)

    def get_property(self, name: str) -> str | None:
        return self.get_attribute(name)

    def clear(self) -> None:
        self._check()
        self.value = ""

    def send_keys(self, *keys: str) -> None:
        self._check()
        self.value += "".join(keys)

    def click(self) -> None:
        self._check()
        self.clicks += 1
        if self.attributes.get("type") in ("checkbox", "radio"):
            self.selected = not self.selected
        if self.on_click:
            self.on_click(self)

    def find_elements(self, by: str, value: str) -> list[FakeElement]:
        self._check()
        if by == By.TAG_NAME and value == "option":
            return list(self.options)
        return []


class FakeAlert:
    """A native browser alert."""

    def __init__(self) -> None:
        self.accepted = False
        self.dismissed = False

    def accept(self) -> None:
        self.accepted = True

    def dismiss(self) -> None:
        self.dismissed = True


class FakeSwitchTo:
    """Switch target of the fake driver."""

    def __init__(self, driver: FakeDriver) -> None:
        self._driver = driver

    @property
    def alert(self) -> FakeAlert:
        if self._driver.alert is None:
            msg = "no such alert"
            raise NoAlertPresentException(msg)
        return self._driver.alert


class FakeDriver:
    """A browser session holding a page as a mapping from locators to elements."""

    def __init__(self) -> None:
        self.elements: dict[tuple[str, str], list[FakeElement]] = {}
        self.scripts: list[tuple[str, tuple]] = []
        self.lookups: list[tuple[str, str]] = []
        self.visited: list[str] = []
        self.alert: FakeAlert | None = None
        self.title = ""
        self.switch_to = FakeSwitchTo(self)
        self.quit_called = False

    def add(self, locator: tuple[str, str], *elements: FakeElement) -> FakeElement:
        self.elements[locator] = list(elements)
        return elements[0]

    def remove(self, locator: tuple[str, str]) -> None:
        for element in self.elements.pop(locator, []):
            element.stale = True

    def replace(self, locator: tuple[str, str], element: FakeElement) -> None:
        self.remove(locator)
        self.add(locator, element)

    def find_element(self, by: str, value: str) -> FakeElement:
        self.lookups.append((by, value))
        elements = self.elements.get((by, value))
        if not elements:
            msg = "no such element: {}={}".format(by, value)
            raise NoSuchElementException(msg)
        return elements[0]

    def find_elements(self, by: str, value: str) -> list[FakeElement]:
        self.lookups.append((by, value))
        return list(self.elements.get((by, value), []))

    def execute_script(self, script: str, *args: object) -> None:
        for arg in args:
            if isinstance(arg, FakeElement):
                arg._check()
        self.scripts.append((script, args))

    def get(self, url: str) -> None:
        self.visited.append(url)

    def get_screenshot_as_file(self, filename: str) -> bool:
        return True

    def implicitly_wait(self, wait_time: float) -> None:
        pass

    def close(self) -> None:
        pass

    def quit(self) -> None:
        self.quit_called = True


class LateDriver(FakeDriver):
    """Attaches the pending elements only after a number of lookups."""

    def __init__(self, missing_lookups: int) -> None:
        super().__init__()
        self.missing_lookups = missing_lookups
        self.pending: dict = {}

    def _attach(self) -> None:
        if self.missing_lookups > 0:
            self.missing_lookups -= 1
            return
        self.elements.update(self.pending)

    def find_element(self, by: str, value: str) -> FakeElement:
        self._attach()
        return super().find_element(by, value)

    def find_elements(self, by: str, value: str) -> list[FakeElement]:
        self._attach()
        return super().find_elements(by, value)


@pytest.fixture(autouse=True)
def no_retry_delay(monkeypatch: pytest.MonkeyPatch) -> None:
    """Let all retry policies retry without waiting."""

    monkeypatch.setattr(retry_settings, "seconds_between_attempts", 0.0)


@pytest.fixture
def driver() -> FakeDriver:
    """An empty page."""

    return FakeDriver()
