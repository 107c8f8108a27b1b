"""Tests for the automation log adapter."""

import logging

import pytest

from seleniumext.helper.logadapter import AutomationLogAdapter

LOGGER = logging.getLogger("seleniumext.tests.logadapter")


def test_messages_are_prefixed(caplog: pytest.LogCaptureFixture) -> None:
    adapter = AutomationLogAdapter(LOGGER, "Salesforce")

    with caplog.at_level(logging.INFO):
        adapter.info("Clicked -> %s", "save")

    assert caplog.messages == ["[Salesforce] Clicked -> save"]


def test_records_carry_automation_name(caplog: pytest.LogCaptureFixture) -> None:
    adapter = AutomationLogAdapter(LOGGER, "Salesforce")

    with caplog.at_level(logging.INFO):
        adapter.info("Login done.")

    assert caplog.records[0].automation_name == "Salesforce"


def test_caller_extra_is_kept(caplog: pytest.LogCaptureFixture) -> None:
    adapter = AutomationLogAdapter(LOGGER, "SuccessFactors")

    with caplog.at_level(logging.INFO):
        adapter.info("Load page -> %s", "/home", extra={"page": "/home"})

    record = caplog.records[0]
    assert record.page == "/home"
    assert record.automation_name == "SuccessFactors"

