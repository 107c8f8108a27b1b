"""Common retry policies for validating the state of operations in a Selenium web automation.

Because these policies are focused on web operations and page loads, all of them
wait a constant time between two attempts (default 0.5 seconds) instead of
backing off exponentially. A policy with a retry count of N makes at most
N + 1 attempts (the initial attempt plus N retries).

When a policy is exhausted the outcome of the last attempt is surfaced to the
caller: if the last attempt raised an exception this exception is re-raised,
otherwise the last (still retryable) result is returned. It is up to the
caller to treat such a result as an error.

Policies are immutable and can be reused for any number of executions.

Example:
    policy = handle_boolean_or_driver_exception(condition_to_handle=False, retry_count=5)
    confirmed = policy.execute(lambda: driver.find_element(*locator).is_displayed())

"""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright 2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any

from selenium.common.exceptions import WebDriverException
from tenacity import (
    RetryCallState,
    Retrying,
    before_sleep_log,
    retry_any,
    retry_if_exception,
    retry_if_result,
    retry_never,
    stop_after_attempt,
    wait_fixed,
)

from seleniumext.settings import retry_settings

default_logger = logging.getLogger("seleniumext.helper.retry")


def is_driver_exception(exception: BaseException) -> bool:
    """Check if an exception has been raised by the web driver.

    Args:
        exception (BaseException):
            The exception raised by an attempt.

    Returns:
        bool:
            True if it is a WebDriverException (or a subclass of it).

    """

    return isinstance(exception, WebDriverException)


def _is_empty(texts: list[str] | None) -> bool:
    return not texts


def _is_empty_or_has_empty_strings(texts: list[str] | None) -> bool:
    return not texts or any(not text for text in texts)


def _surface_last_outcome(retry_state: RetryCallState) -> Any:
    # re-raises the exception of the last attempt or returns its result
    return retry_state.outcome.result()


@dataclass(frozen=True)
class RetryPolicy:
    """Fixed-count, fixed-delay retry specification.

    Attributes:
        retry_count (int):
            The number of times to retry before giving up.
        seconds_between_attempts (float):
            The number of seconds to wait between two attempts.
        retry_on_exception (Callable | None):
            Predicate deciding if a raised exception should trigger a retry.
            None means exceptions are never retried.
        retry_on_result (Callable | None):
            Predicate deciding if a returned result should trigger a retry.
            None means every result is accepted.
        name (str):
            A name for the policy used in log messages.
        logger (logging.Logger):
            The logger used to report retries.

    """

    retry_count: int
    seconds_between_attempts: float
    retry_on_exception: Callable[[BaseException], bool] | None = None
    retry_on_result: Callable[[Any], bool] | None = None
    name: str = "retry policy"
    logger: logging.Logger = field(default=default_logger, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the policy parameters."""

        if self.retry_count < 0:
            msg = "Invalid retry count -> {} for {}! Must not be negative.".format(self.retry_count, self.name)
            raise ValueError(msg)
        if self.seconds_between_attempts < 0:
            msg = "Invalid wait time -> {} for {}! Must not be negative.".format(
                self.seconds_between_attempts, self.name
            )
            raise ValueError(msg)

    # end method definition

    @property
    def max_attempts(self) -> int:
        """Return the total number of attempts (initial attempt plus retries)."""

        return self.retry_count + 1

    # end method definition

    def with_logger(self, logger: logging.Logger) -> "RetryPolicy":
        """Return a copy of the policy that reports its retries to the given logger.

        Args:
            logger (logging.Logger):
                The logging object to use for retry messages.

        Returns:
            RetryPolicy:
                The new policy.

        """

        return replace(self, logger=logger)

    # end method definition

    def retrying(self) -> Retrying:
        """Build a tenacity controller implementing this policy.

        Returns:
            Retrying:
                A fresh tenacity Retrying object.

        """

        conditions = []
        if self.retry_on_exception is not None:
            conditions.append(retry_if_exception(self.retry_on_exception))
        if self.retry_on_result is not None:
            conditions.append(retry_if_result(self.retry_on_result))

        return Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_fixed(self.seconds_between_attempts),
            retry=retry_any(*conditions) if conditions else retry_never,
            before_sleep=before_sleep_log(self.logger, logging.DEBUG),
            retry_error_callback=_surface_last_outcome,
        )

    # end method definition

    def execute(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Run a function under this policy.

        Args:
            func (Callable):
                The function to call. It is called again for each retry.
            args (Any):
                Positional arguments passed to func.
            kwargs (Any):
                Keyword arguments passed to func.

        Returns:
            Any:
                The first accepted result or - if the policy is exhausted -
                the result of the last attempt.

        Raises:
            Exception:
                Any non-retryable exception raised by func, or the
                exception of the last attempt if the policy is exhausted.

        """

        return self.retrying()(func, *args, **kwargs)

    # end method definition


def _or_default(value: float | None, default: float) -> float:
    return default if value is None else value


def get_text_list(
    retry_count: int | None = None,
    seconds_between_attempts: float | None = None,
) -> RetryPolicy:
    """Return a policy for retrieving a list of strings which is expected to not be None or empty.

    Args:
        retry_count (int | None, optional):
            The number of times to retry before giving up. Defaults to
            the text_list_retry_count setting (10).
        seconds_between_attempts (float | None, optional):
            The number of seconds to wait between retry attempts. Defaults to
            the seconds_between_attempts setting (0.5).

    Returns:
        RetryPolicy:
            A policy that retries if the list is None or empty,
            or on any WebDriverException.

    """

    return RetryPolicy(
        retry_count=_or_default(retry_count, retry_settings.text_list_retry_count),
        seconds_between_attempts=_or_default(seconds_between_attempts, retry_settings.seconds_between_attempts),
        retry_on_exception=is_driver_exception,
        retry_on_result=_is_empty,
        name="text list",
    )


def get_text_list_without_empty_strings(
    retry_count: int | None = None,
    seconds_between_attempts: float | None = None,
) -> RetryPolicy:
    """Return a policy for retrieving a list of strings which must not be empty nor contain empty strings.

    Args:
        retry_count (int | None, optional):
            The number of times to retry before giving up. Defaults to
            the text_list_retry_count setting (10).
        seconds_between_attempts (float | None, optional):
            The number of seconds to wait between retry attempts. Defaults to
            the seconds_between_attempts setting (0.5).

    Returns:
        RetryPolicy:
            A policy that retries if the list is None, empty or has an
            empty entry, or on any WebDriverException.

    """

    return RetryPolicy(
        retry_count=_or_default(retry_count, retry_settings.text_list_retry_count),
        seconds_between_attempts=_or_default(seconds_between_attempts, retry_settings.seconds_between_attempts),
        retry_on_exception=is_driver_exception,
        retry_on_result=_is_empty_or_has_empty_strings,
        name="text list without empty strings",
    )


def handle_driver_exception(
    retry_count: int | None = None,
    seconds_between_attempts: float | None = None,
) -> RetryPolicy:
    """Return a policy for operations that may raise any type of WebDriverException.

    Args:
        retry_count (int | None, optional):
            The number of times to retry before giving up. Defaults to
            the driver_exception_retry_count setting (30).
        seconds_between_attempts (float | None, optional):
            The number of seconds to wait between retry attempts. Defaults to
            the seconds_between_attempts setting (0.5).

    Returns:
        RetryPolicy:
            A policy that retries on any WebDriverException.

    """

    return RetryPolicy(
        retry_count=_or_default(retry_count, retry_settings.driver_exception_retry_count),
        seconds_between_attempts=_or_default(seconds_between_attempts, retry_settings.seconds_between_attempts),
        retry_on_exception=is_driver_exception,
        name="driver exception",
    )


def handle_boolean(
    condition_to_handle: bool,
    retry_count: int | None = None,
    seconds_between_attempts: float | None = None,
) -> RetryPolicy:
    """Return a policy for operations that are expected to return a given boolean result.

    Args:
        condition_to_handle (bool):
            The boolean result on which to retry. Note this is the retry
            condition, not the desired result: to retry until an operation
            returns True, pass False.
        retry_count (int | None, optional):
            The number of times to retry before giving up. Defaults to
            the boolean_retry_count setting (30).
        seconds_between_attempts (float | None, optional):
            The number of seconds to wait between retry attempts. Defaults to
            the seconds_between_attempts setting (0.5).

    Returns:
        RetryPolicy:
            A policy that retries while the result equals condition_to_handle.

    """

    return RetryPolicy(
        retry_count=_or_default(retry_count, retry_settings.boolean_retry_count),
        seconds_between_attempts=_or_default(seconds_between_attempts, retry_settings.seconds_between_attempts),
        retry_on_result=lambda result: bool(result) == condition_to_handle,
        name="boolean {}".format(condition_to_handle),
    )


def handle_boolean_or_driver_exception(
    condition_to_handle: bool,
    retry_count: int | None = None,
    seconds_between_attempts: float | None = None,
) -> RetryPolicy:
    """Return a policy for boolean operations which may also raise any type of WebDriverException.

    Args:
        condition_to_handle (bool):
            The boolean result on which to retry (see handle_boolean()).
        retry_count (int | None, optional):
            The number of times to retry before giving up. Defaults to
            the boolean_retry_count setting (30).
        seconds_between_attempts (float | None, optional):
            The number of seconds to wait between retry attempts. Defaults to
            the seconds_between_attempts setting (0.5).

    Returns:
        RetryPolicy:
            A policy that retries while the result equals condition_to_handle
            or on any WebDriverException.

    """

    return RetryPolicy(
        retry_count=_or_default(retry_count, retry_settings.boolean_retry_count),
        seconds_between_attempts=_or_default(seconds_between_attempts, retry_settings.seconds_between_attempts),
        retry_on_exception=is_driver_exception,
        retry_on_result=lambda result: bool(result) == condition_to_handle,
        name="boolean {} or driver exception".format(condition_to_handle),
    )
