"""Settings for the retry behavior of seleniumext."""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright (C) 2024-2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    SettingsConfigDict,
)


## Retry Settings
class RetrySettings(BaseSettings):
    """Default values for all retry policies.

    Each value can be overwritten with an environment variable
    using the prefix SELENIUMEXT_, e.g. SELENIUMEXT_CLICK_RETRY_COUNT=10.
    """

    seconds_between_attempts: float = Field(
        default=0.5,
        ge=0.0,
        description="Fixed wait time in seconds between two attempts of a retry policy.",
    )
    text_list_retry_count: int = Field(
        default=10,
        ge=0,
        description="Number of retries when reading a list of texts that is expected to be non-empty.",
    )
    driver_exception_retry_count: int = Field(
        default=30,
        ge=0,
        description="Number of retries when an operation raises a WebDriverException.",
    )
    boolean_retry_count: int = Field(
        default=30,
        ge=0,
        description="Number of retries when waiting for a boolean result.",
    )
    click_retry_count: int = Field(
        default=20,
        ge=0,
        description="Number of times a click is repeated if it could not be confirmed.",
    )
    click_confirmation_retry_count: int = Field(
        default=5,
        ge=0,
        description="Number of times the confirmation condition is polled after each click.",
    )
    visibility_retry_count: int = Field(
        default=10,
        ge=0,
        description="Number of retries of a visibility check if the element went stale during the check.",
    )

    model_config = SettingsConfigDict(env_prefix="SELENIUMEXT_")


# Create Instance of settings
retry_settings = RetrySettings()
