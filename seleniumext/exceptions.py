"""Definition for all custom exceptions of seleniumext."""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright (C) 2024-2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"


class ClickNotConfirmedError(Exception):
    """Custom exception if a click could not be confirmed after all retries."""

    def __init__(self, message: str) -> None:
        """Initialize the ClickNotConfirmedError with a message.

        Args:
            message (str):
                The error message.

        """
        super().__init__(message)


class BrowserAutomationError(Exception):
    """Custom exception if the browser session cannot be started."""

    def __init__(self, message: str) -> None:
        """Initialize the BrowserAutomationError with a message.

        Args:
            message (str):
                The error message.

        """
        super().__init__(message)
