"""Log adapter tagging all messages of a browser automation with its name.

The name is added twice: as a "[name] " prefix of the message text and as
the "automation_name" attribute of the log record, so handlers and filters
can route the messages of concurrent automations without parsing the text.
"""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright (C) 2024-2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

import logging
from collections.abc import MutableMapping
from typing import Any


class AutomationLogAdapter(logging.LoggerAdapter):
    """Tag log messages with the name of the browser automation that emitted them."""

    def __init__(self, logger: logging.Logger | logging.LoggerAdapter, automation_name: str) -> None:
        """Initialize the adapter.

        Args:
            logger (logging.Logger | logging.LoggerAdapter):
                The logger to wrap.
            automation_name (str):
                The name of the automation. Must not be empty.

        """

        super().__init__(logger, {"automation_name": automation_name})

    # end method definition

    @property
    def automation_name(self) -> str:
        """Return the name the messages are tagged with."""

        return self.extra["automation_name"]

    # end method definition

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        """Prefix the message and add the automation name to the record attributes.

        Args:
            msg (Any):
                The original log message (may contain %s placeholders).
            kwargs (MutableMapping[str, Any]):
                Keyword arguments of the logging call. An "extra" dictionary
                given by the caller is kept; the automation name is added to it.

        Returns:
            tuple[Any, MutableMapping[str, Any]]:
                The prefixed message and the updated keyword arguments.

        """

        kwargs["extra"] = {**kwargs.get("extra", {}), "automation_name": self.automation_name}

        return "[{}] {}".format(self.automation_name, msg), kwargs

    # end method definition
