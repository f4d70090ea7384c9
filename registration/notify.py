import logging
from typing import Protocol


logger = logging.getLogger(__name__)

SUCCESS_TITLE = "Registration Successful"
SUCCESS_DESCRIPTION = "You have successfully registered for the course."


class Notifier(Protocol):
    def notify(self, title: str, description: str) -> None:
        ...


class LoggingNotifier:
    """Stands in for the toast area of the page."""

    def notify(self, title: str, description: str) -> None:
        logger.info("%s: %s", title, description)
