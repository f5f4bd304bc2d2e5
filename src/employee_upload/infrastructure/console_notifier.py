"""Console implementation of the Notifier interface."""

import sys
from typing import TextIO

from employee_upload.interfaces import Notifier
from employee_upload.logging import setup_logging

logger = setup_logging()


class ConsoleNotifier(Notifier):
    """Writes notices to a text stream and records them in the log."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream if stream is not None else sys.stderr

    def show_success(self, text: str) -> None:
        print(text, file=self._stream)
        logger.info("Success notice shown", extra={"notice": text})

    def alert(self, text: str) -> None:
        print(f"Error: {text}", file=self._stream)
        logger.warning("Alert shown", extra={"notice": text})
