"""Root of the rkconfigurator error tree.

Encoding failures (a configuration the frame builders cannot turn into
frames) and configuration failures (unreadable or invalid JSON) both derive
from RkConfiguratorError, so the CLI reports every expected failure through
one ``except`` clause. Each error carries a short message for the terminal,
a longer one for the log file, and an optional hint naming the JSON field
or command that fixes it.
"""

from typing import Optional


class RkConfiguratorError(Exception):
    """
    Expected failure while loading or encoding a keyboard configuration.

    Attributes:
        user_message: One-line message printed after ``ERROR:``
        technical_message: Message written to the log (mode codes, file paths)
        recoverable: True when editing the input files is enough to fix it
        recovery_hint: What to change, or None
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message
