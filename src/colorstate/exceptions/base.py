"""Root of the colorstate exception hierarchy.

Every error raised on purpose by colorstate derives from ColorStateError, so
callers can catch the whole family with one clause. Each error carries two
messages: one fit to show a user, one with the details for the log.
"""

from typing import Optional


class ColorStateError(Exception):
    """
    Base exception for colorstate.

    Attributes:
        user_message: Short message for display
        technical_message: Message for logs (defaults to user_message)
        recoverable: True if the caller can carry on, e.g. by keeping the
            previous color
        recovery_hint: What the user can do about it, if anything
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
        *args,
        **kwargs
    ):
        super().__init__(user_message, *args, **kwargs)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
