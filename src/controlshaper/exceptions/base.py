"""Root of the controlshaper error hierarchy.

Errors raised while loading option definitions, editing curves or reading
the settings file carry two messages: a short one for the CLI (shown by
`format_error_for_display`) and a detailed one for the log file. Errors
the user can fix themselves, such as a malformed definitions file, also
carry a hint that the CLI prints beneath the message.
"""

from typing import Optional


class ControlShaperError(Exception):
    """
    Something went wrong in an editing session or a CLI command.

    Subclasses may also derive from a builtin exception (as
    CurvePointIndexError does from IndexError) so callers that only know the
    builtin can still catch them.

    Attributes:
        user_message: One line suitable for the CLI
        technical_message: Detail for the log (paths, parser output, indices)
        recoverable: True when fixing a file or an argument and retrying works
        recovery_hint: What to change before retrying, if known
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

    def get_full_message(self) -> str:
        """The CLI message followed by the recovery hint on its own paragraph."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
