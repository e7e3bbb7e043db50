class ScreenPlacerError(Exception):
    """Base class for every error raised by screen_placer."""


class ExternalQueryError(ScreenPlacerError):
    """The output list could not be fetched or parsed."""


class ExternalMutationError(ScreenPlacerError):
    """An enable, disable or position command was rejected."""

    def __init__(self, command, stderr: str = ""):
        self.command = list(command)
        self.stderr = stderr
        detail = f": {stderr.strip()}" if stderr and stderr.strip() else ""
        super().__init__(f"{' '.join(self.command)} failed{detail}")


class InvariantViolation(ScreenPlacerError):
    """A requested change would break a layout invariant."""
