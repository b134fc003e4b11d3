"""Error taxonomy for the setup run."""

from typing import Optional


class SetupError(Exception):
    """Base class for every fatal setup failure."""

    kind = "SetupError"

    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.stage = stage

    def describe(self) -> str:
        """Human-readable message naming the error kind and failing stage."""
        if self.stage:
            return f"{self.kind} during {self.stage}: {self.message}"
        return f"{self.kind}: {self.message}"


class InvalidVersion(SetupError):
    kind = "InvalidVersion"


class FetchError(SetupError):
    kind = "FetchError"


class ExtractError(SetupError):
    kind = "ExtractError"


class InstallError(SetupError):
    kind = "InstallError"


class VerificationError(SetupError):
    kind = "VerificationError"
