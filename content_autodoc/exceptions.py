"""Exception hierarchy for content_autodoc.

All exceptions inherit from AutoDocError, providing a consistent error handling interface.
Expected absences (a type without attributes, elements or enums) are never errors.
"""


class AutoDocError(Exception):
    """Base exception for all content_autodoc errors."""


class DeclarationLoadError(AutoDocError):
    """Raised when a declaration manifest cannot be read or validated."""


class UnknownFamilyError(AutoDocError):
    """Raised when a content-type family name is not registered."""


class OutputWriteError(AutoDocError):
    """Raised when a generated page cannot be written to disk."""

    def __init__(self, key: str, path: str, reason: str):
        self.key = key
        self.path = path
        super().__init__(f"Failed to write page for {key} to {path}: {reason}")


class RunFailedError(AutoDocError):
    """Raised after a run in which one or more root pages failed."""

    def __init__(self, failed_keys: list[str]):
        self.failed_keys = tuple(failed_keys)
        super().__init__(f"{len(self.failed_keys)} page(s) failed: {', '.join(self.failed_keys)}")
