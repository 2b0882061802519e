"""
Errors and warnings raised while loading ISBN range data.

Only ConfigurationWarning ever reaches callers of range_source. The rest are
raised by the parser and turned into a fallback (or a skipped group) there.
"""

from typing import Optional


class ConfigurationWarning(UserWarning):
    """The configured RangeMessage location does not exist."""


class RangeDataError(Exception):
    pass


class SourceUnavailable(RangeDataError):
    """A range document could not be opened, read or decoded."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Could not read {source}: {reason}")
        self.source = source
        self.reason = reason


class StructureError(RangeDataError):
    """A range document has no RegistrationGroups section."""

    def __init__(self, source: str, reason: str = "missing RegistrationGroups section"):
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


class GroupSkipped(RangeDataError):
    """A single Group block was malformed and left out of the table."""

    def __init__(self, reason: str, prefix: Optional[str] = None):
        where = f"group {prefix!r}" if prefix is not None else "group without prefix"
        super().__init__(f"Skipping {where}: {reason}")
        self.prefix = prefix
        self.reason = reason
