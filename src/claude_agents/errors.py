"""Exception types for catalog loading and agent installation.

Parse errors abort a catalog load and propagate to the caller. Install errors
are never raised out of the install service; they are captured per agent and
carried inside a ``Failed`` install status.
"""

from pathlib import Path


class ParseError(Exception):
    """Base class for failures while loading an agent document.

    Attributes:
        origin: Identity of the offending document (file path or resource name).
    """

    def __init__(self, origin: str, message: str) -> None:
        self.origin = origin
        super().__init__(f"{origin}: {message}")


class InvalidFormatError(ParseError):
    """Document has no frontmatter header, or the header is not a YAML mapping."""

    def __init__(self, origin: str, reason: str) -> None:
        self.reason = reason
        super().__init__(origin, f"Invalid agent file format: {reason}")


class MissingRequiredFieldError(ParseError):
    """Frontmatter lacks a required key (``description``)."""

    def __init__(self, origin: str, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(origin, f"Missing required field in agent: {field_name}")


class AgentFileNotFoundError(ParseError):
    """Catalog location does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(str(path), "Agent file not found")


class DocumentReadError(ParseError):
    """A catalog document exists but could not be read."""

    def __init__(self, origin: str, cause: OSError) -> None:
        self.cause = cause
        super().__init__(origin, f"Cannot read agent document: {cause}")


class DuplicateAgentError(ParseError):
    """Two documents derive the same agent identifier."""

    def __init__(self, identifier: str, first_origin: str, second_origin: str) -> None:
        self.identifier = identifier
        self.first_origin = first_origin
        super().__init__(
            second_origin,
            f"Duplicate agent identifier '{identifier}' (already defined by {first_origin})",
        )


class InstallError(Exception):
    """Base class for failures while writing or removing an installed agent."""


class PermissionDeniedError(InstallError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Permission denied: Cannot write to {path}")


class AlreadyExistsError(InstallError):
    def __init__(self, identifier: str, path: Path) -> None:
        self.identifier = identifier
        self.path = path
        super().__init__(f"Agent '{identifier}' already exists at {path}")


class DirectoryCreationError(InstallError):
    """Target directory could not be created; fatal for the whole batch."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to create directory at {path}: {cause}")


class CopyFailedError(InstallError):
    def __init__(self, identifier: str, cause: OSError) -> None:
        self.identifier = identifier
        self.cause = cause
        super().__init__(f"Failed to copy agent '{identifier}': {cause}")


class RemoveFailedError(InstallError):
    def __init__(self, identifier: str, cause: OSError) -> None:
        self.identifier = identifier
        self.cause = cause
        super().__init__(f"Failed to remove agent '{identifier}': {cause}")


class TargetNotFoundError(InstallError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Target directory not found: {path}")
