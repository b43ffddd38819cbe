"""Exception hierarchy for Delta.

Every failure in the core is fatal to the operation that raised it; the CLI
layer decides how to report it and which exit code to use.
"""


class DeltaError(Exception):
    """Base class for all Delta errors."""


class RepositoryError(DeltaError):
    """Repository is missing or already initialized."""


class CorruptIndexError(DeltaError):
    """Index file failed its checksum or signature check."""


class CorruptObjectError(DeltaError):
    """Stored object has a malformed header or wrong size."""


class ObjectNotFoundError(DeltaError, LookupError):
    """Requested object id is not present in the store."""


class ObjectStoreError(DeltaError, OSError):
    """Object could not be written to disk."""


class NotTrackedError(DeltaError, LookupError):
    """Path is not present in the staging index."""


class RefNotFoundError(DeltaError, LookupError):
    """Reference file does not exist."""


class NothingToCommitError(DeltaError):
    """Staging index is empty."""
