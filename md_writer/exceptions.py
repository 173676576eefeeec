"""Custom exceptions for MD Writer."""


class MdWriterError(Exception):
    """Base exception class for MD Writer."""

    pass


class FragmentTooLargeError(MdWriterError, MemoryError):
    """A fragment could not be built because it is too large to allocate."""

    def __init__(self, length: int, cause: BaseException | None = None) -> None:
        self.length = length
        self.cause = cause
        super().__init__(f"Cannot build a fragment of {length} characters")


class InvalidHeadingLevelError(MdWriterError, ValueError):
    """Heading level outside the range CommonMark supports."""

    def __init__(self, level: object) -> None:
        self.level = level
        super().__init__(f"Invalid heading level: {level!r} (expected 1-6)")
