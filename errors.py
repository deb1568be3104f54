# errors.py — failures raised by the book store


class BookshelfError(Exception):
    """Base class for everything the store raises."""


class ValidationError(BookshelfError):
    """A book is missing a required field or has an invalid value."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors) or "invalid book")


class StorageError(BookshelfError):
    """The database could not complete an operation."""
