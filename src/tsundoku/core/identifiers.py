"""ISBN input handling."""

from tsundoku.core.exceptions import InvalidIdentifierError

MIN_ISBN_LENGTH = 10


def normalize_isbn(raw: str) -> str:
    """
    Trim a user supplied ISBN and check that it is long enough to look up.

    Only the length is checked; digits and checksums are not validated.

    Raises:
        InvalidIdentifierError: if fewer than ``MIN_ISBN_LENGTH`` characters remain
    """
    isbn = raw.strip()
    if len(isbn) < MIN_ISBN_LENGTH:
        raise InvalidIdentifierError(
            f"Invalid input. ISBN must be at least {MIN_ISBN_LENGTH} characters",
            details={"isbn": isbn, "length": len(isbn)},
        )
    return isbn
