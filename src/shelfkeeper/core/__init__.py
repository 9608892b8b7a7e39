# ABOUTME: Core inventory and loan model for Shelfkeeper.
# ABOUTME: Exports the record types and user-facing errors; the facade lives in core.library.

from shelfkeeper.core.errors import (
    AlreadyLoanedError,
    BookOnLoanError,
    InvalidDurationError,
    InvalidReferenceError,
    LibraryError,
    NoSelectionError,
    NotOnLoanError,
    PersistenceError,
)
from shelfkeeper.core.types import Book, BookDetails, Loan

__all__ = [
    "AlreadyLoanedError",
    "Book",
    "BookDetails",
    "BookOnLoanError",
    "InvalidDurationError",
    "InvalidReferenceError",
    "LibraryError",
    "Loan",
    "NoSelectionError",
    "NotOnLoanError",
    "PersistenceError",
]
