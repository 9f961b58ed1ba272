"""Domain layer for cashbook application."""

from cashbook.domain.entry import EntryService
from cashbook.domain.category import CategoryService, ReferenceDataService
from cashbook.domain.account import AccountService

__all__ = [
    "EntryService",
    "CategoryService",
    "ReferenceDataService",
    "AccountService",
]
