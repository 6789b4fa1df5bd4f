"""Repository implementations for infrastructure layer."""

from .company_repository import CompanyRepository
from .log_entry_repository import LogEntryRepository

__all__ = [
    "CompanyRepository",
    "LogEntryRepository",
]
