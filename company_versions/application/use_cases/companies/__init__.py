"""Use cases for managing companies."""

from .create_company import create_company
from .delete_company import delete_company
from .get_company import get_company
from .list_companies import list_companies
from .update_company import update_company

__all__ = [
    "create_company",
    "delete_company",
    "get_company",
    "list_companies",
    "update_company",
]
