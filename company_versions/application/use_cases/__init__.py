"""Aggregate application use cases."""

from .companies import (
    create_company,
    delete_company,
    get_company,
    list_companies,
    update_company,
)
from .version_history import (
    get_company_version,
    list_company_versions,
    list_company_versions_by_username,
    list_company_versions_logged_between,
    revert_company,
)

__all__ = [
    "create_company",
    "delete_company",
    "get_company",
    "get_company_version",
    "list_companies",
    "list_company_versions",
    "list_company_versions_by_username",
    "list_company_versions_logged_between",
    "revert_company",
    "update_company",
]
