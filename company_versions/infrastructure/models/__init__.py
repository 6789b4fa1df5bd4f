"""ORM models used by the application infrastructure."""

from company_versions.domain.entities import TrackedEntity

from .company import CompanyModel
from .company_version import CompanyVersionModel
from .log_entry import build_log_table

LOG_MODELS = {
    TrackedEntity.COMPANY: CompanyVersionModel,
}

__all__ = [
    "CompanyModel",
    "CompanyVersionModel",
    "LOG_MODELS",
    "build_log_table",
]
