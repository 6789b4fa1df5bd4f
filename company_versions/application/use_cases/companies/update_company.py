"""Use case for updating company information."""

from collections.abc import Iterable
from dataclasses import replace

from sqlalchemy.orm import Session

from company_versions.domain.entities import Company
from company_versions.infrastructure.repositories import CompanyRepository

CLEARABLE_FIELDS = frozenset({"email", "phone", "address"})


def update_company(
    session: Session,
    *,
    company_id: int,
    name: str | None = None,
    email: str | None = None,
    phone: str | None = None,
    address: str | None = None,
    clear_fields: Iterable[str] = (),
    username: str | None = None,
) -> Company:
    """Apply the provided values and record the changed fields as a new version.

    A ``None`` argument keeps the current value. Optional fields listed in
    ``clear_fields`` are reset to ``None``.
    """

    repository = CompanyRepository(session)
    current = repository.get(company_id)
    if current is None:
        raise ValueError("Company not found")

    if name is not None and not name.strip():
        raise ValueError("Company name is required")

    cleared = set(clear_fields)
    unknown = cleared - CLEARABLE_FIELDS
    if unknown:
        raise ValueError(f"Cannot clear field(s): {', '.join(sorted(unknown))}")

    updated = replace(
        current,
        name=name.strip() if name is not None else current.name,
        email=email if email is not None else current.email,
        phone=phone if phone is not None else current.phone,
        address=address if address is not None else current.address,
    )
    if cleared:
        updated = replace(updated, **{field: None for field in cleared})
    return repository.update(updated, username=username)
