"""Pydantic schemas for serialized output."""

from .log_entry import CompanyRead, CompanyVersionRead

__all__ = ["CompanyRead", "CompanyVersionRead"]
