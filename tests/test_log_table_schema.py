"""Tests describing the shape of the version log tables."""

from __future__ import annotations

import pytest
from sqlalchemy import MetaData, inspect

from company_versions.domain.entities import (
    COMPANY_VERSION_TABLE,
    LOG_INDEXES,
    LogTableDefinition,
    TrackedEntity,
    get_log_table_definition,
)
from company_versions.infrastructure.models import CompanyVersionModel, build_log_table
from company_versions.infrastructure.schema import render_log_table_ddl

EXPECTED_INDEXES = {
    "log_class_lookup_idx": ["object_class"],
    "log_date_lookup_idx": ["logged_at"],
    "log_user_lookup_idx": ["username"],
    "log_version_lookup_idx": ["object_id", "object_class", "version"],
}


def test_company_is_registered_with_its_table():
    definition = get_log_table_definition(TrackedEntity.COMPANY)

    assert definition is COMPANY_VERSION_TABLE
    assert definition.table_name == "company_version"
    assert definition.row_format == "DYNAMIC"


def test_company_version_model_declares_the_lookup_indexes():
    table = CompanyVersionModel.__table__

    indexes = {index.name: [column.name for column in index.columns] for index in table.indexes}

    assert table.name == "company_version"
    assert indexes == EXPECTED_INDEXES


def test_version_triple_is_unique():
    table = CompanyVersionModel.__table__

    unique = {index.name for index in table.indexes if index.unique}

    assert unique == {"log_version_lookup_idx"}


def test_log_columns():
    table = CompanyVersionModel.__table__

    assert [column.name for column in table.columns] == [
        "id",
        "action",
        "logged_at",
        "object_id",
        "object_class",
        "version",
        "data",
        "username",
    ]
    assert table.c.object_id.type.length == 64
    assert table.c.data.nullable
    assert not table.c.version.nullable


def test_mysql_ddl_uses_dynamic_row_format():
    statements = render_log_table_ddl(CompanyVersionModel.__table__, "mysql")

    assert "ROW_FORMAT=DYNAMIC" in statements[0]
    assert (
        "CREATE UNIQUE INDEX log_version_lookup_idx ON company_version "
        "(object_id, object_class, version)"
    ) in statements
    assert "CREATE INDEX log_user_lookup_idx ON company_version (username)" in statements
    assert len(statements) == 1 + len(EXPECTED_INDEXES)


def test_render_rejects_unknown_dialects():
    with pytest.raises(ValueError):
        render_log_table_ddl(CompanyVersionModel.__table__, "oracle-ish")


def test_definition_without_row_format_skips_the_mysql_option():
    metadata = MetaData()
    definition = LogTableDefinition(
        tracked=TrackedEntity.COMPANY,
        table_name="archived_company_version",
        indexes=LOG_INDEXES,
        row_format=None,
    )

    table = build_log_table(definition, metadata)

    assert "mysql_row_format" not in table.kwargs
    assert "ROW_FORMAT" not in render_log_table_ddl(table, "mysql")[0]


def test_created_schema_exposes_the_indexes(db_session):
    inspector = inspect(db_session.get_bind())

    indexes = {
        index["name"]: index["column_names"]
        for index in inspector.get_indexes("company_version")
    }

    assert indexes == EXPECTED_INDEXES
