"""Tests for the company history command line script."""

from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

from company_versions.application.use_cases import create_company, update_company

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "company_history.py"


@pytest.fixture()
def script():
    spec = importlib.util.spec_from_file_location("company_history", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_schema_prints_mysql_ddl(script, capsys):
    script.print_schema("mysql")

    output = capsys.readouterr().out
    assert "CREATE TABLE company_version" in output
    assert "ROW_FORMAT=DYNAMIC" in output
    assert "log_class_lookup_idx" in output
    assert "log_date_lookup_idx" in output


def test_history_lists_versions_newest_first(script, db_session, capsys):
    company = create_company(db_session, name="Acme", username="alice")
    update_company(db_session, company_id=company.id, name="Acme Corp", username="bob")

    script.print_history(company.id)

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("v2")
    assert "bob" in lines[0]
    assert lines[1].startswith("v1")
    assert "+00:00" in lines[1]


def test_history_for_unknown_company(script, db_session, capsys):
    script.print_history(999)

    assert "No versions recorded for company 999." in capsys.readouterr().out


def test_revert_reports_unknown_versions(script, db_session):
    company = create_company(db_session, name="Acme", username="alice")

    with pytest.raises(SystemExit):
        script.revert(company.id, 7, "carol")
