"""Snapshot-style tests that assert complete SOQL generation remains stable."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import pytest

from soqlescape import InvalidArgumentError, compose, date, join, like, literal, raw, soql


def test_query_without_values() -> None:
    assert soql("SELECT Id FROM Account") == "SELECT Id FROM Account"


def test_compose_escapes_string_values() -> None:
    query = compose(["SELECT Id FROM Account WHERE Name = ", ""], ["O'Brien"])

    assert query == "SELECT Id FROM Account WHERE Name = 'O\\'Brien'"


def test_soql_escapes_string_values() -> None:
    query = soql("SELECT Id FROM Account WHERE Name = {}", "O'Brien")

    assert query == "SELECT Id FROM Account WHERE Name = 'O\\'Brien'"


def test_soql_scalar_values() -> None:
    assert soql("SELECT Id FROM Account WHERE IsActive = {}", True) == (
        "SELECT Id FROM Account WHERE IsActive = true"
    )
    assert soql("SELECT Id FROM Account WHERE Amount__c > {}", 1000.5) == (
        "SELECT Id FROM Account WHERE Amount__c > 1000.5"
    )
    assert soql("SELECT Id FROM Account WHERE Parent = {}", None) == (
        "SELECT Id FROM Account WHERE Parent = null"
    )


def test_soql_arrays_for_in_clauses() -> None:
    query = soql("SELECT Id FROM Account WHERE Id IN {}", ["001xx1", "001xx2", "001xx3"])

    assert query == "SELECT Id FROM Account WHERE Id IN ('001xx1', '001xx2', '001xx3')"


def test_soql_datetimes_and_dates() -> None:
    created = datetime(2024, 3, 15, 10, 30, tzinfo=timezone.utc)
    query = soql(
        "SELECT Id FROM Opportunity WHERE CreatedDate > {} AND CloseDate = {}",
        created,
        date(created),
    )

    assert query == (
        "SELECT Id FROM Opportunity WHERE CreatedDate > 2024-03-15T10:30:00Z AND CloseDate = 2024-03-15"
    )


def test_soql_date_literals() -> None:
    query = soql(
        "SELECT Id FROM Opportunity WHERE CloseDate = {} OR CreatedDate = {}",
        literal("LAST_N_DAYS", 30),
        literal("this_fiscal_quarter"),
    )

    assert query == (
        "SELECT Id FROM Opportunity WHERE CloseDate = LAST_N_DAYS:30 OR CreatedDate = THIS_FISCAL_QUARTER"
    )


def test_soql_raw_values_for_field_names() -> None:
    assert soql("SELECT {} FROM Account", raw("Custom_Field__c")) == "SELECT Custom_Field__c FROM Account"


def test_soql_like_values() -> None:
    query = soql("SELECT Id FROM Account WHERE Name LIKE {}", like("%test%"))

    assert query == "SELECT Id FROM Account WHERE Name LIKE '\\%test\\%'"


def test_soql_multiple_positional_and_named_fields() -> None:
    query = soql(
        "SELECT Id FROM Account WHERE Name = {0} AND IsActive = {active} AND Amount__c > {1}",
        "Acme",
        500,
        active=True,
    )

    assert query == "SELECT Id FROM Account WHERE Name = 'Acme' AND IsActive = true AND Amount__c > 500"


def test_soql_joined_fields_and_conditions() -> None:
    fields = join([raw(name) for name in ("Name", "Email", "Phone")])
    conditions = join([raw("A"), raw("B")], " AND ")

    query = soql("SELECT {} FROM Contact WHERE {}", fields, conditions)

    assert query == "SELECT Name, Email, Phone FROM Contact WHERE A AND B"


def test_soql_literal_braces() -> None:
    assert soql("SELECT Id FROM Account WHERE Name = '{{x}}'") == "SELECT Id FROM Account WHERE Name = '{x}'"


def test_soql_prevents_injection() -> None:
    query = soql("SELECT Id FROM Account WHERE Name = {}", "'; DELETE FROM Account; --")

    assert query == "SELECT Id FROM Account WHERE Name = '\\'; DELETE FROM Account; --'"


def test_soql_prevents_injection_via_array_values() -> None:
    query = soql("SELECT Id FROM Account WHERE Id IN {}", ["a', 'b') OR Id != '"])

    assert query == "SELECT Id FROM Account WHERE Id IN ('a\\', \\'b\\') OR Id != \\'')"


def test_soql_propagates_escape_errors() -> None:
    with pytest.raises(InvalidArgumentError, match="Empty arrays are not allowed"):
        soql("SELECT Id FROM Account WHERE Id IN {}", [])

    with pytest.raises(InvalidArgumentError, match="Invalid SOQL number value"):
        soql("SELECT Id FROM Account WHERE Amount__c > {}", float("inf"))


@pytest.mark.parametrize("template", ["SELECT {!r}", "SELECT {:>5}"])
def test_soql_rejects_format_specs(template: str) -> None:
    with pytest.raises(InvalidArgumentError, match="Format specs and conversions are not supported"):
        soql(template, "Name")


def test_soql_rejects_missing_values() -> None:
    with pytest.raises(InvalidArgumentError, match="No value supplied for template field 1"):
        soql("SELECT Id FROM Account WHERE Name = {} OR Name = {}", "Acme")

    with pytest.raises(InvalidArgumentError, match="No value supplied for template field 'name'"):
        soql("SELECT Id FROM Account WHERE Name = {name}")


def test_soql_rejects_malformed_templates() -> None:
    with pytest.raises(InvalidArgumentError, match="Malformed SOQL template"):
        soql("SELECT Id FROM Account WHERE Name = {", "Acme")


def test_compose_rejects_mismatched_lengths() -> None:
    with pytest.raises(InvalidArgumentError, match="Expected 2 segments for 1 values, got 1"):
        compose(["SELECT Id FROM Account WHERE Name = "], ["Acme"])


def test_compose_logs_counts_without_values(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="soqlescape.core.template"):
        compose(["SELECT Id FROM Account WHERE Name = ", ""], ["secret-name"])

    assert "Composed SOQL from 2 segments and 1 values" in caplog.text
    assert "secret-name" not in caplog.text
