"""Tests for the main API functions."""

import json

import polars as pl
import pytest

import tunnus
from tunnus.report import Report
from tunnus.types import IdentifierKind, Severity
from tunnus.validators import ColumnNotFoundError, FinnishPINValidator


@pytest.fixture
def customers():
    """Create a frame with one invalid value per identifier column."""
    return pl.DataFrame(
        {
            "hetu": ["170583+123C", "311280-888Y", "311280-8880"],
            "y_tunnus": ["1572860-0", "0737546-2", "0737546-3"],
            "vat": ["FI15728600", "FI07375462", "15728600"],
        }
    )


class TestCheck:
    """Tests for tunnus.check()."""

    def test_check_dict(self):
        data = {"hetu": ["311280-888Y", "311280-8880"]}
        report = tunnus.check(data, identifiers={"hetu": "pin"})

        assert isinstance(report, Report)
        assert report.has_issues
        assert report.issues[0].count == 1
        assert report.source == "dict"

    def test_check_polars_dataframe(self, customers):
        report = tunnus.check(
            customers,
            identifiers={"hetu": "pin", "y_tunnus": "business_id", "vat": "vat"},
        )

        assert report.row_count == 3
        assert report.source == "DataFrame"
        assert {i.issue_type for i in report.issues} == {
            "invalid_finnish_pin",
            "invalid_finnish_business_id",
            "invalid_finnish_vat",
        }

    def test_check_lazyframe_with_enum_kinds(self, customers):
        report = tunnus.check(
            customers.lazy(),
            identifiers={"hetu": IdentifierKind.SSN},
        )
        assert report.issues[0].issue_type == "invalid_finnish_ssn"

    def test_check_kinds_ignore_case(self, customers):
        report = tunnus.check(customers, identifiers={"hetu": "PIN", "vat": "Vat"})
        assert report.checked == {"hetu": IdentifierKind.PIN, "vat": IdentifierKind.VAT}

    def test_check_all_valid(self):
        report = tunnus.check(
            {"satu": ["10011187H"], "vat": ["FI15728600"]},
            identifiers={"satu": "finuid", "vat": "vat"},
        )
        assert not report.has_issues
        assert report.by_kind() == {IdentifierKind.FINUID: 0, IdentifierKind.VAT: 0}

    def test_check_min_severity_filter(self, customers):
        report = tunnus.check(
            customers,
            identifiers={"hetu": "pin", "y_tunnus": "business_id"},
            min_severity="HIGH",
        )
        assert [i.column for i in report.issues] == ["hetu"]
        assert all(i.severity >= Severity.HIGH for i in report.issues)

    def test_check_validator_kwargs(self, customers):
        report = tunnus.check(customers, identifiers={"hetu": "pin"}, mask_output=False)
        assert report.issues[0].sample_values == ["311280-8880"]

    def test_check_severity_override_string(self):
        report = tunnus.check(
            {"h": ["311280-8880"]}, identifiers={"h": "pin"}, severity_override="low"
        )
        assert report.issues[0].severity is Severity.LOW
        assert json.loads(report.to_json())["issues"][0]["severity"] == "low"

    def test_check_with_validator_instances(self, customers):
        validator = FinnishPINValidator(column="hetu", severity_override=Severity.LOW)
        report = tunnus.check(customers, validators=[validator])
        assert report.issues[0].severity == Severity.LOW

    def test_check_unknown_kind(self, customers):
        with pytest.raises(ValueError, match="Unknown identifier kind"):
            tunnus.check(customers, identifiers={"hetu": "passport"})

    def test_check_missing_column(self, customers):
        with pytest.raises(ColumnNotFoundError) as exc_info:
            tunnus.check(customers, identifiers={"satu": "finuid"})
        assert exc_info.value.column == "satu"

    def test_check_nothing_to_check(self, customers):
        with pytest.raises(ValueError, match="Nothing to check"):
            tunnus.check(customers)

    def test_check_invalid_validator(self, customers):
        with pytest.raises(ValueError, match="Invalid validator"):
            tunnus.check(customers, validators=["finnish_pin"])

    def test_check_file_paths_not_supported(self):
        with pytest.raises(ValueError, match="Unsupported input type: str"):
            tunnus.check("customers.csv", identifiers={"hetu": "pin"})


class TestReport:
    """Tests for Report rendering and serialization."""

    def test_str_lists_every_checked_column(self, customers):
        report = tunnus.check(
            customers, identifiers={"hetu": "pin", "y_tunnus": "business_id"}
        )
        text = str(report)
        assert "Tunnus Report" in text
        assert "hetu" in text
        assert "business_id" in text
        assert "1 / 3" in text

    def test_str_passing_column(self):
        report = tunnus.check({"satu": ["10011187H"]}, identifiers={"satu": "finuid"})
        text = str(report)
        assert "finuid" in text
        assert "ok" in text
        assert "No invalid identifiers found" in text

    def test_str_empty(self):
        assert "No invalid identifiers found" in str(Report())

    def test_by_kind(self, customers):
        report = tunnus.check(
            customers, identifiers={"hetu": "pin", "y_tunnus": "business_id"}
        )
        assert report.by_kind() == {
            IdentifierKind.PIN: 1,
            IdentifierKind.BUSINESS_ID: 1,
        }
        assert report.invalid_count == 2

    def test_to_json(self, customers):
        report = tunnus.check(customers, identifiers={"hetu": "pin", "vat": "vat"})
        data = json.loads(report.to_json())
        assert data["row_count"] == 3
        assert data["checked"] == {"hetu": "pin", "vat": "vat"}
        assert data["invalid_by_kind"] == {"pin": 1, "vat": 1}
        assert data["issues"][0]["severity"] == "high"
        assert data["issues"][0]["checked"] == 3
        assert data["issues"][0]["sample_values"] == ["311280*****"]

    def test_filter_by_severity(self, customers):
        report = tunnus.check(customers, identifiers={"hetu": "pin", "vat": "vat"})
        filtered = report.filter_by_severity(Severity.HIGH)
        assert len(filtered.issues) == 1
        assert filtered.row_count == report.row_count
        assert filtered.checked == report.checked
