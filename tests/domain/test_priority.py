from __future__ import annotations

import pytest

from lib_syslogger.domain.errors import ConfigurationError, InvalidFacilityError
from lib_syslogger.domain.priority import Facility, Priority, Severity, coerce_priority, validate_facility
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


@pytest.mark.parametrize("facility", list(Facility))
@pytest.mark.parametrize("severity", list(Severity))
def test_decompose_reverses_combine(facility: Facility, severity: Severity) -> None:
    combined = Priority(facility, severity).combine()

    decomposed = Priority.decompose(combined)

    assert decomposed.facility == facility
    assert decomposed.severity is severity


def test_facility_codes_follow_rfc5424() -> None:
    assert len(Facility) == 24
    assert Facility.KERN == 0
    assert Facility.LOCAL7 == 23 << 3
    assert Facility.CRON.code == 9


@pytest.mark.parametrize("value", [1, 0xC0, 0xFF, 25 << 3])
def test_validate_facility_rejects_unknown_codes(value: int) -> None:
    with pytest.raises(InvalidFacilityError):
        validate_facility(value)


def test_invalid_facility_is_a_configuration_error() -> None:
    assert issubclass(InvalidFacilityError, ConfigurationError)
    assert issubclass(InvalidFacilityError, ValueError)


def test_combine_validates_facility() -> None:
    with pytest.raises(InvalidFacilityError):
        Priority(0xC0, Severity.ERR).combine()


def test_with_default_facility_returns_a_copy() -> None:
    original = Priority(severity=Severity.ERR)

    defaulted = original.with_default_facility(Facility.DAEMON)

    assert defaulted.facility == Facility.DAEMON
    assert original.facility == 0


def test_with_default_facility_zero_means_user() -> None:
    assert Priority(severity=Severity.INFO).with_default_facility(0).facility == Facility.USER


def test_with_default_facility_keeps_valid_facility() -> None:
    priority = Priority(Facility.MAIL, Severity.INFO)

    assert priority.with_default_facility(Facility.DAEMON) is priority


def test_with_default_facility_replaces_invalid_facility() -> None:
    assert Priority(0xC0, Severity.INFO).with_default_facility(Facility.LPR).facility == Facility.LPR


def test_str_renders_labels() -> None:
    assert str(Priority(Facility.NEWS, Severity.WARNING)) == "LOG_NEWS|LOG_WARNING"
    assert str(Priority(Facility.NEWS)) == "LOG_NEWS"
    assert str(Priority(severity=Severity.DEBUG)) == "LOG_DEBUG"
    assert str(Priority(0xC0, Severity.ERR)) == "Priority(0xc0)|LOG_ERR"


def test_empty_priority() -> None:
    assert Priority().is_empty
    assert not Priority(severity=Severity.INFO).is_empty


def test_coerce_priority_accepts_ints_and_severities() -> None:
    assert coerce_priority(Facility.AUTH | Severity.ALERT) == Priority(Facility.AUTH, Severity.ALERT)
    assert coerce_priority(Severity.NOTICE) == Priority(severity=Severity.NOTICE)
    same = Priority(Facility.FTP, Severity.INFO)
    assert coerce_priority(same) is same


def test_coerce_priority_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        coerce_priority("LOG_ERR")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("name", "expected"),
    [("LOG_CRON", Facility.CRON), ("cron", Facility.CRON), ("Local5", Facility.LOCAL5)],
)
def test_facility_from_name(name: str, expected: Facility) -> None:
    assert Facility.from_name(name) is expected


def test_severity_from_name_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown severity"):
        Severity.from_name("LOG_LOUD")
