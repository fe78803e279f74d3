from __future__ import annotations

import pytest

from lib_syslogger.domain.mask import SeverityMask
from lib_syslogger.domain.priority import Severity
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def test_allow_all_masks_nothing() -> None:
    mask = SeverityMask.allow_all()

    assert not any(mask.masked(severity) for severity in Severity)


@pytest.mark.parametrize("limit", list(Severity))
def test_up_to_allows_limit_and_more_urgent(limit: Severity) -> None:
    mask = SeverityMask.up_to(limit)

    for severity in Severity:
        assert mask.masked(severity) is (severity > limit)


def test_allowing_lists_exact_severities() -> None:
    mask = SeverityMask.allowing(Severity.ERR, Severity.DEBUG)

    allowed = [severity for severity in Severity if not mask.masked(severity)]

    assert allowed == [Severity.ERR, Severity.DEBUG]


def test_suppressing_lists_exact_severities() -> None:
    mask = SeverityMask.suppressing(Severity.INFO)

    assert mask.masked(Severity.INFO)
    assert not mask.masked(Severity.NOTICE)


def test_out_of_range_severity_is_masked() -> None:
    assert SeverityMask.allow_all().masked(8)
    assert SeverityMask.allow_all().masked(-1)


def test_str_lists_allowed_severities() -> None:
    assert str(SeverityMask.up_to(Severity.ALERT)) == "LOG_EMERG|LOG_ALERT"
    assert str(SeverityMask(0xFF)) == "<nothing>"
