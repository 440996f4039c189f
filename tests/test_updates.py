import json
import sys
from datetime import date, timedelta

import pytest

from scetrace.updates import (
    CheckFrequency,
    UpdateAction,
    UpdateManager,
    extract_version,
)


def _printing(text):
    return [sys.executable, "-c", f"import sys; sys.stdout.write({text!r})"]


def _write_settings(path, **group):
    path.write_text(json.dumps({"UpdateManager": group}), encoding="utf-8")


def test_extract_version_from_text():
    assert extract_version('<update version="1.2.3" size="10"/>') == "1.2.3"


def test_extract_version_from_bytes_uses_last_occurrence():
    output = b'version="0.1" version="2.0.1"'
    assert extract_version(output) == "2.0.1"


def test_weekly_check_not_due_after_three_days(tmp_path):
    settings = tmp_path / "settings.json"
    last = date.today() - timedelta(days=3)
    _write_settings(settings, lastVersionCheckPerformedOnDate=last.isoformat())
    calls = []
    manager = UpdateManager(settings, _printing('version="9.9"'))
    result = manager.check_version(CheckFrequency.WEEKLY, calls.append)
    assert calls == [None]
    assert result is None
    assert manager.last_check_date == last


def test_days_since_last_check_without_date(tmp_path):
    manager = UpdateManager(tmp_path / "settings.json", _printing(""))
    assert manager.days_since_last_check() == 0
    assert manager.last_check_date is None


def test_days_since_last_check_from_settings(tmp_path):
    settings = tmp_path / "settings.json"
    _write_settings(settings, lastVersionCheckPerformedOnDate=(date.today() - timedelta(days=3)).isoformat())
    manager = UpdateManager(settings, _printing(""))
    assert manager.days_since_last_check() == 3


def test_not_due_calls_back_with_none_and_does_not_check(tmp_path):
    settings = tmp_path / "settings.json"
    calls = []
    manager = UpdateManager(settings, _printing('version="9.9"'))
    result = manager.check_version(CheckFrequency.DAILY, calls.append)
    assert calls == [None]
    assert result is None
    assert manager.last_check_date is None
    assert not settings.exists()


def test_immediate_check_with_empty_output(tmp_path):
    settings = tmp_path / "settings.json"
    calls = []
    manager = UpdateManager(settings, _printing(""))
    manager.check_version(CheckFrequency.IMMEDIATELY, calls.append)
    assert calls == [None]
    assert manager.last_check_date == date.today()
    reloaded = UpdateManager(settings, _printing(""))
    assert reloaded.last_check_date == date.today()


def test_skip_is_remembered(tmp_path):
    settings = tmp_path / "settings.json"
    seen = []

    def decide(version):
        seen.append(version)
        return UpdateAction.SKIP

    manager = UpdateManager(settings, _printing('<u version="1.2.3"/>'))
    result = manager.check_version(CheckFrequency.IMMEDIATELY, decide)
    assert seen == ["1.2.3"]
    assert result is UpdateAction.SKIP
    assert manager.skip_release_version == "1.2.3"
    assert UpdateManager(settings, _printing("")).skip_release_version == "1.2.3"


def test_do_nothing_keeps_skip_version_unset(tmp_path):
    settings = tmp_path / "settings.json"
    manager = UpdateManager(settings, _printing('version="4.0"'))
    result = manager.check_version(CheckFrequency.IMMEDIATELY, lambda v: UpdateAction.DO_NOTHING)
    assert result is UpdateAction.DO_NOTHING
    assert manager.skip_release_version is None


def test_weekly_check_runs_when_due(tmp_path):
    settings = tmp_path / "settings.json"
    _write_settings(settings, lastVersionCheckPerformedOnDate=(date.today() - timedelta(days=8)).isoformat())
    calls = []
    manager = UpdateManager(settings, _printing(""))
    manager.check_version(CheckFrequency.WEEKLY, calls.append)
    assert calls == [None]
    assert manager.last_check_date == date.today()


def test_missing_checker_calls_back_with_none(tmp_path):
    calls = []
    manager = UpdateManager(tmp_path / "s.json", [str(tmp_path / "no-such-checker")])
    manager.check_version(CheckFrequency.IMMEDIATELY, calls.append)
    assert calls == [None]
    assert manager.last_check_date is None


def test_reentrant_check_is_refused(tmp_path):
    inner = []
    manager = UpdateManager(tmp_path / "s.json", _printing('version="5.0"'))

    def decide(version):
        manager.check_version(CheckFrequency.IMMEDIATELY, inner.append)
        return UpdateAction.DO_NOTHING

    result = manager.check_version(CheckFrequency.IMMEDIATELY, decide)
    assert result is UpdateAction.DO_NOTHING
    assert inner == [None]
    assert manager.skip_release_version is None


def test_empty_checker_command_rejected(tmp_path):
    with pytest.raises(ValueError):
        UpdateManager(tmp_path / "s.json", [])