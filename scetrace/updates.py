"""Periodic checks for new releases using an external update checker."""

from __future__ import annotations

import json
import os
import subprocess
from collections.abc import Callable, Sequence
from datetime import date
from enum import Enum, IntEnum
from pathlib import Path

__all__ = ["CheckFrequency", "UpdateAction", "UpdateManager", "extract_version"]

_GROUP = "UpdateManager"
_SKIP_KEY = "skipReleaseVersion"
_DATE_KEY = "lastVersionCheckPerformedOnDate"

DEFAULT_CHECKER = ("Uninstaller", "--checkupdates")


class CheckFrequency(IntEnum):
    """How often the version check runs; the value is a number of days."""

    IMMEDIATELY = 0
    DAILY = 1
    WEEKLY = 7


class UpdateAction(Enum):
    """What to do once an update has been found."""

    SKIP = "skip"
    DO_NOTHING = "do_nothing"
    UPDATE = "update"


Callback = Callable[["str | None"], "UpdateAction | None"]


def extract_version(output: str | bytes) -> str:
    """Pull the version number out of the checker's output.

    The version is the text between the last 'version="' and the next quote.
    """
    if isinstance(output, bytes):
        output = output.decode("utf-8", errors="replace")
    return output.split('version="')[-1].split('"')[0]


class UpdateManager:
    """Run the update checker and remember what the user decided.

    Settings are kept as JSON in settings_path. The checker is a command whose
    standard output is empty when there is nothing new, or names the new
    version as version="...". An update is installed by running the checker's
    program with --updater.
    """

    def __init__(
        self,
        settings_path: str | os.PathLike[str],
        checker_command: Sequence[str] = DEFAULT_CHECKER,
    ) -> None:
        self._settings_path = Path(settings_path)
        self._checker_command = list(checker_command)
        if not self._checker_command:
            raise ValueError("checker_command must not be empty")
        self._checking = False

        group = self._load_settings().get(_GROUP, {})
        skip = group.get(_SKIP_KEY)
        self._skip_release_version: str | None = None if skip is None else str(skip)
        last = group.get(_DATE_KEY)
        self._last_check_date: date | None = None
        if last is not None:
            try:
                self._last_check_date = date.fromisoformat(str(last))
            except ValueError:
                self._last_check_date = None

    @property
    def skip_release_version(self) -> str | None:
        """The last version the user chose not to install, if any."""
        return self._skip_release_version

    @property
    def last_check_date(self) -> date | None:
        """The day on which updates were last checked, if ever."""
        return self._last_check_date

    def days_since_last_check(self) -> int:
        """Days since the last check, or 0 if no check was ever made."""
        if self._last_check_date is None:
            return 0
        return (date.today() - self._last_check_date).days

    def check_version(
        self,
        frequency: CheckFrequency,
        callback: Callback | None = None,
    ) -> UpdateAction | None:
        """Check for a new release if one is due at this frequency.

        The callback receives the new version, or None when nothing was found
        or no check ran, and returns the action to take. The action taken is
        returned.
        """
        frequency = CheckFrequency(frequency)
        if frequency is CheckFrequency.IMMEDIATELY or int(frequency) <= self.days_since_last_check():
            return self._check_for_updates(callback)
        if callback is not None:
            callback(None)
        return None

    def _check_for_updates(self, callback: Callback | None) -> UpdateAction | None:
        if self._checking:
            if callback is not None:
                callback(None)
            return None
        self._checking = True
        try:
            return self._run_checker(callback)
        finally:
            self._checking = False

    def _run_checker(self, callback: Callback | None) -> UpdateAction | None:
        try:
            completed = subprocess.run(self._checker_command, capture_output=True, check=False)
        except OSError:
            if callback is not None:
                callback(None)
            return None

        if completed.returncode < 0:  # terminated by a signal
            if callback is not None:
                callback(None)
            return None

        self._set_last_check_date(date.today())

        if not completed.stdout:
            if callback is not None:
                callback(None)
            return None

        version = extract_version(completed.stdout)
        action = callback(version) if callback is not None else None
        if action is None:
            action = UpdateAction.DO_NOTHING

        if action is UpdateAction.UPDATE:
            self._start_updater()
        elif action is UpdateAction.SKIP:
            self._set_skip_release_version(version)
        return action

    def _start_updater(self) -> bool:
        try:
            subprocess.Popen(
                [self._checker_command[0], "--updater"],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError:
            return False
        return True

    def _set_skip_release_version(self, version: str) -> None:
        self._skip_release_version = version
        self._store(_SKIP_KEY, version)

    def _set_last_check_date(self, day: date) -> None:
        self._last_check_date = day
        self._store(_DATE_KEY, day.isoformat())

    def _load_settings(self) -> dict:
        try:
            with self._settings_path.open(encoding="utf-8") as handle:
                settings = json.load(handle)
        except (OSError, ValueError):
            return {}
        return settings if isinstance(settings, dict) else {}

    def _store(self, key: str, value: str) -> None:
        settings = self._load_settings()
        group = settings.get(_GROUP)
        if not isinstance(group, dict):
            group = {}
        group[key] = value
        settings[_GROUP] = group
        self._settings_path.parent.mkdir(parents=True, exist_ok=True)
        with self._settings_path.open("w", encoding="utf-8") as handle:
            json.dump(settings, handle, indent=2)