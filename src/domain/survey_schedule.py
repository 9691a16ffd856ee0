"""Survey scheduling after server upgrades.

A survey is scheduled when the plugin is first installed or the server's
major or minor version goes up. System admins are told about it, at most
once every MIN_DAYS_BETWEEN_SURVEY_EMAILS days so that several upgrades in
a row don't flood them.
"""

import re
import sys
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional

from src.domain.models import DirectoryUser
from src.ports.outbound import UserDirectoryPort

# Minimum gap between two rounds of "survey scheduled" admin notices
MIN_DAYS_BETWEEN_SURVEY_EMAILS = 7

# Time from an upgrade to the survey it schedules
DAYS_UNTIL_SURVEY = 21

ADMIN_USERS_PER_PAGE = 100

SYSTEM_ADMIN_ROLE_ID = "system_admin"

_VERSION_RE = re.compile(r"v?([0-9]+)(?:\.([0-9]+))?(?:\.([0-9]+))?(?:[-+].*)?")


def _log(msg: str):
    print(msg, file=sys.stderr)


@dataclass(frozen=True)
class ServerVersion:
    major: int
    minor: int = 0
    patch: int = 0

    @classmethod
    def parse(cls, value: str) -> "ServerVersion":
        """Parse "5.12.0", "v5.12" or "5.12.0-rc1". Raises ValueError otherwise."""
        m = _VERSION_RE.fullmatch(value.strip()) if isinstance(value, str) else None
        if m is None:
            raise ValueError(f"not a server version: {value!r}")
        major, minor, patch = (int(part) if part else 0 for part in m.groups())
        return cls(major, minor, patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


@dataclass(frozen=True)
class ServerUpgrade:
    """The last server version seen and when it was first seen."""

    version: ServerVersion
    timestamp: datetime


@dataclass(frozen=True)
class ScheduledSurvey:
    next_survey: datetime
    notify_admins: bool
    upgrade: ServerUpgrade


def should_schedule_survey(current: ServerVersion, last_upgrade: Optional[ServerUpgrade]) -> bool:
    # A patch-only change never schedules
    if last_upgrade is None:
        return True
    last = last_upgrade.version
    return current.major > last.major or current.minor > last.minor


def should_send_admin_notices(now: datetime, last_upgrade: Optional[ServerUpgrade]) -> bool:
    if last_upgrade is None:
        return True
    return now - last_upgrade.timestamp >= timedelta(days=MIN_DAYS_BETWEEN_SURVEY_EMAILS)


def next_survey_date(now: datetime) -> datetime:
    return now + timedelta(days=DAYS_UNTIL_SURVEY)


def schedule_survey(
    current: ServerVersion,
    last_upgrade: Optional[ServerUpgrade],
    now: datetime,
) -> Optional[ScheduledSurvey]:
    """Decide whether an upgrade to `current` schedules a survey.

    Returns None when nothing changed. Otherwise the result carries the
    survey date, whether admins should be notified, and the upgrade record
    to store in place of `last_upgrade`.
    """
    if not should_schedule_survey(current, last_upgrade):
        _log("[schedule] no server version change, not scheduling a survey")
        return None

    next_survey = next_survey_date(now)
    if last_upgrade is None:
        _log(f"[schedule] plugin installed, survey scheduled for {next_survey:%b %d, %Y}")
    else:
        _log(
            f"[schedule] version change {last_upgrade.version} -> {current}, "
            f"survey scheduled for {next_survey:%b %d, %Y}"
        )
    return ScheduledSurvey(
        next_survey=next_survey,
        notify_admins=should_send_admin_notices(now, last_upgrade),
        upgrade=ServerUpgrade(version=current, timestamp=now),
    )


def is_system_admin(user: DirectoryUser) -> bool:
    return SYSTEM_ADMIN_ROLE_ID in user.roles.split()


def get_admin_users(directory: UserDirectoryPort, per_page: int = ADMIN_USERS_PER_PAGE) -> List[DirectoryUser]:
    """Collect every active system admin, one page at a time.

    Stops at the first page shorter than per_page. Directory errors
    propagate to the caller.
    """
    if per_page <= 0:
        raise ValueError(f"per_page must be positive, got {per_page}")

    admins: List[DirectoryUser] = []
    page = 0
    while True:
        users = directory.get_users(page=page, per_page=per_page, role=SYSTEM_ADMIN_ROLE_ID)
        admins.extend(u for u in users if u.is_active)
        if len(users) < per_page:
            return admins
        page += 1
