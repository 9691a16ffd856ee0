"""Tests for domain/survey_schedule.py — upgrade-driven survey scheduling."""

from datetime import datetime, timedelta, timezone

import pytest

from src.domain.models import DirectoryUser
from src.domain.survey_schedule import (
    ADMIN_USERS_PER_PAGE,
    DAYS_UNTIL_SURVEY,
    ServerUpgrade,
    ServerVersion,
    get_admin_users,
    is_system_admin,
    next_survey_date,
    schedule_survey,
    should_schedule_survey,
    should_send_admin_notices,
)
from src.ports.outbound import UserDirectoryPort

NOW = datetime(2019, 5, 10, tzinfo=timezone.utc)


def _upgrade(version: str, days_ago: float = 30) -> ServerUpgrade:
    return ServerUpgrade(version=ServerVersion.parse(version), timestamp=NOW - timedelta(days=days_ago))


class FakeDirectory:
    """Serves a fixed user list in pages, like the host's GetUsers."""

    def __init__(self, users, fail_on_page=None):
        self.users = users
        self.fail_on_page = fail_on_page
        self.calls = []

    def get_users(self, page, per_page, role):
        self.calls.append((page, per_page, role))
        if page == self.fail_on_page:
            raise RuntimeError("directory unavailable")
        start = page * per_page
        return self.users[start:start + per_page]


def _admins(n, deactivated=()):
    return [
        DirectoryUser(
            id=f"admin{i}",
            email=f"admin{i}@example.com",
            roles="system_user system_admin",
            delete_at=1234 if i in deactivated else 0,
        )
        for i in range(n)
    ]


class TestServerVersion:
    @pytest.mark.parametrize("value,expected", [
        ("5.12.0", ServerVersion(5, 12, 0)),
        ("v5.12", ServerVersion(5, 12, 0)),
        ("5", ServerVersion(5, 0, 0)),
        ("5.12.3-rc1", ServerVersion(5, 12, 3)),
        (" 5.12.3 ", ServerVersion(5, 12, 3)),
    ])
    def test_parse(self, value, expected):
        assert ServerVersion.parse(value) == expected

    @pytest.mark.parametrize("value", ["", "abc", "5.x", "5..1", "１.2.3", None])
    def test_parse_invalid(self, value):
        with pytest.raises(ValueError):
            ServerVersion.parse(value)

    def test_str(self):
        assert str(ServerVersion(5, 12, 0)) == "5.12.0"


class TestShouldScheduleSurvey:
    @pytest.mark.parametrize("current,last,expected", [
        ("5.12.0", None, True),
        ("5.12.0", "5.12.0", False),
        ("5.12.1", "5.12.0", False),
        ("5.13.0", "5.12.0", True),
        ("6.0.0", "5.12.0", True),
        ("5.11.0", "5.12.0", False),
        ("5.12.0", "5.12.3", False),
    ])
    def test_table(self, current, last, expected):
        last_upgrade = _upgrade(last) if last else None
        assert should_schedule_survey(ServerVersion.parse(current), last_upgrade) is expected


class TestShouldSendAdminNotices:
    @pytest.mark.parametrize("days_ago,expected", [
        (0, False),
        (1, False),
        (6.99, False),
        (7, True),
        (30, True),
    ])
    def test_table(self, days_ago, expected):
        assert should_send_admin_notices(NOW, _upgrade("5.12.0", days_ago)) is expected

    def test_first_install(self):
        assert should_send_admin_notices(NOW, None) is True


class TestScheduleSurvey:
    def test_next_survey_date(self):
        assert next_survey_date(NOW) == NOW + timedelta(days=DAYS_UNTIL_SURVEY)
        assert DAYS_UNTIL_SURVEY == 21

    def test_first_install(self):
        scheduled = schedule_survey(ServerVersion(5, 12), None, NOW)
        assert scheduled is not None
        assert scheduled.next_survey == datetime(2019, 5, 31, tzinfo=timezone.utc)
        assert scheduled.notify_admins is True
        assert scheduled.upgrade == ServerUpgrade(ServerVersion(5, 12), NOW)

    def test_no_change(self):
        assert schedule_survey(ServerVersion(5, 12), _upgrade("5.12.0"), NOW) is None

    def test_quick_second_upgrade_skips_notices(self):
        scheduled = schedule_survey(ServerVersion(5, 13), _upgrade("5.12.0", days_ago=2), NOW)
        assert scheduled is not None
        assert scheduled.notify_admins is False
        assert scheduled.upgrade.timestamp == NOW


class TestIsSystemAdmin:
    @pytest.mark.parametrize("roles,expected", [
        ("system_user system_admin", True),
        ("system_admin", True),
        ("system_user", False),
        ("", False),
        ("system_admin_lite", False),
    ])
    def test_table(self, roles, expected):
        assert is_system_admin(DirectoryUser(id="u", roles=roles)) is expected


class TestGetAdminUsers:
    def test_fake_satisfies_port(self):
        assert isinstance(FakeDirectory([]), UserDirectoryPort)

    @pytest.mark.parametrize("count,per_page,pages", [
        (0, 100, 1),
        (5, 100, 1),
        (100, 100, 2),
        (150, 100, 2),
        (7, 3, 3),
        (6, 3, 3),
    ])
    def test_paging(self, count, per_page, pages):
        directory = FakeDirectory(_admins(count))
        admins = get_admin_users(directory, per_page=per_page)
        assert [a.id for a in admins] == [f"admin{i}" for i in range(count)]
        assert [c[0] for c in directory.calls] == list(range(pages))
        assert all(c[1:] == (per_page, "system_admin") for c in directory.calls)

    def test_skips_deactivated(self):
        directory = FakeDirectory(_admins(5, deactivated={1, 3}))
        assert [a.id for a in get_admin_users(directory, per_page=2)] == ["admin0", "admin2", "admin4"]

    def test_default_page_size(self):
        directory = FakeDirectory(_admins(1))
        get_admin_users(directory)
        assert directory.calls == [(0, ADMIN_USERS_PER_PAGE, "system_admin")]

    def test_directory_error_propagates(self):
        directory = FakeDirectory(_admins(10), fail_on_page=1)
        with pytest.raises(RuntimeError):
            get_admin_users(directory, per_page=5)

    def test_bad_page_size(self):
        with pytest.raises(ValueError):
            get_admin_users(FakeDirectory([]), per_page=0)
