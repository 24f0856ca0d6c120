"""Shared fixtures for the reminder calendar tests."""
import itertools
from datetime import date, datetime

import pytest
from PyQt6.QtCore import QCoreApplication

from reminder_calendar.core.classifier import BrowsingWindow
from reminder_calendar.core.errors import BackendError
from reminder_calendar.core.models import Holiday, Reminder
from reminder_calendar.core.utils import parse_timestamp


def make_reminder(start, end=None, title="Standup", description="daily", reminder_id=None):
    """Build a reminder from canonical timestamp text."""
    start_time = parse_timestamp(start)
    end_time = parse_timestamp(end) if end else start_time.replace(minute=59, second=0)
    return Reminder(
        id=reminder_id,
        title=title,
        description=description,
        start_time=start_time,
        end_time=end_time,
    )


class FakeReminderService:
    """In-memory reminder backend that assigns IDs and can be told to fail."""

    def __init__(self, reminders=()):
        self.records = {}
        self.ids = itertools.count(1)
        self.list_calls = 0
        self.fail_on = set()
        for reminder in reminders:
            self.create(reminder)

    def _check(self, operation):
        if operation in self.fail_on:
            raise BackendError(f"{operation} failed")

    def list(self):
        self.list_calls += 1
        self._check('list')
        return list(self.records.values())

    def create(self, reminder):
        self._check('create')
        reminder_id = next(self.ids)
        created = Reminder(**{**reminder.__dict__, 'id': reminder_id,
                              'created_date': datetime(2025, 6, 1, 12, 0, 0)})
        self.records[reminder_id] = created
        return created

    def update(self, reminder_id, reminder):
        self._check('update')
        if reminder_id not in self.records:
            raise BackendError(f"Reminder {reminder_id} not found")
        self.records[reminder_id] = Reminder(**{**reminder.__dict__, 'id': reminder_id})

    def delete(self, reminder_id):
        self._check('delete')
        if self.records.pop(reminder_id, None) is None:
            raise BackendError(f"Reminder {reminder_id} not found")


class FakeHolidayService:
    def __init__(self, holidays=()):
        self.holidays = list(holidays)
        self.calls = []
        self.fail = False

    def list(self, year, country_code):
        self.calls.append((year, country_code))
        if self.fail:
            raise BackendError("holiday service down")
        return [holiday for holiday in self.holidays if holiday.date.year == year]


@pytest.fixture(scope="session")
def qt_app():
    """Make sure a Qt core application exists for QObject based tests."""
    return QCoreApplication.instance() or QCoreApplication([])


@pytest.fixture
def today():
    return date(2025, 6, 1)


@pytest.fixture
def window(today):
    return BrowsingWindow.from_today(today)


@pytest.fixture
def new_year():
    return Holiday(date=date(2026, 1, 1), local_name="Naujieji metai", name="New Year's Day",
                   country_code="LT", is_global=True)


@pytest.fixture
def holidays(new_year):
    return [
        new_year,
        Holiday(date=date(2025, 6, 24), local_name="Joninės", name="St. John's Day", country_code="LT"),
        Holiday(date=date(2025, 6, 24), local_name="Duplicate", name="Duplicate", country_code="LT"),
    ]


@pytest.fixture
def reminder_factory():
    return make_reminder


@pytest.fixture
def reminder_service():
    return FakeReminderService()


@pytest.fixture
def holiday_service(holidays):
    return FakeHolidayService(holidays)
