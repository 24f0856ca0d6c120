import logging
from datetime import date

from PyQt6.QtCore import QObject, pyqtSignal

from reminder_calendar.core.classifier import BrowsingWindow
from reminder_calendar.core.config import HOLIDAY_COUNTRY_CODE
from reminder_calendar.core.errors import BackendError
from reminder_calendar.core.index import CalendarIndex
from reminder_calendar.core.models import Create, Edit

logger = logging.getLogger(__name__)


class CalendarManager(QObject):
    """Owns the reminder and holiday snapshots and keeps the index in sync.

    Every mutation is followed by a full refresh from the reminder backend.
    A failed mutation skips the refresh; a failed refresh leaves the previous
    index installed. Backend errors propagate to the caller.
    """
    indexChanged = pyqtSignal(object)

    def __init__(self, reminder_service, holiday_service=None, country_code=HOLIDAY_COUNTRY_CODE,
                 today=None, parent=None):
        super().__init__(parent)
        self.reminder_service = reminder_service
        self.holiday_service = holiday_service
        self.country_code = country_code
        self.window = BrowsingWindow.from_today(today or date.today())
        self.index = CalendarIndex.empty()

    def _install(self, holidays, reminders):
        """Build a new index and swap it in."""
        self.index = CalendarIndex.build(holidays, reminders)
        self.indexChanged.emit(self.index)
        return self.index

    def load_holidays(self):
        """Fetch holidays for every year the browsing window touches."""
        if self.holiday_service is None:
            return self.index

        holidays = []
        for year in range(self.window.start.year, self.window.end.year + 1):
            holidays.extend(self.holiday_service.list(year, self.country_code))

        logger.info("Loaded %d holidays for %s", len(holidays), self.country_code)
        return self._install(holidays, self.index.reminders)

    def refresh(self):
        """Re-fetch all reminders from the backend and rebuild the index."""
        try:
            reminders = self.reminder_service.list()
        except BackendError:
            logger.warning("Refresh failed, keeping index with %d reminders", len(self.index))
            raise

        logger.debug("Refreshed %d reminders", len(reminders))
        return self._install(self.index.holidays, reminders)

    def create(self, reminder):
        """Persist a new reminder, then refresh."""
        created = self.reminder_service.create(reminder)
        self.refresh()
        return created

    def update(self, reminder_id, reminder):
        """Replace an existing reminder, then refresh."""
        self.reminder_service.update(reminder_id, reminder)
        self.refresh()

    def delete(self, reminder_id):
        """Delete a reminder, then refresh."""
        self.reminder_service.delete(reminder_id)
        self.refresh()

    def submit(self, mode, reminder):
        """Persist a normalized reminder according to its form mode."""
        if isinstance(mode, Edit):
            return self.update(mode.existing.id, reminder)
        if isinstance(mode, Create):
            return self.create(reminder)
        raise TypeError(f"Unknown form mode: {mode!r}")
