import logging

import requests

from reminder_calendar.core.config import REMINDERS_API_URL, REQUEST_TIMEOUT
from reminder_calendar.core.errors import BackendError
from reminder_calendar.core.models import Reminder

logger = logging.getLogger(__name__)

_MALFORMED = (AttributeError, KeyError, TypeError, ValueError)


class ReminderService:
    """Client for the reminders REST backend of record."""

    def __init__(self, base_url=REMINDERS_API_URL, session=None, timeout=REQUEST_TIMEOUT):
        """Initialize with the collection URL and an optional requests session."""
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout

    def _item_url(self, reminder_id):
        return f"{self.base_url}/{reminder_id}"

    def _request(self, method, url, **kwargs):
        """Send a request and return the response, raising BackendError on failure."""
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
            return response
        except requests.RequestException as e:
            logger.error("Reminder backend %s %s failed: %s", method, url, e)
            raise BackendError(f"{method} {url} failed: {e}") from e

    def list(self):
        """Fetch every reminder."""
        response = self._request('GET', self.base_url)
        try:
            records = response.json()
            if not isinstance(records, list):
                raise TypeError(f"expected a list, got {type(records).__name__}")
            return [Reminder.from_payload(record) for record in records]
        except _MALFORMED as e:
            logger.error("Malformed reminder list: %s", e)
            raise BackendError(f"Malformed reminder list: {e}") from e

    def create(self, reminder):
        """Create a reminder and return it with its server-assigned ID."""
        payload = reminder.to_payload()
        payload.pop('id', None)
        response = self._request('POST', self.base_url, json=payload)
        try:
            created = Reminder.from_payload(response.json())
        except _MALFORMED as e:
            logger.error("Malformed created reminder: %s", e)
            raise BackendError(f"Malformed created reminder: {e}") from e
        if created.id is None:
            raise BackendError("Backend did not assign an ID to the created reminder")
        logger.info("Created reminder %s: %s", created.id, created.title)
        return created

    def update(self, reminder_id, reminder):
        """Replace an existing reminder."""
        payload = reminder.to_payload()
        payload['id'] = reminder_id
        self._request('PUT', self._item_url(reminder_id), json=payload)
        logger.info("Updated reminder %s", reminder_id)

    def delete(self, reminder_id):
        """Delete a reminder."""
        self._request('DELETE', self._item_url(reminder_id))
        logger.info("Deleted reminder %s", reminder_id)
