import logging
import datetime

import requests

from reminder_calendar.core.config import HOLIDAY_CALENDAR_IDS, HOLIDAYS_API_URL, REQUEST_TIMEOUT
from reminder_calendar.core.errors import BackendError
from reminder_calendar.core.models import Holiday

logger = logging.getLogger(__name__)


class NagerHolidayService:
    """Public holidays from the Nager.Date REST API."""

    def __init__(self, base_url=HOLIDAYS_API_URL, session=None, timeout=REQUEST_TIMEOUT):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout

    def list(self, year, country_code):
        """Fetch the public holidays of a country for one year."""
        url = f"{self.base_url}/PublicHolidays/{year}/{country_code}"
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            records = response.json()
            if not isinstance(records, list):
                raise TypeError(f"expected a list, got {type(records).__name__}")
            return [Holiday.from_payload(record) for record in records]
        except requests.RequestException as e:
            logger.error("Error fetching holidays from %s: %s", url, e)
            raise BackendError(f"Holiday fetch failed: {e}") from e
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error("Malformed holiday list from %s: %s", url, e)
            raise BackendError(f"Malformed holiday list: {e}") from e


class GoogleHolidayService:
    """Public holidays from Google Calendar's regional holiday calendars."""

    def __init__(self, auth_manager, calendar_ids=None):
        """Initialize with an auth manager."""
        self.auth_service = auth_manager
        self.calendar_ids = calendar_ids or HOLIDAY_CALENDAR_IDS

    def list(self, year, country_code):
        """Fetch the all-day holidays of a country for one year."""
        calendar_id = self.calendar_ids.get(country_code.upper())
        if not calendar_id:
            raise BackendError(f"No Google holiday calendar configured for {country_code}")

        time_min = datetime.datetime(year, 1, 1, tzinfo=datetime.timezone.utc)
        time_max = datetime.datetime(year + 1, 1, 1, tzinfo=datetime.timezone.utc)

        try:
            service = self.auth_service.get_calendar_service()
            holidays_result = service.events().list(
                calendarId=calendar_id,
                timeMin=time_min.isoformat().replace('+00:00', 'Z'),
                timeMax=time_max.isoformat().replace('+00:00', 'Z'),
                singleEvents=True,
                orderBy='startTime'
            ).execute()
        except BackendError:
            raise
        except Exception as e:
            logger.error("Error fetching Google holidays for %s %s: %s", country_code, year, e)
            raise BackendError(f"Holiday fetch failed: {e}") from e

        holidays = []
        try:
            for item in holidays_result.get('items', []):
                start = item.get('start', {})
                if 'date' not in start:
                    continue
                holidays.append(Holiday(
                    date=datetime.date.fromisoformat(start['date']),
                    local_name=item.get('summary', ''),
                    name=item.get('summary', ''),
                    country_code=country_code.upper(),
                ))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error("Malformed Google holidays for %s %s: %s", country_code, year, e)
            raise BackendError(f"Malformed holiday list: {e}") from e
        return holidays
