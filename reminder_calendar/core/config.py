import calendar
import os
from datetime import timedelta

# Set first day of the week to Sunday
calendar.setfirstweekday(6)

# Reminder backend
REMINDERS_API_URL = os.environ.get('REMINDERS_API_URL', 'http://localhost:8080/reminders')
REQUEST_TIMEOUT = float(os.environ.get('REQUEST_TIMEOUT', '10'))

# Holiday backend
HOLIDAY_SOURCE = os.environ.get('HOLIDAY_SOURCE', 'nager')
HOLIDAYS_API_URL = os.environ.get('HOLIDAYS_API_URL', 'https://date.nager.at/api/v3')
HOLIDAY_COUNTRY_CODE = os.environ.get('HOLIDAY_COUNTRY_CODE', 'LT')

# Google Calendar holiday calendars, keyed by ISO country code
SCOPES = ['https://www.googleapis.com/auth/calendar.readonly']
TOKEN_FILE = os.path.join('config', 'token.json')
CREDENTIALS_FILE = os.path.join('config', 'credentials.json')
HOLIDAY_CALENDAR_IDS = {
    'LT': 'en.lithuanian#holiday@group.v.calendar.google.com',
    'US': 'en.usa#holiday@group.v.calendar.google.com',
    'GB': 'en.uk#holiday@group.v.calendar.google.com',
    'DE': 'en.german#holiday@group.v.calendar.google.com',
    'FR': 'en.french#holiday@group.v.calendar.google.com',
    'PL': 'en.polish#holiday@group.v.calendar.google.com',
}

# Timestamp formats
DATE_FORMAT = '%Y-%m-%d'
TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'

# Scheduling rules
MIN_DURATION = timedelta(minutes=15)
DEFAULT_DURATION = timedelta(hours=1)
SLOTS_PER_DAY = 24
BROWSING_WINDOW_YEARS = 1
TIME_SUGGESTION_STEP = 30

# Logging
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'
