# API modules initialization
from reminder_calendar.api.calendar import CalendarManager
from reminder_calendar.api.holidays import GoogleHolidayService, NagerHolidayService
from reminder_calendar.api.reminders import ReminderService

__all__ = ['CalendarManager', 'GoogleHolidayService', 'NagerHolidayService', 'ReminderService']
