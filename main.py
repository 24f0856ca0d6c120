import calendar
import logging
import sys
from datetime import date

from PyQt6.QtCore import QCoreApplication

from reminder_calendar.api.calendar import CalendarManager
from reminder_calendar.api.holidays import GoogleHolidayService, NagerHolidayService
from reminder_calendar.api.reminders import ReminderService
from reminder_calendar.core.classifier import DateClass, month_grid
from reminder_calendar.core.config import HOLIDAY_SOURCE, LOG_FORMAT, LOG_LEVEL
from reminder_calendar.core.scheduler import schedule_for
from reminder_calendar.core.utils import format_time_of_day, parse_date
from reminder_calendar.workers.api_worker import APIWorker

logger = logging.getLogger(__name__)

DAY_MARKS = {
    DateClass.TODAY: '*',
    DateClass.HAS_EVENT: '+',
    DateClass.PLAIN: ' ',
    DateClass.DISABLED_PAST: '-',
    DateClass.DISABLED_FUTURE: '-',
}


def build_holiday_service():
    """Create the holiday backend selected by HOLIDAY_SOURCE."""
    if HOLIDAY_SOURCE == 'google':
        from reminder_calendar.api.auth import AuthManager
        return GoogleHolidayService(AuthManager())
    return NagerHolidayService()


def print_month(manager, year, month):
    """Print a month grid with today (*), event (+) and disabled (-) marks."""
    print(f"{calendar.month_name[month]} {year}".center(34))
    print(calendar.weekheader(4))
    for week in month_grid(year, month, manager.window, manager.index):
        print(' '.join(f"{day.day:>3}{DAY_MARKS[date_class]}" for day, date_class in week))


def print_day(manager, day):
    """Print the hour slots of a day that hold a holiday or reminders."""
    schedule = schedule_for(day, manager.index)
    print()
    print(day.strftime("%A, %b %d, %Y"))
    if schedule.holiday:
        print(f"  {schedule.holiday.label} (All Day)")
    for slot in schedule.buckets:
        for reminder in slot.reminders:
            if schedule.holiday and reminder.title == schedule.holiday.label:
                continue
            print(f"  {slot.label:>5}  {format_time_of_day(reminder.start_time)}-"
                  f"{format_time_of_day(reminder.end_time)} {reminder.title}: {reminder.description}")


def main():
    """Main entry point: load holidays and reminders, then print the selected month and day."""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    try:
        selected = parse_date(sys.argv[1]) if len(sys.argv) > 1 else date.today()
    except ValueError:
        print("Usage: python main.py [YYYY-MM-DD]")
        sys.exit(2)

    app = QCoreApplication(sys.argv)
    manager = CalendarManager(ReminderService(), build_holiday_service())
    worker = APIWorker()
    pending = {'load_holidays', 'refresh'}

    def finish(unit_type):
        pending.discard(unit_type)
        if not pending:
            print_month(manager, selected.year, selected.month)
            print_day(manager, selected)
            app.quit()

    def on_failed(error, unit_type):
        print(f"ERROR: {unit_type} failed: {error}")
        finish(unit_type)

    worker.unitCompleted.connect(lambda result, unit_type: finish(unit_type))
    worker.unitFailed.connect(on_failed)

    worker.add_unit('load_holidays', manager.load_holidays)
    worker.add_unit('refresh', manager.refresh)

    exit_code = app.exec()
    worker.stop()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
