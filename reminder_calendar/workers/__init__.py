from reminder_calendar.workers.api_worker import APIWorker

__all__ = ['APIWorker']
