import logging
import queue

from PyQt6.QtCore import QThread, pyqtSignal

logger = logging.getLogger(__name__)


class APIWorker(QThread):
    """Runs calendar units (a mutation plus its refresh) one at a time off the UI thread."""
    unitCompleted = pyqtSignal(object, str)
    unitFailed = pyqtSignal(Exception, str)
    busyChanged = pyqtSignal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.queue = queue.Queue()
        self.running = True
        self.busy = False

    def add_unit(self, unit_type, func, **kwargs):
        """Add a unit to the queue, starting the thread if needed."""
        self.queue.put((unit_type, func, kwargs))

        if not self.isRunning():
            self.start()

    def process_next(self, timeout=0.5):
        """Run the next queued unit. Returns False when the queue stayed empty."""
        try:
            unit_type, func, kwargs = self.queue.get(block=True, timeout=timeout)
        except queue.Empty:
            return False

        self._set_busy(True)
        try:
            result = func(**kwargs)
            self.unitCompleted.emit(result, unit_type)
        except Exception as e:
            logger.error("Calendar unit %s failed: %s", unit_type, e)
            self.unitFailed.emit(e, unit_type)
        finally:
            self.queue.task_done()
            self._set_busy(not self.queue.empty())
        return True

    def _set_busy(self, busy):
        if busy != self.busy:
            self.busy = busy
            self.busyChanged.emit(busy)

    def run(self):
        """Main worker loop that processes queued units."""
        while self.running:
            self.process_next()
        logger.debug("Worker thread stopped")

    def stop(self):
        """Stop the worker thread."""
        self.running = False
        self.wait(1000)
