import logging
import threading

logger = logging.getLogger(__name__)


class GenerationGuard:
    """ Admits at most one generation run at a time.

    Requests arriving while a run is in progress are dropped instead of queued,
    parameter changes tend to come in bursts and only the last one matters.
    Works both for reentrant calls from the running thread and for calls from
    other threads. """

    def __init__(self):
        self._lock = threading.Lock()

    @property
    def is_running(self):
        return self._lock.locked()

    def try_run(self, config, runner):
        """ Call `runner(config)` unless another run is active.

        Returns True if the runner was called, False if the request was dropped.
        Exceptions from the runner are propagated, the guard is released either way. """
        if not self._lock.acquire(blocking=False):
            logger.debug("Generation already in progress, dropping request for %s", config)
            return False

        try:
            runner(config)
        finally:
            self._lock.release()

        return True
