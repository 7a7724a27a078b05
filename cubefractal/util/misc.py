import contextlib
import logging
import sys
import time

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def status_block(title):
    """ Print title, run the block and append its duration to the same line. """
    print(title, end="...")
    sys.stdout.flush()
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        print(" {:0.2f} s".format(elapsed))
        logger.debug("%s took %.3f s", title, elapsed)


class KahanSummation:
    """ Accumulates floats with a running compensation for lost low order bits.
    Box counts grow as 20**depth, so plain summation of box volumes drifts. """

    def __init__(self):
        self.result = 0
        self.correction = 0

    @classmethod
    def sum(cls, iterable):
        s = cls()
        for x in iterable:
            s += x
        return s.result

    def __iadd__(self, x):
        y = x - self.correction
        tmp = self.result + y
        self.correction = (tmp - self.result) - y
        self.result = tmp
        return self
