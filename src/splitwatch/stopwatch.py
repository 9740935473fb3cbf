import time

from splitwatch.units import TimeUnit, as_unit, convert


class Stopwatch:
    """
    stop-watch accumulating elapsed time over any number of start/stop intervals
      - a new instance is stopped and reads zero
      - start() while running and stop() while stopped do nothing
      - resuming continues from the time accumulated so far, only reset()
        and restart() clear it
      - 'clock' is a callable returning integer nanoseconds of a monotonic
        source (default: time.monotonic_ns)
      - not thread-safe. Use one instance per thread or lock externally
    """

    def __init__(self, clock=None):
        self._clock = time.monotonic_ns if clock is None else clock
        self.reset()

    @classmethod
    def start_new(cls, clock=None):
        """ create a stop-watch which is already running """
        sw = cls(clock=clock)
        sw.start()
        return sw

    def reset(self):
        """ stop and set elapsed time to zero """
        self._running = False
        self._accumulated = 0
        self._anchor = None

    def restart(self):
        """ reset, then start measuring again """
        self.reset()
        self.start()

    def start(self):
        """ start, or resume, measuring """
        if self._running:
            return
        # anchor is back-dated by the accumulated time, so that 'now - anchor'
        # already contains all previous intervals
        self._anchor = self._clock() - self._accumulated
        self._running = True

    def stop(self):
        if not self._running:
            return
        self._accumulated = max(0, self._clock() - self._anchor)
        self._running = False

    def is_running(self):
        return self._running

    def elapsed_ns(self):
        """ total elapsed time as integer nanoseconds """
        if self._running:
            return max(0, self._clock() - self._anchor)
        return self._accumulated

    def elapsed(self, unit=TimeUnit.MILLISECONDS):
        """ total elapsed time in 'unit' (TimeUnit or a name like "ms", "seconds") """
        unit = as_unit(unit)
        return convert(self.elapsed_ns(), unit)

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.stop()
        return False

    def __str__(self):
        ms = self.elapsed(TimeUnit.MILLISECONDS)
        if ms >= 1000:
            return f"{ms / 1000:.2f} s"
        return f"{ms:.2f} ms"

    def __repr__(self):
        return f"Stopwatch(running={self._running}, elapsed={self})"
