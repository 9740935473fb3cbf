import pytest


class FakeClock:
    """ manually advanced nanosecond clock """

    def __init__(self, now=1_000_000_000):
        self.now = now
        self.reads = 0

    def __call__(self):
        self.reads += 1
        return self.now

    def advance(self, nanos):
        assert nanos >= 0
        self.now += nanos

    def advance_ms(self, ms):
        self.advance(int(ms * 1_000_000))


@pytest.fixture
def clock():
    return FakeClock()
