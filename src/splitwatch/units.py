""" time units and conversion from nanoseconds """

from enum import Enum


class InvalidUnitError(ValueError):
    """ requested time unit is not known """


class TimeUnit(Enum):
    """ fixed-ratio time units. The value of each member is nanoseconds per unit. """

    NANOSECONDS = 1
    MICROSECONDS = 1_000
    MILLISECONDS = 1_000_000
    SECONDS = 1_000_000_000
    MINUTES = 60 * 1_000_000_000
    HOURS = 3600 * 1_000_000_000
    DAYS = 86400 * 1_000_000_000

    @property
    def nanos(self):
        return self.value

    @property
    def symbol(self):
        return _SYMBOLS[self]


_SYMBOLS = {
    TimeUnit.NANOSECONDS: "ns",
    TimeUnit.MICROSECONDS: "us",
    TimeUnit.MILLISECONDS: "ms",
    TimeUnit.SECONDS: "s",
    TimeUnit.MINUTES: "min",
    TimeUnit.HOURS: "h",
    TimeUnit.DAYS: "d",
}

# "seconds", "second", "s", ... -> TimeUnit.SECONDS
_ALIASES = {}
for _unit in TimeUnit:
    _ALIASES[_unit.name.lower()] = _unit
    _ALIASES[_unit.name.lower()[:-1]] = _unit
    _ALIASES[_SYMBOLS[_unit]] = _unit
_ALIASES["µs"] = TimeUnit.MICROSECONDS
_ALIASES["sec"] = TimeUnit.SECONDS
del _unit


def as_unit(unit):
    """
    normalize 'unit' to a TimeUnit
      - TimeUnit members are returned as they are
      - strings can be member names, singular names or symbols like "ms"
        (case-insensitive)
    """
    if isinstance(unit, TimeUnit):
        return unit
    if isinstance(unit, str) and unit.strip().lower() in _ALIASES:
        return _ALIASES[unit.strip().lower()]
    raise InvalidUnitError(f"unknown time unit: {unit!r}")


def convert(nanos, unit):
    """ convert a duration in nanoseconds to 'unit' """
    return nanos / as_unit(unit).nanos
