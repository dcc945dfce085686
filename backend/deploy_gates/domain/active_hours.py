"""Weekly active-hours policy shapes.

Holds only the configuration an external evaluator needs to decide whether
gates should be open at a given instant. Nothing here makes that decision.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import IntEnum
from types import MappingProxyType


class Weekday(IntEnum):
    """Days of the week. Values match ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def field_name(self) -> str:
        """Lower-case day name used as the wire field name."""
        return self.name.lower()

    @classmethod
    def of(cls, day: date) -> "Weekday":
        return cls(day.weekday())


@dataclass(frozen=True)
class ActiveHours:
    """Daily wall-clock window with no date and no timezone.

    ``start < end`` is not enforced: an overnight window is representable.
    """

    start: time
    end: time

    @property
    def crosses_midnight(self) -> bool:
        return self.start > self.end


@dataclass(frozen=True)
class ActiveHoursPerWeek:
    """Seven optional slots, one per weekday.

    A missing slot means no restriction on that day, which is not the same
    as a zero-length window.
    """

    slots: Mapping[Weekday, ActiveHours] = field(default_factory=dict)

    def __post_init__(self):
        # Slots are copied and exposed read-only
        frozen = {Weekday(day): hours for day, hours in self.slots.items()}
        object.__setattr__(self, "slots", MappingProxyType(frozen))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ActiveHoursPerWeek):
            return NotImplemented
        return dict(self.slots) == dict(other.slots)

    def __hash__(self) -> int:
        return hash(tuple(self))

    @classmethod
    def from_days(cls, **days: ActiveHours | None) -> "ActiveHoursPerWeek":
        """Build from keyword day names, e.g. ``from_days(monday=hours)``."""
        slots = {}
        for name, hours in days.items():
            day = Weekday[name.upper()]
            if hours is not None:
                slots[day] = hours
        return cls(slots)

    def __getitem__(self, day: Weekday) -> ActiveHours | None:
        return self.slots.get(Weekday(day))

    def __iter__(self) -> Iterator[tuple[Weekday, ActiveHours | None]]:
        """Yield every weekday, Monday first, with its slot or None."""
        for day in Weekday:
            yield day, self.slots.get(day)

    def with_day(self, day: Weekday, hours: ActiveHours | None) -> "ActiveHoursPerWeek":
        """Return a copy with one day replaced; ``None`` clears the restriction."""
        slots = dict(self.slots)
        if hours is None:
            slots.pop(Weekday(day), None)
        else:
            slots[Weekday(day)] = hours
        return ActiveHoursPerWeek(slots)

    def for_date(self, day: date) -> ActiveHours | None:
        return self[Weekday.of(day)]

    @property
    def restricted_days(self) -> list[Weekday]:
        return [day for day, hours in self if hours is not None]


@dataclass(frozen=True)
class Config:
    """Snapshot fed to the active-hours evaluator.

    ``system_time`` is supplied rather than read from the clock so that
    evaluation is reproducible.
    """

    system_time: datetime
    active_hours_per_week: ActiveHoursPerWeek = field(default_factory=ActiveHoursPerWeek)

    def active_hours_today(self) -> ActiveHours | None:
        """Slot for the weekday of ``system_time`` in its own timezone."""
        return self.active_hours_per_week.for_date(self.system_time.date())
