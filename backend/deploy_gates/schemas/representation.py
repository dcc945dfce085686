"""Wire representations of gates and the active-hours config.

Each model is built from its domain counterpart through ``from_domain``.
Output is normalized so the same domain state always serializes to the
same bytes:
- comments are sorted by creation instant, then by id for ties
- timestamps are converted to UTC
- optional fields that are absent are left out instead of emitted as null
"""

from datetime import UTC, datetime, time
from typing import Annotated

from pydantic import AfterValidator, AwareDatetime, BaseModel, ConfigDict, Field, model_serializer

from deploy_gates.core.config import Settings
from deploy_gates.domain.active_hours import ActiveHours, ActiveHoursPerWeek, Config
from deploy_gates.domain.gates import Comment, Gate, GateState

UINT32_MAX = 2**32 - 1


def _to_utc(value: datetime) -> datetime:
    return value.astimezone(UTC)


UtcDatetime = Annotated[AwareDatetime, AfterValidator(_to_utc)]


class WireModel(BaseModel):
    """Base for all wire models: immutable, and None-valued fields are omitted."""

    model_config = ConfigDict(frozen=True)

    @model_serializer(mode="wrap")
    def omit_absent_fields(self, handler):
        data = handler(self)
        return {name: value for name, value in data.items() if value is not None}


class ApiInfo(WireModel):
    """Name and version of the running service."""

    name: str
    version: str

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApiInfo":
        return cls(name=settings.app_name, version=settings.app_version)


class CommentRep(WireModel):
    id: str
    message: str
    created: UtcDatetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentRep":
        return cls(id=comment.id, message=comment.message, created=comment.created)


class GateRep(WireModel):
    """Full gate representation including the comment history."""

    group: str
    service: str
    environment: str
    state: GateState
    comments: list[CommentRep] = Field(default_factory=list)
    last_updated: UtcDatetime
    display_order: int | None = Field(default=None, ge=0, le=UINT32_MAX)

    @classmethod
    def from_domain(cls, gate: Gate) -> "GateRep":
        """Map a domain gate to its full wire shape.

        Comments come out oldest first. Comments created at the same instant
        are ordered by id, so the output does not depend on insertion order.
        """
        comments = sorted(gate.comments.values(), key=lambda comment: (comment.created, comment.id))
        return cls(
            group=gate.key.group,
            service=gate.key.service,
            environment=gate.key.environment,
            state=gate.state,
            comments=[CommentRep.from_domain(comment) for comment in comments],
            last_updated=gate.last_updated,
            display_order=gate.display_order,
        )


class GateStateRep(WireModel):
    """State-only gate representation for cheap status checks."""

    state: GateState

    @classmethod
    def from_domain(cls, gate: Gate) -> "GateStateRep":
        return cls(state=gate.state)


class ActiveHoursRep(WireModel):
    start: time
    end: time

    @classmethod
    def from_domain(cls, hours: ActiveHours) -> "ActiveHoursRep":
        return cls(start=hours.start, end=hours.end)


class ActiveHoursPerWeekRep(WireModel):
    """One optional field per weekday; a day without restriction is omitted."""

    monday: ActiveHoursRep | None = None
    tuesday: ActiveHoursRep | None = None
    wednesday: ActiveHoursRep | None = None
    thursday: ActiveHoursRep | None = None
    friday: ActiveHoursRep | None = None
    saturday: ActiveHoursRep | None = None
    sunday: ActiveHoursRep | None = None

    @classmethod
    def from_domain(cls, week: ActiveHoursPerWeek) -> "ActiveHoursPerWeekRep":
        return cls(**{
            day.field_name: ActiveHoursRep.from_domain(hours)
            for day, hours in week
            if hours is not None
        })


class ConfigRep(WireModel):
    system_time: UtcDatetime
    active_hours_per_week: ActiveHoursPerWeekRep

    @classmethod
    def from_domain(cls, config: Config) -> "ConfigRep":
        return cls(
            system_time=config.system_time,
            active_hours_per_week=ActiveHoursPerWeekRep.from_domain(config.active_hours_per_week),
        )


class Environment(WireModel):
    name: str
    gate: GateRep


class Service(WireModel):
    name: str
    environments: list[Environment] = Field(default_factory=list)


class Group(WireModel):
    name: str
    services: list[Service] = Field(default_factory=list)
