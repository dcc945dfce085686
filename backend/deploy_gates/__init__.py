"""Deployment gates: domain model and wire representations."""

from deploy_gates.core.exceptions import CommentConflictError, DeployGatesError, DuplicateGateError
from deploy_gates.domain.active_hours import ActiveHours, ActiveHoursPerWeek, Config, Weekday
from deploy_gates.domain.gates import Comment, Gate, GateKey, GateState
from deploy_gates.schemas.grouping import build_groups
from deploy_gates.schemas.representation import (
    ActiveHoursPerWeekRep,
    ActiveHoursRep,
    ApiInfo,
    CommentRep,
    ConfigRep,
    Environment,
    GateRep,
    GateStateRep,
    Group,
    Service,
)

__all__ = [
    "ActiveHours",
    "ActiveHoursPerWeek",
    "ActiveHoursPerWeekRep",
    "ActiveHoursRep",
    "ApiInfo",
    "Comment",
    "CommentConflictError",
    "CommentRep",
    "Config",
    "ConfigRep",
    "DeployGatesError",
    "DuplicateGateError",
    "Environment",
    "Gate",
    "GateKey",
    "GateRep",
    "GateState",
    "GateStateRep",
    "Group",
    "Service",
    "Weekday",
    "build_groups",
]
