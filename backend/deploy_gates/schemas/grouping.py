"""Fold a flat set of gates into the nested group/service/environment listing."""

from collections.abc import Iterable

import structlog

from deploy_gates.core.exceptions import DuplicateGateError
from deploy_gates.domain.gates import Gate, GateKey
from deploy_gates.schemas.representation import Environment, GateRep, Group, Service

logger = structlog.get_logger(__name__)


def _environment_sort_key(gate: Gate) -> tuple[bool, int, str]:
    # Gates without a manual display order go after all ordered ones
    return (
        gate.display_order is None,
        gate.display_order or 0,
        gate.key.environment,
    )


def build_groups(gates: Iterable[Gate]) -> list[Group]:
    """Build the nested listing shape from gates in any order.

    Pure function -- output depends only on the set of gates given.

    Args:
        gates: Gates to list; keys must be unique

    Returns:
        Groups sorted by name, services sorted by name, and environments
        sorted by display order (unordered last) then name

    Raises:
        DuplicateGateError: two gates share the same key
    """
    tree: dict[str, dict[str, list[Gate]]] = {}
    seen: set[GateKey] = set()
    for gate in gates:
        if gate.key in seen:
            raise DuplicateGateError(gate.key)
        seen.add(gate.key)
        tree.setdefault(gate.key.group, {}).setdefault(gate.key.service, []).append(gate)

    groups = [
        Group(
            name=group_name,
            services=[
                Service(
                    name=service_name,
                    environments=[
                        Environment(name=gate.key.environment, gate=GateRep.from_domain(gate))
                        for gate in sorted(tree[group_name][service_name], key=_environment_sort_key)
                    ],
                )
                for service_name in sorted(tree[group_name])
            ],
        )
        for group_name in sorted(tree)
    ]
    logger.debug("gate_groups_built", groups=len(groups), gates=len(seen))
    return groups
