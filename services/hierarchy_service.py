"""Reporting-line hierarchy construction."""

import logging
from collections.abc import Iterable
from typing import Any

from models.employee import Employee
from schemas.employee import EmployeeResponse

logger = logging.getLogger(__name__)


def build_hierarchy(employees: Iterable[Employee]) -> list[dict[str, Any]]:
    """Arrange a flat list of employees into a forest of reporting lines.

    Every employee becomes a JSON-ready dict (camelCase keys) placed in its
    manager's ``children`` list. Employees without a manager, or whose
    manager no longer exists, become roots. Children keep the order of the
    input. Plain dicts are used so arbitrarily deep chains serialise.

    Employees caught in a reporting cycle can never be reached from a root;
    they are left out of the result and logged.

    Args:
        employees: Employees to arrange, typically ordered by ID.

    Returns:
        The root nodes, each with its reports nested beneath it.
    """
    nodes = []
    for employee in employees:
        node = EmployeeResponse.model_validate(employee).model_dump(mode="json", by_alias=True)
        node["children"] = []
        nodes.append(node)
    by_id = {node["id"]: node for node in nodes}

    roots: list[dict[str, Any]] = []
    for node in nodes:
        manager_id = node["reportsTo"]
        parent = by_id.get(manager_id) if manager_id is not None else None
        if parent is None:
            if manager_id is not None:
                logger.warning(
                    "Employee %s reports to missing employee %s; treating as root",
                    node["id"],
                    manager_id,
                )
            roots.append(node)
        else:
            parent["children"].append(node)

    reachable = _reachable_ids(roots)
    if len(reachable) != len(by_id):
        stranded = sorted(set(by_id) - reachable)
        logger.warning("Reporting cycle detected; omitting employees %s", stranded)

    return roots


def _reachable_ids(roots: list[dict[str, Any]]) -> set[int]:
    seen: set[int] = set()
    stack = list(roots)
    while stack:
        node = stack.pop()
        seen.add(node["id"])
        stack.extend(node["children"])
    return seen
