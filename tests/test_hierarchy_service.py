"""Tests for building the reporting forest from flat employee rows."""

import logging

from models.employee import Employee
from services.hierarchy_service import build_hierarchy


def _employee(id_, reports_to=None):
    return Employee(id=id_, name=f"E{id_}", email=f"e{id_}@example.com", reports_to=reports_to)


def _ids(nodes):
    return [node["id"] for node in nodes]


def test_empty_input():
    assert build_hierarchy([]) == []


def test_nests_reports_under_managers():
    roots = build_hierarchy(
        [_employee(1), _employee(2, 1), _employee(3, 1), _employee(4, 2), _employee(5)]
    )

    assert _ids(roots) == [1, 5]
    assert _ids(roots[0]["children"]) == [2, 3]
    assert _ids(roots[0]["children"][0]["children"]) == [4]
    assert roots[1]["children"] == []


def test_child_listed_before_manager():
    roots = build_hierarchy([_employee(2, 1), _employee(1)])
    assert _ids(roots) == [1]
    assert _ids(roots[0]["children"]) == [2]


def test_missing_manager_becomes_root(caplog):
    with caplog.at_level(logging.WARNING):
        roots = build_hierarchy([_employee(1), _employee(2, 99)])

    assert _ids(roots) == [1, 2]
    assert "missing employee 99" in caplog.text


def test_cycle_is_omitted(caplog):
    with caplog.at_level(logging.WARNING):
        roots = build_hierarchy([_employee(1, 2), _employee(2, 1), _employee(3), _employee(4, 4)])

    assert _ids(roots) == [3]
    assert "[1, 2, 4]" in caplog.text


def test_nodes_use_camel_case_keys():
    roots = build_hierarchy([_employee(1), _employee(2, 1)])
    child = roots[0]["children"][0]

    assert child["reportsTo"] == 1
    assert child["children"] == []
    assert set(child) == {
        "id",
        "name",
        "email",
        "description",
        "phone",
        "reportsTo",
        "img",
        "createdAt",
        "updatedAt",
        "children",
    }


def test_deep_chain_is_built_without_recursion_limits():
    chain = [_employee(1)] + [_employee(i, i - 1) for i in range(2, 2001)]
    roots = build_hierarchy(chain)

    depth = 0
    node = roots[0]
    while node["children"]:
        node = node["children"][0]
        depth += 1
    assert depth == 1999
