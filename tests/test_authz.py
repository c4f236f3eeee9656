import pytest

from app.core.errors import Unauthorized
from app.models.enums import UserRole
from app.services.authz import requires_role
from app.services.pagination import paginate, parse_page


def test_requires_role_rejects_before_body_runs():
    calls = []

    @requires_role(UserRole.ADMIN, action="do the thing")
    def operation(value):
        calls.append(value)
        return value * 2

    with pytest.raises(Unauthorized) as excinfo:
        operation(3, caller_role=UserRole.USER)
    assert excinfo.value.message == "You do not have permission to do the thing"
    assert excinfo.value.status_code == 401
    assert calls == []

    assert operation(3, caller_role=UserRole.ADMIN) == 6
    assert operation(4, caller_role="admin") == 8
    assert calls == [3, 4]


def test_requires_role_demands_caller_role():
    @requires_role(UserRole.ADMIN, action="x")
    def operation():
        return True

    with pytest.raises(TypeError):
        operation()


@pytest.mark.parametrize(
    "raw, expected",
    [(None, 0), ("", 0), ("abc", 0), ("2", 2), (" 7 ", 7), ("-3", 0), ("1.5", 0)],
)
def test_parse_page(raw, expected):
    assert parse_page(raw) == expected


def test_paginate_applies_offset_and_limit():
    from sqlmodel import select

    from app.models.report import Report

    statement = paginate(select(Report), 2, 25)
    compiled = statement.compile(compile_kwargs={"literal_binds": True})
    sql = str(compiled)
    assert "LIMIT 25" in sql
    assert "OFFSET 50" in sql
