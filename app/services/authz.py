from __future__ import annotations

from functools import wraps
from typing import Callable, TypeVar

from app.core.errors import Unauthorized
from app.models.enums import UserRole

F = TypeVar('F', bound=Callable)


def requires_role(role: UserRole, action: str) -> Callable[[F], F]:
    """Gate a service operation on the caller's role.

    The wrapped function is called without ``caller_role``; callers must pass it
    as a keyword argument. A mismatch raises ``Unauthorized`` before the
    operation body (and therefore any store access) runs.
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args, caller_role: UserRole | str, **kwargs):
            if caller_role != role:
                raise Unauthorized(f'You do not have permission to {action}')
            return func(*args, **kwargs)

        wrapper.required_role = role  # type: ignore[attr-defined]
        return wrapper  # type: ignore[return-value]

    return decorator
