from typing import Optional

# Largest OFFSET the database drivers accept (signed 64-bit).
MAX_OFFSET = 2**63 - 1


def parse_page(raw: Optional[str]) -> int:
    """Zero-based page number from a query string value; anything unusable is page 0."""
    if raw is None:
        return 0
    try:
        page = int(str(raw).strip())
    except ValueError:
        return 0
    return max(page, 0)


def page_in_range(page: int, page_size: int) -> bool:
    return max(page, 0) * page_size <= MAX_OFFSET


def paginate(statement, page: int, page_size: int):
    return statement.offset(max(page, 0) * page_size).limit(page_size)
