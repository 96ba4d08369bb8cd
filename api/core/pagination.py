"""
Page/limit query options shared by every list endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Query

DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class FilterOptions:
    page: int | None = None
    limit: int | None = None

    def window(self, default_limit: int = DEFAULT_LIMIT) -> tuple[int, int]:
        """
        Return (limit, offset). Page numbers start at 1; a missing page is page 1.
        """
        limit = self.limit or default_limit
        offset = ((self.page - 1) if self.page else 0) * limit
        return limit, offset


def filter_options(
    page: int | None = Query(default=None, ge=1),
    limit: int | None = Query(default=None, ge=1),
) -> FilterOptions:
    return FilterOptions(page=page, limit=limit)
