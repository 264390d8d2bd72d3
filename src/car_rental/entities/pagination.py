"""Page-based windowing of car listings."""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from car_rental.errors import InvalidPaginationError


def _positive_int(value: Any, label: str) -> int:
    if isinstance(value, bool):
        raise InvalidPaginationError(f"{label} must be a positive integer, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise InvalidPaginationError(f"{label} must be a positive integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise InvalidPaginationError(f"{label} must be a positive integer, got {value!r}") from e
    if number < 1:
        raise InvalidPaginationError(f"{label} must be a positive integer, got {value!r}")
    return number


@dataclass(frozen=True)
class PaginationMeta:
    """Pagination block returned alongside a page of cars."""

    page: int
    page_size: int
    count: int
    page_count: int

    def to_dict(self) -> dict[str, int]:
        return {
            "page": self.page,
            "pageSize": self.page_size,
            "count": self.count,
            "pageCount": self.page_count,
        }


@dataclass(frozen=True)
class Pagination:
    """A requested page window.

    Attributes:
        page: 1-based page number
        page_size: Number of cars per page
    """

    page: int = 1
    page_size: int = 10

    @classmethod
    def from_query(cls, query: Mapping[str, Any], default_page_size: int) -> "Pagination":
        """Read ``page`` and ``pageSize`` from a query mapping.

        Args:
            query: Request query values (ints or numeric strings)
            default_page_size: Page size used when ``pageSize`` is absent

        Returns:
            Pagination for the request

        Raises:
            InvalidPaginationError: If a value is not a positive integer
        """
        page = query.get("page")
        page_size = query.get("pageSize")
        return cls(
            page=1 if page is None else _positive_int(page, "page"),
            page_size=default_page_size if page_size is None else _positive_int(page_size, "pageSize"),
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size

    def meta(self, count: int) -> PaginationMeta:
        """Describe this page given the total number of matching cars."""
        return PaginationMeta(
            page=self.page,
            page_size=self.page_size,
            count=count,
            page_count=math.ceil(count / self.page_size),
        )
