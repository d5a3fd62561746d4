"""Page-number pagination shared by the HTTP and RPC surfaces.

``PaginationDTO`` validates the ``page`` / ``limit`` pair coming from a
query string or a message payload.  ``Page`` is what the service layer
returns: the page items plus the totals needed to build the ``meta``
block (``{"total", "page", "lastPage"}``).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from django.conf import settings
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


def _default_limit() -> int:
    return settings.PRODUCTS_DEFAULT_PAGE_LIMIT


class PaginationDTO(BaseModel):
    """Immutable page request. Both values must be positive integers."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=1, ge=1)
    limit: int = Field(default_factory=_default_limit, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results."""

    data: list[T]
    total: int
    page: int
    limit: int
    last_page: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "last_page", math.ceil(self.total / self.limit))

    @property
    def meta(self) -> dict[str, int]:
        return {"total": self.total, "page": self.page, "lastPage": self.last_page}

    def as_dict(self, render: Callable[[T], Any]) -> dict[str, Any]:
        """Wire shape: ``{"data": [...], "meta": {...}}``."""
        return {"data": [render(item) for item in self.data], "meta": self.meta}
