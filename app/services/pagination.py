# app/services/pagination.py
from dataclasses import dataclass
from math import ceil

from app.core.config import settings
from app.core.errors import InvalidArgument


@dataclass(frozen=True)
class PageRequest:
    page: int
    limit: int

    @classmethod
    def of(cls, page: int, limit: int) -> "PageRequest":
        if page < 1 or limit < 1:
            raise InvalidArgument("Page and limit must be greater than 0")
        if limit > settings.max_page_limit:
            raise InvalidArgument(f"Limit must not exceed {settings.max_page_limit}")
        return cls(page=page, limit=limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def total_pages(self, total: int) -> int:
        return ceil(total / self.limit)
