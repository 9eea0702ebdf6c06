"""Page arithmetic shared by repositories and the HTTP layer."""

from dataclasses import dataclass


TASKS_PER_PAGE = 10


@dataclass(frozen=True)
class PaginationSpec:
    page: int
    page_size: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


def normalize_pagination(*, page: int | None, page_size: int) -> PaginationSpec:
    """Validate a 1-based page number, defaulting to the first page."""
    resolved_page = 1 if page is None else page
    if resolved_page < 1:
        raise ValueError("page must be >= 1")
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    return PaginationSpec(page=resolved_page, page_size=page_size)


def compute_total_pages(*, total_count: int, page_size: int) -> int:
    """Compute the page count, zero when there are no records."""
    if total_count <= 0:
        return 0
    return ((total_count - 1) // page_size) + 1
