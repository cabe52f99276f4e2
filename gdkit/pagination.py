"""Cursor-based pagination requests and responses."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class Request:
    """Parameters for listing data page by page.

    ``order`` is ``desc`` (the default when empty) or ``asc``; ``limit`` is
    the number of results per call, 0 to 100; the cursors are resource ids
    marking a place in the list.
    """

    order: str = ""
    limit: int = 0
    starting_after: Optional[str] = None
    ending_before: Optional[str] = None

    def query_params(self) -> Dict[str, str]:
        """Return the set parameters as query-string values."""
        params = {}
        if self.order:
            params["order"] = self.order
        if self.limit > 0:
            params["limit"] = str(self.limit)
        if self.starting_after is not None:
            params["starting_after"] = self.starting_after
        if self.ending_before is not None:
            params["ending_before"] = self.ending_before
        return params


@dataclass
class Response:
    """Pagination details returned with a page of results.

    ``cursor_range`` holds ``[starting_after, ending_before]`` cursors.
    """

    order: str = ""
    starting_after: Optional[str] = None
    ending_before: Optional[str] = None
    total: int = 0
    yielded: int = 0
    limit: int = 0
    previous_uri: Optional[str] = None
    next_uri: Optional[str] = None
    cursor_range: List[str] = field(default_factory=list)

    def has_prev_page(self) -> bool:
        """Return True if a previous page exists."""
        return self.previous_uri is not None

    def has_next_page(self) -> bool:
        """Return True if a next page exists."""
        return self.next_uri is not None

    def prev_page_cursor(self) -> Optional[str]:
        """Return the cursor to use as ``ending_before`` for the previous page."""
        return self.cursor_range[0] if len(self.cursor_range) >= 1 else None

    def next_page_cursor(self) -> Optional[str]:
        """Return the cursor to use as ``starting_after`` for the next page."""
        return self.cursor_range[1] if len(self.cursor_range) >= 2 else None

    def prev_page_request(self) -> Request:
        """Return the request for the previous page."""
        return Request(
            order=self.order,
            limit=self.limit,
            starting_after=None,
            ending_before=self.prev_page_cursor(),
        )

    def next_page_request(self) -> Request:
        """Return the request for the next page."""
        return Request(
            order=self.order,
            limit=self.limit,
            starting_after=self.next_page_cursor(),
            ending_before=None,
        )


@dataclass
class Sort:
    """A sort query and its column directions."""

    query: str = ""
    columns: Dict[str, str] = field(default_factory=dict)