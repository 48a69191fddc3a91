"""
List-view engine: search, filter, sort and paginate a record set.

Every tabular view of the dashboard (transactions, invoices, users,
maintenance requests, clients) runs the same pipeline over an in-memory
record set::

    search -> filters -> date range -> sort -> paginate

``ListViewController.compute`` is a pure function of ``(records, query)``:
it never mutates the records, keeps no state between calls and never raises
for a malformed query. A clause it cannot apply (unknown field, bad page
number, incomparable sort values) is skipped, logged and reported in
``ResultPage.skipped_clauses``.

Sort values are compared with Python's natural ordering. Date fields are ISO
strings and therefore compare lexicographically; that ordering is only
chronological for well-formed ISO-8601 values.
"""

import logging
import math
import time
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ..config.settings import ListViewConfig, get_settings
from ..models.query import DateRange, ListQuery, PageSpec, ResultPage, SortDirection, SortSpec
from ..utils.date_utils import DateUtils
from ..utils.field_access import MISSING, get_field, has_field

logger = logging.getLogger(__name__)

ELLIPSIS = "..."
ALL = "All"


def toggle_sort(current: Optional[SortSpec], field: str) -> Optional[SortSpec]:
    """
    Next sort state after a click on a column header.

    A new column starts descending, a second click switches it to
    ascending and a third click clears the sort.
    """
    if current is None or current.field != field:
        return SortSpec(field=field, direction=SortDirection.DESCENDING)
    if current.direction == SortDirection.DESCENDING:
        return SortSpec(field=field, direction=SortDirection.ASCENDING)
    return None


def page_window(current: int, total_pages: int, max_pages: int = 7) -> List[Union[int, str]]:
    """
    Page links shown by the pagination control.

    All pages when they fit, otherwise the first page, the current page
    with its neighbours, the last page and ``"..."`` for the gaps.
    """
    if total_pages <= 0:
        return []
    if total_pages <= max_pages:
        return list(range(1, total_pages + 1))

    pages: List[Union[int, str]] = [1]
    if current > 3:
        pages.append(ELLIPSIS)

    start = max(2, current - 1)
    end = min(total_pages - 1, current + 1)
    pages.extend(range(start, end + 1))

    if current < total_pages - 2:
        pages.append(ELLIPSIS)
    pages.append(total_pages)
    return pages


class ListViewController:
    """Search, filter, sort and paginate one kind of record.

    Args:
        searchable_fields: Fields matched by the free-text search
        fields: Fields a query may reference; inferred from the records when omitted
        name: View name used in log messages
        config: List-view settings (page size default, filter sentinels)
    """

    def __init__(
        self,
        searchable_fields: Sequence[str],
        fields: Optional[Sequence[str]] = None,
        name: str = "records",
        config: Optional[ListViewConfig] = None,
    ):
        self.searchable_fields = tuple(searchable_fields)
        self.fields = frozenset(fields) if fields is not None else None
        self.name = name
        self.config = config or get_settings().list_view

    # ------------------------------------------------------------------
    # Query construction
    # ------------------------------------------------------------------

    def new_query(self, **kwargs) -> ListQuery:
        """Empty query on page 1 with the configured page size."""
        kwargs.setdefault("page", PageSpec(number=1, size=self.config.default_page_size))
        return ListQuery(**kwargs)

    def clamp_page(self, query: ListQuery, result: ResultPage) -> ListQuery:
        """Move an overrun query back to the last available page."""
        last_page = max(result.total_pages, 1)
        if query.page.number > last_page:
            return query.with_page(last_page)
        if query.page.number < 1:
            return query.with_page(1)
        return query

    # ------------------------------------------------------------------
    # Pipeline stages
    # ------------------------------------------------------------------

    def search(
        self,
        records: Sequence[Any],
        search_text: str,
        searchable_fields: Optional[Sequence[str]] = None,
    ) -> List[Any]:
        """Records with at least one searchable field containing the text, ignoring case."""
        needle = (search_text or "").lower()
        if not needle:
            return list(records)

        fields = self.searchable_fields if searchable_fields is None else tuple(searchable_fields)
        matched = []
        for record in records:
            for field in fields:
                value = get_field(record, field)
                if value is MISSING or value is None:
                    continue
                if needle in str(value).lower():
                    matched.append(record)
                    break
        return matched

    def apply_filters(self, candidates: Sequence[Any], filters: Dict[str, Any]) -> List[Any]:
        """Records equal to every active filter value."""
        return self._apply_filters(candidates, filters, [])

    def apply_date_range(self, candidates: Sequence[Any], date_range: Optional[DateRange]) -> List[Any]:
        """Records whose date field falls inside the inclusive range."""
        return self._apply_date_range(candidates, date_range, [])

    def apply_sort(self, filtered: Sequence[Any], sort: Optional[SortSpec]) -> List[Any]:
        """Stable sort by one field; ``None`` keeps the incoming order."""
        return self._apply_sort(filtered, sort, [])

    def paginate(self, ordered: Sequence[Any], page: PageSpec) -> ResultPage:
        """Slice one page out of the ordered records."""
        return self._paginate(ordered, page, [])

    def compute(self, records: Sequence[Any], query: ListQuery) -> ResultPage:
        """Run the whole pipeline and return the requested page."""
        started = time.perf_counter()
        skipped: List[str] = []

        candidates = self.search(records, query.search_text)
        candidates = self._apply_filters(candidates, query.filters, skipped)
        candidates = self._apply_date_range(candidates, query.date_range, skipped)
        candidates = self._apply_sort(candidates, query.sort, skipped)
        result = self._paginate(candidates, query.page, skipped)

        duration = time.perf_counter() - started
        logger.debug(
            f"List view {self.name}: {result.total_matched} of {len(records)} matched, "
            f"page {result.page_number}/{result.total_pages} in {duration:.4f}s"
        )
        return result

    # ------------------------------------------------------------------
    # Facets
    # ------------------------------------------------------------------

    def distinct_values(self, records: Sequence[Any], field: str) -> List[Any]:
        """Sorted distinct non-empty values of a field, for filter option lists."""
        values = set()
        for record in records:
            value = get_field(record, field)
            if value is MISSING or value is None or value == "":
                continue
            values.add(value)
        try:
            return sorted(values)
        except TypeError:
            return sorted(values, key=str)

    def count_by(
        self,
        records: Sequence[Any],
        field: str,
        values: Optional[Iterable[Any]] = None,
    ) -> Dict[Any, int]:
        """Record counts per field value, led by an ``"All"`` total.

        With ``values`` the result holds exactly those keys in that order,
        including zero counts.
        """
        counter = Counter()
        for record in records:
            value = get_field(record, field)
            if value is not MISSING and value is not None:
                counter[value] += 1

        counts: Dict[Any, int] = {ALL: len(records)}
        keys = list(values) if values is not None else self.distinct_values(records, field)
        for key in keys:
            counts[key] = counter.get(key, 0)
        return counts

    def page_window(self, result: ResultPage) -> List[Union[int, str]]:
        """Page links for a computed result."""
        return page_window(result.page_number, result.total_pages, self.config.max_page_links)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _is_known_field(self, records: Sequence[Any], field: str) -> bool:
        if self.fields is not None:
            return field in self.fields
        if not records:
            return True
        return has_field(records, field)

    def _is_unconstrained(self, value: Any) -> bool:
        if value is None:
            return True
        if isinstance(value, str):
            return value.strip().lower() in self.config.filter_sentinels
        return False

    def _skip(self, skipped: List[str], clause: str, reason: str) -> None:
        skipped.append(clause)
        logger.warning(f"List view {self.name}: skipping {clause} ({reason})")

    def _apply_filters(self, candidates: Sequence[Any], filters: Dict[str, Any], skipped: List[str]) -> List[Any]:
        active: List[Tuple[str, Any]] = []
        for field, value in (filters or {}).items():
            if self._is_unconstrained(value):
                continue
            if not self._is_known_field(candidates, field):
                self._skip(skipped, f"filters.{field}", "unknown field")
                continue
            active.append((field, value))

        if not active:
            return list(candidates)
        return [
            record
            for record in candidates
            if all(get_field(record, field) == value for field, value in active)
        ]

    def _apply_date_range(
        self, candidates: Sequence[Any], date_range: Optional[DateRange], skipped: List[str]
    ) -> List[Any]:
        if date_range is None or date_range.is_open:
            return list(candidates)
        if not self._is_known_field(candidates, date_range.field):
            self._skip(skipped, f"date_range.{date_range.field}", "unknown field")
            return list(candidates)
        if date_range.start is not None and date_range.end is not None and date_range.start > date_range.end:
            self._skip(skipped, f"date_range.{date_range.field}", "start after end")
            return list(candidates)

        kept = []
        for record in candidates:
            value = DateUtils.parse_date(get_field(record, date_range.field) or None)
            if value is not None and DateUtils.is_within(value, date_range.start, date_range.end):
                kept.append(record)
        return kept

    def _apply_sort(self, filtered: Sequence[Any], sort: Optional[SortSpec], skipped: List[str]) -> List[Any]:
        if sort is None:
            return list(filtered)
        if not self._is_known_field(filtered, sort.field):
            self._skip(skipped, f"sort.{sort.field}", "unknown field")
            return list(filtered)

        present = []
        absent = []
        for record in filtered:
            value = get_field(record, sort.field)
            if value is MISSING or value is None:
                absent.append(record)
            else:
                present.append(record)

        # sorted() keeps ties in input order, also with reverse=True
        try:
            ordered = sorted(present, key=lambda record: get_field(record, sort.field), reverse=sort.descending)
        except TypeError:
            self._skip(skipped, f"sort.{sort.field}", "values are not comparable")
            return list(filtered)
        return ordered + absent

    def _paginate(self, ordered: Sequence[Any], page: PageSpec, skipped: List[str]) -> ResultPage:
        size = page.size
        if size < 1:
            self._skip(skipped, "page.size", f"size {size} is not positive")
            size = self.config.default_page_size

        number = page.number
        if number < 1:
            self._skip(skipped, "page.number", f"page {number} clamped to 1")
            number = 1

        total_matched = len(ordered)
        total_pages = math.ceil(total_matched / size)
        start = (number - 1) * size
        items = list(ordered[start:start + size])

        return ResultPage(
            items=items,
            total_matched=total_matched,
            total_pages=total_pages,
            page_number=number,
            page_size=size,
            skipped_clauses=list(skipped),
        )
