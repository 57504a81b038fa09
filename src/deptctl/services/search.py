"""SearchService: line search over text bodies and files."""

from __future__ import annotations

import logging
from pathlib import Path

from deptctl.domain.search import SearchQuery, find_matches
from deptctl.services.base import BaseService
from deptctl.services.result import ServiceResult
from deptctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class SearchService(BaseService):
    """Stateless: each call reads and scans its input afresh."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    @traced
    def search_text(self, query: str, text: str, *, case_sensitive: bool = True) -> ServiceResult:
        """Search an in-memory text body."""
        return self._scan(query, text, case_sensitive=case_sensitive, path=None)

    @traced
    def search_file(
        self,
        query: str,
        path: str | Path,
        *,
        case_sensitive: bool = True,
    ) -> ServiceResult:
        """Read *path* fully into memory and search it.

        An unreadable file (missing, no permission, undecodable) yields a
        ``READ_ERROR`` result.
        """
        file_path = Path(path)
        with trace_span("read") as span:
            try:
                text = file_path.read_bytes().decode(self._encoding)
            except (OSError, UnicodeDecodeError) as exc:
                logger.debug("Cannot read %s", file_path, exc_info=True)
                return ServiceResult.failure(
                    "search",
                    "READ_ERROR",
                    f"Cannot read {file_path}: {exc}",
                    {"path": str(file_path)},
                )
            if span is not None:
                span.annotate("chars", len(text))
        return self._scan(query, text, case_sensitive=case_sensitive, path=str(file_path))

    def _scan(
        self,
        query: str,
        text: str,
        *,
        case_sensitive: bool,
        path: str | None,
    ) -> ServiceResult:
        q = SearchQuery(pattern=query, case_sensitive=case_sensitive)
        matches = list(find_matches(q, text))
        return ServiceResult.success(
            "search",
            query=query,
            path=path,
            case_sensitive=case_sensitive,
            lines=[m.line for m in matches],
            matches=[{"line_number": m.line_number, "line": m.line} for m in matches],
            count=len(matches),
        )
