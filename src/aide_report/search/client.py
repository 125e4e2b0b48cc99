"""Search backend adapter for the aggregation queries."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from elasticsearch import ApiError, Elasticsearch, TransportError

from ..config import Settings
from ..errors import SearchError
from .queries import AggregationQuery

logger = logging.getLogger(__name__)


class SearchClient:
    """Synchronous client that runs one aggregation query per call."""

    def __init__(
        self,
        settings: Settings,
        client: Optional[Elasticsearch] = None,
    ) -> None:
        self._indices: List[str] = settings.search_indices_list
        self._time_zone = settings.search_time_zone
        if client is None:
            kwargs: Dict[str, Any] = {
                "hosts": settings.search_hosts_list,
                "verify_certs": settings.search_verify_certs,
                "request_timeout": settings.search_timeout_seconds,
            }
            if settings.search_user:
                kwargs["basic_auth"] = (
                    settings.search_user,
                    settings.search_password or "",
                )
            try:
                client = Elasticsearch(**kwargs)
            except (TypeError, ValueError) as exc:
                raise SearchError(
                    f"cannot configure search client for {settings.search_url!r}: {exc}"
                ) from exc
        self._client = client

    @property
    def indices(self) -> List[str]:
        return list(self._indices)

    def close(self) -> None:
        self._client.close()

    def execute(self, query: AggregationQuery) -> bytes:
        """Run *query* against the report indices and return the raw body.

        Transport and backend errors are raised as :class:`SearchError`;
        nothing is retried.
        """
        logger.info("Querying database for %s (indices=%s)", query.name, self._indices)
        try:
            response = self._client.search(
                index=self._indices,
                **query.to_body(self._time_zone),
            )
        except (ApiError, TransportError) as exc:
            raise SearchError(f"search for {query.name} failed: {exc}") from exc

        body = getattr(response, "body", response)
        try:
            raw = json.dumps(body).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise SearchError(
                f"unreadable response body for {query.name}: {exc}"
            ) from exc
        logger.info("Response received for %s (%d bytes)", query.name, len(raw))
        return raw
