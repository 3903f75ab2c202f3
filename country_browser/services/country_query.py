"""
Query layer for the countries GraphQL service.

- ``CountryQueryClient`` runs the one fixed query through ``gql`` over the
  httpx transport and turns the payload into ``Country`` records.
- ``QueryResult`` is what the page stores: exactly one of loading, error or
  ready, tagged with the mount token of the page load that asked for it.
- ``run_country_query`` is the callback-facing entrypoint. It never raises
  for a failed fetch; the failure becomes the terminal error state.

There are no retries: a failed fetch stays failed for that page load.
"""

from __future__ import annotations

import enum
import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx
from gql import Client, gql
from gql.transport.exceptions import TransportError
from gql.transport.httpx import HTTPXTransport
from graphql import GraphQLError

from country_browser.core.country import Country, countries_from_records, countries_to_records
from country_browser.core.exceptions import CountryQueryError

logger = logging.getLogger(__name__)

COUNTRIES_QUERY = """
{
  countries {
    capital
    currency
    name
    native
    emoji
    languages {
      code
      name
    }
  }
}
"""


def new_mount_id() -> str:
    """Token identifying one page load."""
    return f"mount-{uuid.uuid4().hex[:12]}"


class QueryStatus(str, enum.Enum):
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


@dataclass
class QueryResult:
    status: QueryStatus
    mount_id: Optional[str] = None
    countries: List[Country] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def loading(cls, mount_id: Optional[str]) -> QueryResult:
        return cls(status=QueryStatus.LOADING, mount_id=mount_id)

    @classmethod
    def ready(cls, mount_id: Optional[str], countries: List[Country]) -> QueryResult:
        return cls(status=QueryStatus.READY, mount_id=mount_id, countries=list(countries))

    @classmethod
    def failed(cls, mount_id: Optional[str], message: str) -> QueryResult:
        return cls(status=QueryStatus.ERROR, mount_id=mount_id, error=message)

    @property
    def is_ready(self) -> bool:
        return self.status == QueryStatus.READY

    def belongs_to(self, mount_id: Optional[str]) -> bool:
        """False for results of an earlier, abandoned page load."""
        return self.mount_id is not None and self.mount_id == mount_id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "mount_id": self.mount_id,
            "countries": countries_to_records(self.countries),
            "error": self.error,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional[QueryResult]:
        if not data:
            return None
        return cls(
            status=QueryStatus(data.get("status", QueryStatus.LOADING.value)),
            mount_id=data.get("mount_id"),
            countries=countries_from_records(data.get("countries")),
            error=data.get("error"),
        )


@dataclass
class CountryQueryClient:
    """
    Fetches the full country list in one round trip.

    Args:
        endpoint: GraphQL endpoint URL.
        timeout: Request timeout in seconds (default 10.0).
        cache_results: Reuse the last successful result for the life of this
            client instead of asking the service again (default False). The
            app builds one client per process, so this is shared by all
            page loads.
        session: Anything with a gql-style ``execute(document)``. When None a
            ``gql.Client`` over ``HTTPXTransport`` is built per fetch.
    """

    endpoint: str
    timeout: float = 10.0
    cache_results: bool = False
    session: Any = None

    _cache: Optional[List[Country]] = field(default=None, init=False, repr=False)

    def _build_session(self) -> Client:
        transport = HTTPXTransport(url=self.endpoint, timeout=self.timeout)
        return Client(transport=transport, fetch_schema_from_transport=False)

    def clear_cache(self) -> None:
        self._cache = None

    def fetch_countries(self) -> List[Country]:
        """
        Run the countries query.

        :raises CountryQueryError: on network, transport or GraphQL errors,
            with the service's message as the exception text.
        """
        if self.cache_results and self._cache is not None:
            logger.debug("Serving countries from cache", extra={"n_countries": len(self._cache)})
            return list(self._cache)

        session = self.session if self.session is not None else self._build_session()

        logger.info("Fetching countries", extra={"endpoint": self.endpoint})
        try:
            result = session.execute(gql(COUNTRIES_QUERY))
        except (TransportError, GraphQLError, httpx.HTTPError) as e:
            raise CountryQueryError(str(e)) from e

        records = result.get("countries") if isinstance(result, dict) else None
        if not isinstance(records, list):
            raise CountryQueryError("Malformed response: 'countries' list missing")

        try:
            countries = countries_from_records(records)
        except (AttributeError, TypeError) as e:
            # e.g. a null element in countries[] or languages[]
            raise CountryQueryError(f"Malformed response: {e}") from e
        logger.info("Fetched countries", extra={"n_countries": len(countries)})

        if self.cache_results:
            self._cache = list(countries)
        return countries


def run_country_query(client: CountryQueryClient, mount_id: Optional[str]) -> QueryResult:
    try:
        countries = client.fetch_countries()
    except CountryQueryError as e:
        logger.error(
            "Country query failed",
            extra={"mount_id": mount_id, "error": str(e)},
        )
        return QueryResult.failed(mount_id, str(e))
    return QueryResult.ready(mount_id, countries)
