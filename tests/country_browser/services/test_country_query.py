from __future__ import annotations

import httpx
import pytest
from gql.transport.exceptions import TransportQueryError, TransportServerError

from country_browser.core.country import Country
from country_browser.core.exceptions import CountryQueryError
from country_browser.services.country_query import (
    COUNTRIES_QUERY,
    CountryQueryClient,
    QueryResult,
    QueryStatus,
    new_mount_id,
    run_country_query,
)

PAYLOAD = {
    "countries": [
        {
            "capital": "N'Djamena",
            "currency": "XAF",
            "name": "Chad",
            "native": "Tchad",
            "emoji": "🇹🇩",
            "languages": [{"code": "fr", "name": "French"}],
        },
        {
            "capital": None,
            "currency": None,
            "name": "Antarctica",
            "native": "Antarctica",
            "emoji": "🇦🇶",
            "languages": [],
        },
    ]
}


class _DummySession:
    def __init__(self, result=None, error: Exception | None = None):
        self.result = result
        self.error = error
        self.calls = 0
        self.last_document = None

    def execute(self, document):
        self.calls += 1
        self.last_document = document
        if self.error is not None:
            raise self.error
        return self.result


def _client(session, cache_results=True) -> CountryQueryClient:
    return CountryQueryClient(
        endpoint="http://test/graphql",
        cache_results=cache_results,
        session=session,
    )


def test_query_requests_every_consumed_field():
    for name in ("capital", "currency", "name", "native", "emoji", "languages", "code"):
        assert name in COUNTRIES_QUERY


def test_fetch_countries_parses_payload():
    session = _DummySession(result=PAYLOAD)

    countries = _client(session).fetch_countries()

    assert [c.name for c in countries] == ["Chad", "Antarctica"]
    assert countries[1].capital is None
    assert session.calls == 1


def test_fetch_is_cached_when_enabled():
    session = _DummySession(result=PAYLOAD)
    client = _client(session)

    client.fetch_countries()
    client.fetch_countries()
    assert session.calls == 1

    client.clear_cache()
    client.fetch_countries()
    assert session.calls == 2


def test_fetch_not_cached_when_disabled():
    session = _DummySession(result=PAYLOAD)
    client = _client(session, cache_results=False)

    client.fetch_countries()
    client.fetch_countries()

    assert session.calls == 2


@pytest.mark.parametrize(
    "error",
    [
        TransportQueryError("Cannot query field 'foo'"),
        TransportServerError("502 Server Error", code=502),
        httpx.ConnectError("Connection refused"),
    ],
)
def test_transport_failures_become_query_errors(error):
    client = _client(_DummySession(error=error))

    with pytest.raises(CountryQueryError) as excinfo:
        client.fetch_countries()

    assert str(error) in str(excinfo.value)


def test_malformed_payload_is_query_error():
    client = _client(_DummySession(result={"continents": []}))

    with pytest.raises(CountryQueryError, match="Malformed"):
        client.fetch_countries()


def test_failed_fetch_is_not_cached():
    session = _DummySession(error=TransportQueryError("boom"))
    client = _client(session)

    with pytest.raises(CountryQueryError):
        client.fetch_countries()

    session.error = None
    session.result = PAYLOAD
    assert len(client.fetch_countries()) == 2


def test_run_country_query_ready_state():
    mount = new_mount_id()
    result = run_country_query(_client(_DummySession(result=PAYLOAD)), mount)

    assert result.status == QueryStatus.READY
    assert result.is_ready
    assert result.belongs_to(mount)
    assert len(result.countries) == 2
    assert result.error is None


def test_run_country_query_error_state_keeps_message_verbatim():
    mount = new_mount_id()
    client = _client(_DummySession(error=TransportQueryError("Service unavailable")))

    result = run_country_query(client, mount)

    assert result.status == QueryStatus.ERROR
    assert result.error == "Service unavailable"
    assert result.countries == []


def test_query_result_dict_roundtrip():
    result = QueryResult.ready("mount-1", [Country.from_dict(r) for r in PAYLOAD["countries"]])

    rebuilt = QueryResult.from_dict(result.to_dict())

    assert rebuilt == result


def test_results_from_another_mount_are_foreign():
    result = QueryResult.loading("mount-old")

    assert not result.belongs_to("mount-new")
    assert not QueryResult.loading(None).belongs_to(None)


def test_mount_ids_are_unique():
    assert new_mount_id() != new_mount_id()


def test_from_dict_none():
    assert QueryResult.from_dict(None) is None


def test_shipped_config_queries_once_per_page_load():
    from pathlib import Path

    from country_browser.config.loader import load_global_config

    cfg = load_global_config(Path(__file__).resolve().parents[3] / "config")
    session = _DummySession(result=PAYLOAD)
    client = CountryQueryClient(
        endpoint=cfg.endpoint,
        timeout=cfg.request_timeout,
        cache_results=cfg.cache_results,
        session=session,
    )

    first = run_country_query(client, new_mount_id())
    second = run_country_query(client, new_mount_id())

    assert first.is_ready and second.is_ready
    assert session.calls == 2


def test_client_does_not_cache_by_default():
    session = _DummySession(result=PAYLOAD)
    client = CountryQueryClient(endpoint="http://test/graphql", session=session)

    client.fetch_countries()
    client.fetch_countries()

    assert session.calls == 2


@pytest.mark.parametrize(
    "records",
    [
        [None],
        ["Chad"],
        [dict(PAYLOAD["countries"][0], languages=[None])],
    ],
)
def test_malformed_country_records_reach_error_state(records):
    client = _client(_DummySession(result={"countries": records}))

    with pytest.raises(CountryQueryError, match="Malformed"):
        client.fetch_countries()

    result = run_country_query(client, new_mount_id())
    assert result.status == QueryStatus.ERROR
    assert result.error.startswith("Malformed response")
