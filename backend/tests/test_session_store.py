from app.models.domain import Coordinate, HotelSearchResult, HotelSource, ResolvedLocation, SearchState
from app.storage.session_store import InMemorySessionStore
from app.tools.hotel_tool import SyntheticAggregator

FIRST = ResolvedLocation(coordinate=Coordinate(51.5074, -0.1278), display_address="London")
SECOND = ResolvedLocation(coordinate=Coordinate(48.8566, 2.3522), display_address="Paris")


def _result(location: ResolvedLocation, seed: int) -> HotelSearchResult:
    hotels = SyntheticAggregator(roster_size=8, seed=seed).find_hotels(location, 2000)
    return HotelSearchResult(hotels=tuple(hotels), source=HotelSource.synthetic)


def test_session_walks_idle_searching_results():
    session = InMemorySessionStore().get_or_create()
    assert session.state == SearchState.idle

    token = session.begin()
    assert session.state == SearchState.searching

    assert session.complete(token, FIRST, _result(FIRST, 1))
    snapshot = session.snapshot()
    assert snapshot.state == SearchState.results
    assert snapshot.location == FIRST
    assert len(snapshot.result.hotels) == 8


def test_last_search_wins_when_first_finishes_late():
    session = InMemorySessionStore().get_or_create()
    first_token = session.begin()
    second_token = session.begin()
    second_result = _result(SECOND, 2)

    assert session.complete(second_token, SECOND, second_result)
    assert not session.complete(first_token, FIRST, _result(FIRST, 1))

    snapshot = session.snapshot()
    assert snapshot.location == SECOND
    assert snapshot.result is second_result
    assert all("Near Paris" in h.address for h in snapshot.result.hotels)


def test_stale_failure_does_not_clobber_newer_search():
    session = InMemorySessionStore().get_or_create()
    first_token = session.begin()
    second_token = session.begin()
    assert not session.fail(first_token, "old failure")
    assert session.state == SearchState.searching
    assert session.complete(second_token, SECOND, _result(SECOND, 2))
    assert session.snapshot().notice is None


def test_failure_returns_to_idle_or_keeps_previous_results():
    session = InMemorySessionStore().get_or_create()
    token = session.begin()
    assert session.fail(token, "Could not find that place")
    assert session.state == SearchState.idle
    assert session.notice == "Could not find that place"

    token = session.begin()
    session.complete(token, FIRST, _result(FIRST, 1))
    token = session.begin()
    session.fail(token, "Could not find that place")
    assert session.state == SearchState.results
    assert session.snapshot().location == FIRST


def test_store_reuses_and_deletes_sessions():
    store = InMemorySessionStore()
    session = store.get_or_create()
    assert store.get_or_create(session.session_id) is session
    assert store.get_or_create("unknown-id").session_id == "unknown-id"
    assert store.delete(session.session_id)
    assert store.get(session.session_id) is None
    assert not store.delete(session.session_id)


def test_store_evicts_least_recently_used_past_cap():
    store = InMemorySessionStore(max_sessions=3)
    first = store.get_or_create("a")
    store.get_or_create("b")
    store.get_or_create("c")

    assert store.get("a") is first
    store.get_or_create("d")
    store.get_or_create("e")

    assert len(store.sessions) == 3
    assert set(store.sessions) == {"a", "d", "e"}
    assert store.get("b") is None
    assert store.get("c") is None
