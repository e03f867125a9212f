"""
Store Mapper Tests
==================

Raw nested store documents -> immutable snapshots.
"""

import pytest

from traceview.config import UIConfig
from traceview.mapper import StoreMapper
from traceview.presentation import SearchPageSelector
from traceview.selectors.sort import SortKey
from traceview.state import CatalogStatus, FetchedState, FetchErrorKind


def raw_trace(trace_id, duration, start_time=0, spans=1):
    return {
        'traceID': trace_id,
        'spans': [{'spanID': f"{trace_id}-{i}"} for i in range(spans)],
        'processes': {'p1': {'serviceName': 'api'}},
        'duration': duration,
        'startTime': start_time,
        'traceName': f"api: GET /{trace_id}",
    }


@pytest.fixture
def raw_store():
    return {
        'trace': {
            'traces': {
                't1': {'id': 't1', 'state': 'DONE', 'data': raw_trace('t1', 40)},
                't2': {'id': 't2', 'state': 'DONE', 'data': raw_trace('t2', 70)},
                't3': {'id': 't3', 'state': 'LOADING'},
            },
            'search': {'results': ['t1', 't2'], 'state': 'DONE', 'error': None},
        },
        'traceDiff': {'cohort': ['t2', 't3', 't9']},
        'services': {
            'loading': False,
            'services': ['api', 'db'],
            'operationsForService': {'api': ['GET /']},
            'error': None,
        },
        'dependencies': {
            'dependencies': [{'parent': 'api', 'child': 'db', 'callCount': 12}],
            'loading': False,
            'error': None,
        },
        'router': {'location': {'pathname': '/search', 'search': '?service=api'}},
        'sortBy': 'LONGEST_FIRST',
    }


class TestStoreMapper:

    def test_maps_whole_store(self, raw_store):
        snapshot = StoreMapper().map_store(raw_store)

        assert snapshot.trace.search.results == ('t1', 't2')
        assert snapshot.trace.search.state is FetchedState.DONE
        assert snapshot.trace.traces['t1'].data.duration == 40
        assert snapshot.trace.traces['t1'].data.span_count == 1
        assert snapshot.trace.traces['t3'].data is None
        assert snapshot.trace_diff.cohort == ('t2', 't3', 't9')
        assert snapshot.services.status is CatalogStatus.LOADED
        assert snapshot.services.operations_for_service == {'api': ('GET /',)}
        assert snapshot.dependencies.dependencies[0].call_count == 12
        assert snapshot.router.search == '?service=api'
        assert snapshot.sort_by == 'LONGEST_FIRST'

    def test_unchanged_raw_slices_keep_identity(self, raw_store):
        mapper = StoreMapper()
        first = mapper.map_store(raw_store)
        second = mapper.map_store(dict(raw_store, sortBy='MOST_RECENT'))

        assert second.trace is first.trace
        assert second.services is first.services

    def test_changed_raw_slice_is_remapped(self, raw_store):
        mapper = StoreMapper()
        first = mapper.map_store(raw_store)
        second = mapper.map_store(dict(raw_store, services={'loading': True}))

        assert second.trace is first.trace
        assert second.services is not first.services
        assert second.services.status is CatalogStatus.UNLOADED

    def test_errors_become_fetch_errors(self):
        mapper = StoreMapper()
        services = mapper.map_services_state({'error': {'message': 'boom', 'httpStatus': 503}})
        deps = mapper.map_dependencies_state({'error': 'timeout'})

        assert services.error.kind is FetchErrorKind.SERVICE_FETCH
        assert services.error.http_status == 503
        assert str(services.error) == "boom (HTTP 503)"
        assert deps.error.kind is FetchErrorKind.DEPENDENCY_FETCH
        assert str(deps.error) == "timeout"

    def test_unknown_state_fails_fast(self):
        with pytest.raises(ValueError, match="Unknown fetched state"):
            StoreMapper().map_trace_state({'search': {'state': 'PENDING'}})

    @pytest.mark.parametrize("state", [2, ['DONE'], {'state': 'DONE'}])
    def test_non_string_state_fails_fast(self, state):
        with pytest.raises(ValueError, match="Unknown fetched state"):
            StoreMapper().map_trace_state({'search': {'state': state}})

    def test_empty_raw_slice_keeps_identity(self):
        mapper = StoreMapper()
        services = {}

        first = mapper.map_store({'services': services})
        second = mapper.map_store({'services': services})

        assert second.services is first.services

    def test_absent_slices_keep_identity(self):
        mapper = StoreMapper()

        first = mapper.map_store({})
        second = mapper.map_store({'sortBy': 'MOST_SPANS'})

        assert second.trace is first.trace
        assert second.trace_diff is first.trace_diff
        assert second.dependencies is first.dependencies

    def test_missing_sort_left_empty(self):
        assert StoreMapper().map_store({}).sort_by == ""

    def test_missing_services_stay_unloaded(self):
        state = StoreMapper().map_services_state({})

        assert state.services is None

    def test_empty_store(self):
        snapshot = StoreMapper().map_store({})

        assert snapshot.trace.search.results == ()
        assert snapshot.dependencies.dependencies is None
        assert snapshot.router.search == ''


def test_mapped_store_feeds_search_page(raw_store):
    props = SearchPageSelector()(StoreMapper().map_store(raw_store))

    assert [t.trace_id for t in props.trace_results] == ['t2', 't1']
    assert props.max_trace_duration == 70
    assert [(e.id, e.state) for e in props.diff_cohort] == [
        ('t2', FetchedState.DONE), ('t3', FetchedState.LOADING), ('t9', None)
    ]
    assert not props.is_homepage


def test_mapped_store_without_sort_uses_configured_default(raw_store):
    del raw_store['sortBy']
    selector = SearchPageSelector(UIConfig(default_sort=SortKey.SHORTEST_FIRST))

    props = selector(StoreMapper().map_store(raw_store))

    assert props.sort_traces_by == 'SHORTEST_FIRST'
    assert [t.trace_id for t in props.trace_results] == ['t1', 't2']
