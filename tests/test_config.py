"""
Configuration and Logging Tests
===============================
"""

import logging
from dataclasses import FrozenInstanceError

import pytest

from traceview.config import DEFAULT_CONFIG, FALLBACK_DAG_MAX_NUM_SERVICES, UIConfig
from traceview.logging_config import get_logger, setup_logging
from traceview.selectors.memo import TransformCell
from traceview.selectors.sort import SortKey


class TestUIConfig:

    def test_defaults(self):
        assert DEFAULT_CONFIG.dag_max_num_services == FALLBACK_DAG_MAX_NUM_SERVICES == 100
        assert DEFAULT_CONFIG.path_prefix == ""
        assert DEFAULT_CONFIG.default_sort is SortKey.MOST_RECENT

    def test_from_mapping(self):
        config = UIConfig.from_mapping({
            'dependencies': {'dagMaxNumServices': 25},
            'pathPrefix': '/jaeger/',
            'search': {'defaultSort': 'MOST_SPANS'},
        })

        assert config.dag_max_num_services == 25
        assert config.path_prefix == '/jaeger'
        assert config.default_sort is SortKey.MOST_SPANS

    @pytest.mark.parametrize("raw", [None, {}, {'dependencies': None}, {'dependencies': {'dagMaxNumServices': 0}}])
    def test_missing_values_fall_back(self, raw):
        config = UIConfig.from_mapping(raw)

        assert config == DEFAULT_CONFIG

    def test_unknown_sort_falls_back(self):
        assert UIConfig.from_mapping({'search': {'defaultSort': 'NOPE'}}).default_sort is SortKey.MOST_RECENT

    def test_rejects_non_positive_threshold(self):
        with pytest.raises(ValueError):
            UIConfig(dag_max_num_services=-5)

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.path_prefix = "/x"


class TestLogging:

    def test_setup_logging_sets_package_level(self):
        setup_logging("warning")

        assert logging.getLogger("traceview").level == logging.WARNING

    def test_recompute_logged_at_debug(self, caplog):
        setup_logging("DEBUG")
        # caplog attaches to the root logger
        logging.getLogger("traceview").propagate = True
        cell = TransformCell(lambda x: x, name="probe")
        arg = object()

        with caplog.at_level(logging.DEBUG, logger="traceview"):
            cell(arg)
            cell(arg)

        messages = [r.getMessage() for r in caplog.records if r.name.startswith("traceview")]
        assert messages == ["recomputing probe"]

    def test_get_logger(self):
        assert get_logger("traceview.x").name == "traceview.x"
