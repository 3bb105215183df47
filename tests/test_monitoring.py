"""
Tests for metrics collection and log setup
"""

import json
import logging
import pytest
from wikigraph.monitoring import LogManager, MetricsCollector


@pytest.fixture
def restore_logging():
    root_logger = logging.getLogger()
    handlers, level = list(root_logger.handlers), root_logger.level
    yield
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    perf_logger = logging.getLogger('performance')
    for handler in perf_logger.handlers:
        handler.close()
    perf_logger.handlers.clear()


def test_metrics_track_pages_errors_and_skips():
    metrics = MetricsCollector()

    metrics.record_page_collected("https://en.wikipedia.org/wiki/A", depth=0, extraction_time=1.0)
    metrics.record_page_collected("https://en.wikipedia.org/wiki/B", depth=1, extraction_time=3.0)
    metrics.record_error("https://en.wikipedia.org/wiki/C", "http_server_error")
    metrics.record_skipped("https://en.wikipedia.org/wiki/A", "visited")
    metrics.record_links_enqueued(2)

    snapshot = metrics.get_current_snapshot()
    crawl = snapshot['crawl_metrics']

    assert crawl['pages_collected'] == 2
    assert crawl['errors_count'] == 1
    assert crawl['pages_skipped'] == 1
    assert crawl['links_enqueued'] == 2
    assert crawl['max_depth_reached'] == 1
    assert crawl['avg_extraction_time'] == pytest.approx(2.0)
    assert crawl['success_rate'] == pytest.approx(200 / 3)
    assert snapshot['pages_per_depth'] == {0: 1, 1: 1}
    assert snapshot['skip_reasons'] == {'visited': 1}
    assert 'memory_percent' in snapshot['system_metrics']


def test_log_manager_writes_files(tmp_path, restore_logging):
    log_manager = LogManager(log_dir=str(tmp_path), log_level="INFO")

    log_manager.log_performance_event('page_collected', url="https://en.wikipedia.org/wiki/A", depth=0)
    export_path = log_manager.export_metrics_json({'pages': 1}, "final.json")

    for handler in log_manager.perf_logger.handlers:
        handler.flush()

    perf_files = list(tmp_path.glob("performance_*.log"))
    assert len(perf_files) == 1
    event = json.loads(perf_files[0].read_text(encoding="utf-8").strip())
    assert event['event_type'] == "page_collected"
    assert event['depth'] == 0

    assert json.loads(export_path.read_text(encoding="utf-8")) == {'pages': 1}
    assert list(tmp_path.glob("crawler_*.log"))
