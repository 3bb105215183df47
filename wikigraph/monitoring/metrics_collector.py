import time
import logging
from datetime import datetime
from dataclasses import asdict
from typing import Dict, Any
from collections import deque, defaultdict
import psutil
from .crawl_metrics import CrawlMetrics
from .system_metrics import SystemMetrics

logger = logging.getLogger(__name__)


class MetricsCollector:
    """Counts what happened to every frontier entry during a crawl"""

    def __init__(self):
        self.reset()

    def reset(self):
        """Start counting a new run from zero"""
        self.start_time = time.time()

        self.crawl_metrics = CrawlMetrics()
        self.system_metrics = SystemMetrics()

        self.extraction_times: deque = deque(maxlen=100)
        self.pages_per_depth: Dict[int, int] = defaultdict(int)
        self.skip_reasons: Dict[str, int] = defaultdict(int)

    def record_page_collected(self, url: str, depth: int, extraction_time: float):
        """Record a page that produced a PageRecord"""
        self.crawl_metrics.pages_collected += 1
        self.crawl_metrics.max_depth_reached = max(self.crawl_metrics.max_depth_reached, depth)
        self.pages_per_depth[depth] += 1
        self.extraction_times.append(extraction_time)
        self._update_calculated_metrics()

    def record_skipped(self, url: str, reason: str):
        """Record a dequeued URL that was not fetched"""
        self.crawl_metrics.pages_skipped += 1
        self.skip_reasons[reason] += 1

    def record_error(self, url: str, error_type: str):
        """Record a failed extraction attempt"""
        self.crawl_metrics.errors_count += 1
        self._update_calculated_metrics()

    def record_retry(self, url: str):
        self.crawl_metrics.retries += 1

    def record_links_enqueued(self, count: int):
        self.crawl_metrics.links_enqueued += count

    def update_queue_depth(self, depth: int):
        self.crawl_metrics.queue_depth = depth

    def collect_system_metrics(self):
        """Collect current system resource metrics"""
        try:
            self.system_metrics.cpu_percent = psutil.cpu_percent(interval=None)
            memory = psutil.virtual_memory()
            self.system_metrics.memory_used_mb = memory.used / (1024 * 1024)
            self.system_metrics.memory_percent = memory.percent
            self.system_metrics.process_rss_mb = psutil.Process().memory_info().rss / (1024 * 1024)
        except (psutil.NoSuchProcess, psutil.AccessDenied) as e:
            logger.warning(f"Failed to collect system metrics: {e}")

    def _update_calculated_metrics(self):
        attempts = self.crawl_metrics.pages_collected + self.crawl_metrics.errors_count
        if attempts > 0:
            self.crawl_metrics.success_rate = (self.crawl_metrics.pages_collected / attempts) * 100

        if self.extraction_times:
            self.crawl_metrics.avg_extraction_time = sum(self.extraction_times) / len(self.extraction_times)

    def get_current_snapshot(self) -> Dict[str, Any]:
        """Get current metrics snapshot"""
        self.collect_system_metrics()

        return {
            'timestamp': datetime.now().isoformat(),
            'uptime_seconds': time.time() - self.start_time,
            'crawl_metrics': asdict(self.crawl_metrics),
            'system_metrics': asdict(self.system_metrics),
            'pages_per_depth': dict(self.pages_per_depth),
            'skip_reasons': dict(self.skip_reasons)
        }
