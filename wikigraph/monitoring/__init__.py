"""
Monitoring and observability modules
"""

from .metrics_collector import MetricsCollector
from .log_manager import LogManager
from .crawl_metrics import CrawlMetrics
from .system_metrics import SystemMetrics
from .crawl_report import print_crawl_report

__all__ = [
    'MetricsCollector',
    'LogManager',
    'CrawlMetrics',
    'SystemMetrics',
    'print_crawl_report'
]
