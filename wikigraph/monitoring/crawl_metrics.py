from dataclasses import dataclass


@dataclass
class CrawlMetrics:
    """Core crawling metrics"""
    pages_collected: int = 0
    pages_skipped: int = 0
    errors_count: int = 0
    retries: int = 0
    links_enqueued: int = 0
    queue_depth: int = 0
    max_depth_reached: int = 0
    success_rate: float = 0.0
    avg_extraction_time: float = 0.0
