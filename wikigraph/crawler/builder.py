"""
Crawler Builder - Fluent API for building crawlers with features
"""

from typing import Optional
from .base import BaseCrawler
from ..error_handler import ErrorHandler, RetryConfig
from ..extraction.client import ExtractionService, ExtractionClientConfig, JigsawStackClient
from ..features.export_feature import ExportFeature
from ..graph_manager.crawl_config import CrawlConfig
from ..graph_manager.graph_mode import GraphMode
from ..utils.rate_limiter import PacingPolicy


class CrawlerBuilder:
    """Builder for creating crawlers with various features"""

    def __init__(self, seed_url: str):
        self.seed_url = seed_url
        self._max_depth = 2
        self._max_links_per_page = 3
        self._graph_mode = GraphMode.DEPTH_ADJACENCY
        self._page_delay = 3.0
        self._client: Optional[ExtractionService] = None
        self._pacing: Optional[PacingPolicy] = None
        self._retry_config: Optional[RetryConfig] = None
        self._log_manager = None
        self.features = []

    def max_depth(self, depth: int):
        """Set how many link hops away from the seed to crawl"""
        self._max_depth = depth
        return self

    def max_links_per_page(self, count: int):
        """Set how many links are followed from each page"""
        self._max_links_per_page = count
        return self

    def graph_mode(self, mode):
        """Choose how knowledge graph edges are inferred"""
        self._graph_mode = mode if isinstance(mode, GraphMode) else GraphMode(mode)
        return self

    def page_delay(self, seconds: float):
        self._page_delay = seconds
        return self

    def with_extraction_client(self, client: ExtractionService):
        """Use a specific extraction service instead of the JigsawStack default"""
        self._client = client
        return self

    def with_pacing(self, pacing: PacingPolicy):
        self._pacing = pacing
        return self

    def with_retries(self, max_attempts: int = 2, retry_delay: float = 5.0):
        self._retry_config = RetryConfig(max_attempts=max_attempts, retry_delay=retry_delay)
        return self

    def with_logging(self, log_manager):
        """Send per-page performance events to a LogManager"""
        self._log_manager = log_manager
        return self

    def with_export(self, enable: bool = True, output_dir: str = "wikigraph_data/crawls"):
        """Add JSON export of pages and graph"""
        if enable:
            self.features.append(ExportFeature(output_dir=output_dir))
        return self

    def build(self) -> BaseCrawler:
        """Build the configured crawler"""
        config = CrawlConfig(
            seed_url=self.seed_url,
            max_depth=self._max_depth,
            max_links_per_page=self._max_links_per_page,
            page_delay=self._page_delay,
            graph_mode=self._graph_mode
        )

        client = self._client or JigsawStackClient(ExtractionClientConfig.from_env())

        crawler = BaseCrawler(
            config,
            client,
            pacing=self._pacing,
            error_handler=ErrorHandler(self._retry_config) if self._retry_config else None,
            log_manager=self._log_manager
        )

        # Add all configured features
        for feature in self.features:
            crawler.add_feature(feature)

        return crawler
