"""
Base Crawler - Breadth-first, depth-bounded crawl driven by the extraction service
"""

import time
import logging
from typing import List, Optional
from .result import PageRecord, UNKNOWN_TITLE, NO_INTRODUCTION, NO_TEXT, utc_timestamp
from ..error_handler import ErrorHandler
from ..extraction.client import ExtractionError, ExtractionService
from ..extraction.models import ExtractionRequest, ExtractionResponse, WaitCondition, LoadOptions
from ..graph_manager.crawl_config import CrawlConfig
from ..graph_manager.frontier import FrontierQueue
from ..graph_manager.knowledge_graph import KnowledgeGraph, build_knowledge_graph
from ..graph_manager.link_info import FrontierEntry
from ..graph_manager.link_prioritizer import LinkPrioritizer
from ..monitoring.metrics_collector import MetricsCollector
from ..utils.rate_limiter import PacingPolicy, FixedDelayPacing
from ..utils.text import subject_from_url, truncate_preview

logger = logging.getLogger(__name__)


class BaseCrawler:
    """
    Processes one frontier entry at a time: fetch through the extraction
    service, record the page, queue its best links one level deeper, pause.
    Features are added via composition using the builder pattern.
    """

    def __init__(self, config: CrawlConfig, extraction_client: ExtractionService,
                 pacing: Optional[PacingPolicy] = None,
                 error_handler: Optional[ErrorHandler] = None,
                 metrics_collector: Optional[MetricsCollector] = None,
                 log_manager=None):
        self.config = config
        self.extraction_client = extraction_client
        self.pacing = pacing or FixedDelayPacing(delay=config.page_delay)
        self.error_handler = error_handler or ErrorHandler()
        self.metrics_collector = metrics_collector or MetricsCollector()
        self.log_manager = log_manager
        self.prioritizer = LinkPrioritizer(config)
        self.features = []

        self.visited = set()
        self.frontier = FrontierQueue()
        self.results: List[PageRecord] = []

    def add_feature(self, feature):
        """Add a feature to this crawler"""
        self.features.append(feature)
        return self

    async def crawl(self) -> List[PageRecord]:
        """Crawl from the seed until the frontier is empty"""
        self.visited = set()
        self.frontier = FrontierQueue([FrontierEntry(url=self.config.seed_url, depth=0)])
        self.results = []
        self.error_handler.reset()
        self.metrics_collector.reset()

        logger.info(f"🌿 Starting crawl from: {self.config.seed_url} "
                    f"(max_depth={self.config.max_depth}, max_links={self.config.max_links_per_page})")

        async with self.extraction_client:
            for feature in self.features:
                await feature.initialize(self)

            for feature in self.features:
                await feature.before_crawl(self)

            try:
                await self._crawl_loop()
            finally:
                for feature in self.features:
                    await feature.finalize(self)

        logger.info(f"✅ Crawl finished: {len(self.results)} pages collected, "
                    f"{len(self.error_handler.get_failed_urls())} failed")
        return self.results

    def build_knowledge_graph(self, mode=None) -> KnowledgeGraph:
        """Derive the knowledge graph from the pages collected so far"""
        return build_knowledge_graph(self.results, mode or self.config.graph_mode)

    def _skip_reason(self, entry: FrontierEntry) -> Optional[str]:
        if entry.url in self.visited:
            return "visited"
        if entry.depth > self.config.max_depth:
            return "too_deep"
        if not self.config.is_eligible(entry.url):
            return "ineligible"
        return None

    async def _crawl_loop(self):
        """Drain the frontier in FIFO order"""
        while self.frontier:
            entry = self.frontier.dequeue()
            self.metrics_collector.update_queue_depth(len(self.frontier))

            reason = self._skip_reason(entry)
            if reason:
                if reason == "ineligible":
                    logger.info(f"Skipping non-article URL: {entry.url}")
                else:
                    logger.debug(f"Skipping {entry.url}: {reason}")
                self.metrics_collector.record_skipped(entry.url, reason)
                continue

            self.visited.add(entry.url)
            logger.info(f"Crawling (depth {entry.depth}): {entry.url}")

            await self._process_entry(entry)

    async def _process_entry(self, entry: FrontierEntry):
        start_time = time.time()
        self.pacing.mark_request()
        try:
            response = await self.extraction_client.scrape(self._build_request(entry.url))
        except ExtractionError as error:
            self._record_failure(entry, error, attempt=1)
            await self._retry_entry(entry)
            return

        record = self._build_record(entry, response)
        await self._collect(record, time.time() - start_time)

        if entry.depth < self.config.max_depth:
            links = self.prioritizer.select_links(
                response.links,
                current_url=entry.url,
                title=record.title,
                depth=entry.depth,
                limit=self.config.max_links_per_page
            )

            added = self.frontier.extend(links)
            self.metrics_collector.record_links_enqueued(added)

            logger.info(f"🔗 Following {added} links from this article")
            for link in links:
                logger.debug(f"  - {link.url}")

            await self.pacing.wait()

    async def _retry_entry(self, entry: FrontierEntry):
        """Give a failed page further attempts with the reduced request"""
        attempt = 1
        while self.error_handler.should_retry(entry.depth, attempt):
            attempt += 1
            logger.info(f"Retrying {entry.url} with simplified parameters (attempt {attempt})")
            self.metrics_collector.record_retry(entry.url)
            await self.pacing.backoff(self.error_handler.retry_config.retry_delay)

            start_time = time.time()
            self.pacing.mark_request()
            try:
                response = await self.extraction_client.scrape(self._build_retry_request(entry.url))
            except ExtractionError as error:
                self._record_failure(entry, error, attempt=attempt)
                continue

            options = self.config.extraction
            text = response.value(options.text_prompt, NO_TEXT)
            record = PageRecord(
                url=entry.url,
                title=response.value(options.title_prompt, UNKNOWN_TITLE),
                introduction=truncate_preview(text, self.config.preview_length),
                key_concepts="",
                subject=subject_from_url(entry.url),
                depth=entry.depth,
                crawl_timestamp=utc_timestamp(),
                is_retry=True,
                source_url=entry.source_url,
                source_title=entry.source_title
            )

            self.error_handler.record_recovery(entry.url)
            await self._collect(record, time.time() - start_time)
            logger.info(f"Successfully retrieved content on retry for {entry.url}")
            return

        if attempt > 1:
            logger.error(f"Retry also failed for {entry.url}, page dropped")

    def _record_failure(self, entry: FrontierEntry, error: ExtractionError, attempt: int):
        error_info = self.error_handler.record_failure(entry.url, error, attempt=attempt, depth=entry.depth)
        self.metrics_collector.record_error(entry.url, error_info.error_type.value)

    async def _collect(self, record: PageRecord, extraction_time: float):
        """Store a finished page and hand it to the features"""
        self.results.append(record)
        self.metrics_collector.record_page_collected(record.url, record.depth, extraction_time)

        if self.log_manager:
            self.log_manager.log_performance_event(
                'page_collected',
                url=record.url,
                depth=record.depth,
                extraction_time=round(extraction_time, 3),
                is_retry=record.is_retry
            )

        for feature in self.features:
            await feature.process_page(record, self)

    def _build_request(self, url: str) -> ExtractionRequest:
        options = self.config.extraction
        return ExtractionRequest(
            url=url,
            prompts=options.prompts,
            wait_for=WaitCondition(mode="selector", value=options.content_selector),
            load_options=LoadOptions(
                timeout_ms=options.load_timeout_ms,
                navigation_mode=options.navigation_mode
            )
        )

    def _build_retry_request(self, url: str) -> ExtractionRequest:
        options = self.config.extraction
        return ExtractionRequest(
            url=url,
            prompts=options.retry_prompts,
            load_options=LoadOptions(timeout_ms=options.retry_timeout_ms)
        )

    def _build_record(self, entry: FrontierEntry, response: ExtractionResponse) -> PageRecord:
        options = self.config.extraction
        return PageRecord(
            url=entry.url,
            title=response.value(options.title_prompt, UNKNOWN_TITLE),
            introduction=response.value(options.introduction_prompt, NO_INTRODUCTION),
            key_concepts=response.value(options.key_concepts_prompt, ""),
            subject=subject_from_url(entry.url),
            depth=entry.depth,
            crawl_timestamp=utc_timestamp(),
            source_url=entry.source_url,
            source_title=entry.source_title
        )
