"""
Export Feature - Saves collected pages and the knowledge graph as JSON
"""

import logging
from .base import CrawlerFeature
from ..storage import ResultStorage

logger = logging.getLogger(__name__)


class ExportFeature(CrawlerFeature):
    """Feature for writing crawl results to disk"""

    def __init__(self, output_dir: str = "wikigraph_data/crawls"):
        self.storage = ResultStorage(base_path=output_dir)
        self.exported_pages = 0
        self.output_path = None

    async def initialize(self, crawler):
        logger.info(f"Export feature initialized (output={self.storage.base_path})")

    async def before_crawl(self, crawler):
        self.exported_pages = 0
        self.output_path = self.storage.start_run(crawler.config.seed_url)

    async def process_page(self, record, crawler):
        self.exported_pages += 1

    async def finalize(self, crawler):
        """Write pages, graph and run summary"""
        if self.output_path is None:
            return

        graph = crawler.build_knowledge_graph()

        await self.storage.save_json("pages", [record.to_dict() for record in crawler.results])
        await self.storage.save_json("graph", graph.to_dict())
        await self.storage.save_json("summary", {
            'seed_url': crawler.config.seed_url,
            'max_depth': crawler.config.max_depth,
            'max_links_per_page': crawler.config.max_links_per_page,
            'pages_collected': self.exported_pages,
            'graph_nodes': graph.node_count,
            'graph_edges': graph.edge_count,
            'errors': crawler.error_handler.get_error_summary(),
            'metrics': crawler.metrics_collector.get_current_snapshot()
        })

        logger.info(f"Export completed: {self.exported_pages} pages written to {self.output_path}")
