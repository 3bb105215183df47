#!/usr/bin/env python3
"""
WikiGraph Crawler
Crawls Wikipedia breadth-first from a seed article and builds a knowledge graph
"""

import argparse
import asyncio
import sys
from wikigraph.crawler import CrawlerBuilder
from wikigraph.graph_manager import GraphMode
from wikigraph.graph_manager.crawl_config import DEFAULT_SEED_URL
from wikigraph.monitoring import LogManager, print_crawl_report
from wikigraph.utils import create_pacing


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Crawl Wikipedia articles breadth-first and build a knowledge graph."
    )
    parser.add_argument("seed_url", nargs="?", default=DEFAULT_SEED_URL,
                        help=f"Seed article URL (default: {DEFAULT_SEED_URL})")
    parser.add_argument("--max-depth", type=int, default=1,
                        help="Maximum link hops from the seed (default: 1)")
    parser.add_argument("--max-links", type=int, default=5,
                        help="Links followed per article (default: 5)")
    parser.add_argument("--graph-mode", choices=[mode.value for mode in GraphMode],
                        default=GraphMode.DEPTH_ADJACENCY.value,
                        help="How graph edges are inferred (default: depth_adjacency)")
    parser.add_argument("--pacing", choices=["fixed", "min_interval", "token_bucket", "none"],
                        default="fixed", help="Delay strategy between articles (default: fixed)")
    parser.add_argument("--delay", type=float, default=3.0,
                        help="Seconds between articles (default: 3.0)")
    parser.add_argument("--output", help="Directory for JSON export (disabled when omitted)")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    parser.add_argument("--log-dir", default="wikigraph_data/logs", help="Log directory")

    args = parser.parse_args(argv)
    if args.max_depth < 0 or args.max_links < 0:
        parser.error("--max-depth and --max-links must be >= 0")
    return args


async def main(argv=None):
    """Main entry point for the crawler"""
    args = parse_args(argv)
    log_manager = LogManager(log_dir=args.log_dir, log_level=args.log_level)

    crawler = (CrawlerBuilder(args.seed_url)
               .max_depth(args.max_depth)
               .max_links_per_page(args.max_links)
               .graph_mode(args.graph_mode)
               .with_pacing(create_pacing(args.pacing, delay=args.delay))
               .with_logging(log_manager)
               .with_export(enable=bool(args.output), output_dir=args.output or "")
               .build())

    pages = await crawler.crawl()
    graph = crawler.build_knowledge_graph()

    print_crawl_report(pages, graph, args.seed_url)

    log_manager.export_metrics_json({
        'metrics': crawler.metrics_collector.get_current_snapshot(),
        'errors': crawler.error_handler.get_error_summary(),
        'pacing': crawler.pacing.get_stats()
    }, "final_crawl_metrics.json")


if __name__ == "__main__":
    print("🌿 WikiGraph Crawler Starting...")
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\n🛑 Crawler stopped by user")
    except Exception as e:
        print(f"❌ Error: {e}")
        sys.exit(1)
    print("✅ Crawling completed!")
