#!/usr/bin/env python3
"""
Graph crawling example
Compares the two ways of deriving a knowledge graph from the same crawl
"""

import asyncio
import sys
import os

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from wikigraph.crawler import CrawlerBuilder
from wikigraph.graph_manager import GraphMode
from wikigraph.utils import MinIntervalPacing


async def compare_graph_modes():
    """Crawl two levels and print both graph variants"""
    print("🕸️ Knowledge Graph Modes Example")
    print("-" * 50)

    crawler = (CrawlerBuilder("https://en.wikipedia.org/wiki/Graph_theory")
               .max_depth(2)
               .max_links_per_page(2)
               .with_pacing(MinIntervalPacing(interval=3.0))
               .with_export(output_dir="wikigraph_data/examples")
               .build())

    pages = await crawler.crawl()

    for mode in GraphMode:
        graph = crawler.build_knowledge_graph(mode)
        print(f"\n{mode.value}: {graph.node_count} nodes, {graph.edge_count} edges")
        for page in pages:
            targets = graph.neighbors(page.url)
            if targets:
                print(f"  {page.title} -> {len(targets)} articles")


if __name__ == "__main__":
    if not os.environ.get("JIGSAWSTACK_API_KEY"):
        print("Set JIGSAWSTACK_API_KEY to run this example")
        sys.exit(1)
    asyncio.run(compare_graph_modes())
