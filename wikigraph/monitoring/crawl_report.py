from datetime import datetime
from typing import Sequence
from ..utils.text import truncate_preview
from ..graph_manager.knowledge_graph import KnowledgeGraph

INTRO_PREVIEW_LENGTH = 250


def print_crawl_report(pages: Sequence, graph: KnowledgeGraph, seed_url: str):
    """Print the human readable summary of a finished crawl"""
    print(f"\n{'='*60}")
    print("📚 WIKIPEDIA KNOWLEDGE CRAWLER RESULTS")
    print(f"{'='*60}")
    print(f"Total articles crawled: {len(pages)}")
    print(f"Seed article: {seed_url}")
    print(f"Crawl time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

    print(f"\n📝 Article Summaries:")
    for index, page in enumerate(pages, start=1):
        retry_marker = " [retry]" if page.is_retry else ""
        print(f"\n{index}. {page.title} (Depth: {page.depth}){retry_marker}")
        print(f"   URL: {page.url}")
        print(f"   Introduction: {truncate_preview(page.introduction, INTRO_PREVIEW_LENGTH)}")
        if page.key_concepts:
            print(f"   Key Concepts: {page.key_concepts}")

    print(f"\n🕸️ Knowledge Graph ({graph.mode.value}):")
    print(f"  Nodes: {graph.node_count}")
    print(f"  Connections: {graph.edge_count}")
