"""
WikiGraph - depth-bounded Wikipedia crawler that builds a knowledge graph
"""

from .crawler import BaseCrawler, CrawlerBuilder, PageRecord
from .graph_manager import CrawlConfig, GraphMode, KnowledgeGraph, build_knowledge_graph

__version__ = "1.0.0"

__all__ = [
    'BaseCrawler',
    'CrawlerBuilder',
    'PageRecord',
    'CrawlConfig',
    'GraphMode',
    'KnowledgeGraph',
    'build_knowledge_graph'
]
