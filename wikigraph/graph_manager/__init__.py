"""
Frontier scheduling, link ranking and knowledge graph derivation
"""

from .graph_mode import GraphMode
from .crawl_config import CrawlConfig, ExtractionOptions
from .link_info import LinkCandidate, FrontierEntry
from .link_prioritizer import LinkPrioritizer
from .frontier import FrontierQueue
from .knowledge_graph import KnowledgeGraph, GraphNode, GraphEdge, build_knowledge_graph

__all__ = [
    'GraphMode',
    'CrawlConfig',
    'ExtractionOptions',
    'LinkCandidate',
    'FrontierEntry',
    'LinkPrioritizer',
    'FrontierQueue',
    'KnowledgeGraph',
    'GraphNode',
    'GraphEdge',
    'build_knowledge_graph'
]
