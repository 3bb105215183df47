"""
Knowledge graph derived from the pages collected during a crawl
"""

import logging
from dataclasses import dataclass, asdict
from typing import Dict, List, Sequence, Tuple
from .graph_mode import GraphMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphNode:
    id: str
    label: str
    depth: int


@dataclass(frozen=True)
class GraphEdge:
    source: str
    target: str


@dataclass(frozen=True)
class KnowledgeGraph:
    """Directed graph over crawled pages"""
    nodes: Tuple[GraphNode, ...] = ()
    edges: Tuple[GraphEdge, ...] = ()
    mode: GraphMode = GraphMode.DEPTH_ADJACENCY

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def neighbors(self, url: str) -> List[str]:
        """Targets of all edges leaving ``url``"""
        return [edge.target for edge in self.edges if edge.source == url]

    def to_dict(self) -> Dict:
        return {
            'mode': self.mode.value,
            'nodes': [asdict(node) for node in self.nodes],
            'edges': [asdict(edge) for edge in self.edges]
        }


def build_knowledge_graph(records: Sequence, mode: GraphMode = GraphMode.DEPTH_ADJACENCY) -> KnowledgeGraph:
    """Build the graph once the frontier has drained

    DEPTH_ADJACENCY links every page at depth d to every page at depth d+1,
    whether or not one actually links to the other. PARENT_LINK keeps only
    the edges where the target was enqueued from the source page.
    """
    nodes = tuple(
        GraphNode(id=record.url, label=record.title, depth=record.depth)
        for record in records
    )

    edges = []
    for source in records:
        for target in records:
            if target.depth != source.depth + 1:
                continue
            if mode == GraphMode.PARENT_LINK and target.source_url != source.url:
                continue
            edges.append(GraphEdge(source=source.url, target=target.url))

    logger.debug(f"Built {mode.value} graph: {len(nodes)} nodes, {len(edges)} edges")
    return KnowledgeGraph(nodes=nodes, edges=tuple(edges), mode=mode)
