from enum import Enum


class GraphMode(Enum):
    """How knowledge graph edges are inferred"""
    DEPTH_ADJACENCY = "depth_adjacency"     # Every page at depth d -> every page at d+1
    PARENT_LINK = "parent_link"             # Only pages actually enqueued from one another
