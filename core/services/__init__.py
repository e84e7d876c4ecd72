"""
Core services — traversal algorithms, tree rendering, and base abstractions.
"""
from .base_service import TraversalService, TraversalQuery, resolve_vertex
from .bfs_service import BfsService
from .dfs_service import DfsService
from .shortest_path_service import ShortestPathService
from .tree_renderer import TreeRenderer
from .exceptions import InvalidVertexReference, EmptyGraph

__all__ = [
    'TraversalService',
    'TraversalQuery',
    'resolve_vertex',
    'BfsService',
    'DfsService',
    'ShortestPathService',
    'TreeRenderer',
    'InvalidVertexReference',
    'EmptyGraph',
]
