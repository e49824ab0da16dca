"""
NetworkX-backed node store for the selection tool.

The renderer iterates nodes through iter_nodes(); positions and sizes live
as node attributes ('x', 'y', 'size') in graph space.
"""

import logging
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Tuple

import networkx as nx

logger = logging.getLogger(__name__)

DEFAULT_LAYOUT_SCALE = 500.0


class NetworkXGraphStore:
    """Read-only view over a networkx graph."""

    def __init__(self, graph: Optional[nx.Graph] = None):
        self.G = graph if graph is not None else nx.Graph()

    def iter_nodes(self) -> Iterable[Tuple[Hashable, Mapping[str, Any]]]:
        return self.G.nodes(data=True)

    def __len__(self) -> int:
        return self.G.number_of_nodes()

    @classmethod
    def from_records(cls, nodes: List[Dict[str, Any]],
                     edges: Optional[List[Dict[str, Any]]] = None) -> 'NetworkXGraphStore':
        """
        Build a store from node / edge dicts.

        Expected node format: {"id": ..., "x": ..., "y": ..., "size": ..., ...}
        Expected edge format: {"source": ..., "target": ...}
        """
        G = nx.Graph()
        for nd in nodes:
            attrs = dict(nd)
            node_id = attrs.pop('id')
            G.add_node(node_id, **attrs)

        for e in edges or []:
            src = e.get('source')
            tgt = e.get('target')
            # Only add edges if both nodes exist
            if src in G.nodes and tgt in G.nodes:
                G.add_edge(src, tgt)
        return cls(G)


def apply_force_layout(G: nx.Graph, scale: float = DEFAULT_LAYOUT_SCALE,
                       seed: Optional[int] = None, base_size: float = 4.0) -> nx.Graph:
    """
    Write force-directed positions and degree-based sizes into node attributes.

    Positions come from networkx.spring_layout scaled to [-scale, scale].
    Nodes that already carry a 'size' keep it.
    """
    if G.number_of_nodes() == 0:
        return G

    positions = nx.spring_layout(G, scale=scale, seed=seed)
    for node_id, (x, y) in positions.items():
        attrs = G.nodes[node_id]
        attrs['x'] = float(x)
        attrs['y'] = float(y)
        attrs.setdefault('size', base_size + G.degree(node_id))

    logger.info(f"Force layout applied to {G.number_of_nodes()} nodes")
    return G
