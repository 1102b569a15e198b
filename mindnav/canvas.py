"""
In-memory canvas for mindnav.

A small host-side stand-in for a real mind-map canvas. It owns the node set,
the selection and the viewport, and exposes them through the collaborator
protocols in mindnav.nav.protocol (selection, viewport, view and node
service). The demo app and the tests both drive navigation through it.

Nodes live in a networkx DiGraph (parent -> child edges) with their geometry
stored as node attributes:
  {
    "x": float, "y": float,          # top-left corner
    "width": float, "height": float,
    "label": str,
    "is_editing": bool
  }
"""

import logging
import uuid
from typing import Iterator, List, Optional, Tuple

import networkx as nx

from mindnav.nav.geometry import Rect, validate_rect

logger = logging.getLogger(__name__)

NODE_WIDTH = 160
NODE_HEIGHT = 56
HORIZ_GAP = 60
VERT_GAP = 36


class Canvas:
    """Node graph, single selection and viewport of one mind-map."""

    def __init__(self, viewport: Tuple[float, float, float, float] = (0, 0, 1200, 800)):
        self.G = nx.DiGraph()
        self._selection: List[str] = []
        self._navigation_node_id: Optional[str] = None
        self.set_viewport(*viewport)

    # --- Nodes ---

    def add_node(self, x: float, y: float, width: float = NODE_WIDTH, height: float = NODE_HEIGHT,
                 label: str = "", parent_id: Optional[str] = None,
                 node_id: Optional[str] = None) -> Rect:
        node_id = node_id or str(uuid.uuid4())
        if parent_id is not None and parent_id not in self.G:
            raise KeyError(parent_id)

        rect = validate_rect(Rect(node_id, x, y, width, height))
        self.G.add_node(node_id, x=x, y=y, width=width, height=height,
                        label=label, is_editing=False)
        if parent_id is not None:
            self.G.add_edge(parent_id, node_id)
        return rect

    def get_rect(self, node_id: str) -> Rect:
        data = self.G.nodes[node_id]
        return Rect(node_id, data['x'], data['y'], data['width'], data['height'],
                    is_editing=data['is_editing'])

    def rects(self) -> Iterator[Rect]:
        for node_id in self.G.nodes:
            yield self.get_rect(node_id)

    def label(self, node_id: str) -> str:
        return self.G.nodes[node_id]['label']

    def parent_of(self, node_id: str) -> Optional[str]:
        parents = list(self.G.predecessors(node_id))
        return parents[0] if parents else None

    def children_of(self, node_id: str) -> List[str]:
        return list(self.G.successors(node_id))

    def move_subtree(self, node_id: str, dx: float, dy: float):
        for nid in {node_id} | nx.descendants(self.G, node_id):
            self.G.nodes[nid]['x'] += dx
            self.G.nodes[nid]['y'] += dy

    # --- Selection ---

    def select(self, *node_ids: str):
        for node_id in node_ids:
            if node_id not in self.G:
                raise KeyError(node_id)
        self._selection = list(node_ids)

    def clear_selection(self):
        self._selection = []

    def set_editing(self, node_id: str, editing: bool = True):
        self.G.nodes[node_id]['is_editing'] = editing

    def get_single_selection(self) -> Optional[Rect]:
        if len(self._selection) != 1:
            return None
        return self.get_rect(self._selection[0])

    # --- Viewport ---

    @property
    def viewport(self) -> Tuple[float, float, float, float]:
        return self._viewport

    def set_viewport(self, x: float, y: float, width: float, height: float):
        self._viewport = (x, y, width, height)

    def get_viewport_nodes(self) -> List[Rect]:
        vx, vy, vw, vh = self._viewport
        return [
            rect for rect in self.rects()
            if rect.right >= vx and rect.left <= vx + vw
            and rect.bottom >= vy and rect.top <= vy + vh
        ]

    # --- View ---

    def zoom_to_node(self, node_id: str) -> None:
        rect = self.get_rect(node_id)
        self.select(node_id)
        self._navigation_node_id = node_id

        _, _, vw, vh = self._viewport
        cx = rect.x + rect.width / 2
        cy = rect.y + rect.height / 2
        self.set_viewport(cx - vw / 2, cy - vh / 2, vw, vh)

    # --- Node service ---

    def get_navigation_node(self) -> Optional[Rect]:
        """The node last zoomed to, falling back to the single selection."""
        if self._navigation_node_id in self.G:
            return self.get_rect(self._navigation_node_id)
        return self.get_single_selection()

    def create_child(self) -> Optional[Rect]:
        parent = self.get_single_selection()
        if parent is None:
            return None

        children = [self.get_rect(c) for c in self.children_of(parent.id)]
        if children:
            y = max(c.bottom for c in children) + VERT_GAP
        else:
            y = parent.y
        child = self.add_node(parent.right + HORIZ_GAP, y, parent_id=parent.id)
        logger.debug(f"Created child {child.id} of {parent.id}")
        self.zoom_to_node(child.id)
        return self.get_rect(child.id)

    def create_before_sibling(self) -> Optional[Rect]:
        return self._create_sibling(before=True)

    def create_after_sibling(self) -> Optional[Rect]:
        return self._create_sibling(before=False)

    def _create_sibling(self, before: bool) -> Optional[Rect]:
        current = self.get_single_selection()
        if current is None:
            return None
        parent_id = self.parent_of(current.id)
        if parent_id is None:
            return None

        step = current.height + VERT_GAP
        # make room by pushing the siblings on the insertion side outwards
        for sibling_id in self.children_of(parent_id):
            sibling = self.get_rect(sibling_id)
            if before and sibling.top <= current.top:
                self.move_subtree(sibling_id, 0, -step)
            elif not before and sibling.top > current.top:
                self.move_subtree(sibling_id, 0, step)

        y = current.y - step if before else current.y + step
        sibling = self.add_node(current.x, y, current.width, current.height, parent_id=parent_id)
        if before:
            # the reference node was shifted with its siblings; put it back
            self.move_subtree(current.id, 0, step)
        logger.debug(f"Created {'before' if before else 'after'} sibling {sibling.id} of {current.id}")
        self.zoom_to_node(sibling.id)
        return self.get_rect(sibling.id)
