"""
Navigation Controller - wires arrow keys and focus/blur keys to the canvas.

Per key press the controller reads the current selection and the visible
nodes from the canvas, asks the Directional Selector for the next node and,
if there is one, asks the view to zoom to it. It never changes geometry or
selection itself.

Focus and blur are small edges over the ModeStore:

    blur:  CREATING -> NAVIGATING, else NAVIGATING -> TOUCHING
    focus: TOUCHING -> NAVIGATING, else CREATING anchored on the navigation node
"""

import logging
from typing import Callable, Optional, Union

from mindnav.nav.constants import EDITING_HINT
from mindnav.nav.geometry import Direction, Rect, select_next
from mindnav.nav.modes import ModeStore
from mindnav.nav.protocol import NodeService, SelectionProvider, ViewportProvider, ViewSink

logger = logging.getLogger(__name__)


class NavigationController:
    """Handles directional, focus/blur and node-creation key actions."""

    def __init__(self,
                 selection: SelectionProvider,
                 viewport: ViewportProvider,
                 view: ViewSink,
                 modes: ModeStore,
                 nodes: NodeService,
                 weight: Union[float, Callable[[], float]],
                 notify: Optional[Callable[[str], None]] = None):
        self._selection = selection
        self._viewport = viewport
        self._view = view
        self._modes = modes
        self._nodes = nodes
        self._weight = weight
        self._notify = notify

    @property
    def modes(self) -> ModeStore:
        return self._modes

    def current_weight(self) -> float:
        """Read the offset weight now; configuration may change between presses."""
        return self._weight() if callable(self._weight) else self._weight

    def on_directional_key(self, direction: Direction) -> Optional[Rect]:
        """
        Move the selection one step in `direction`.

        Returns the node the view was asked to zoom to, or None when the
        press was inert (no single selection, node being edited, or nothing
        on that side).
        """
        selected = self._selection.get_single_selection()
        if selected is None:
            logger.debug(f"Ignoring {direction.name}: no single selection")
            return None
        if selected.is_editing:
            logger.debug(f"Ignoring {direction.name}: node {selected.id} is being edited")
            if self._notify:
                self._notify(EDITING_HINT)
            return None

        candidates = self._viewport.get_viewport_nodes()
        target = select_next(selected, direction, candidates, self.current_weight())
        if target is None:
            logger.debug(f"No node {direction.value} of {selected.id} among {len(candidates)} candidates")
            return None

        logger.debug(f"Navigating {direction.value}: {selected.id} -> {target.id}")
        self._view.zoom_to_node(target.id)
        return target

    def blur_node(self):
        if self._modes.is_creating():
            self._modes.creation_to_navigation()
            return

        if self._modes.is_navigating():
            self._modes.use_touch()
            return

    def focus_node(self):
        if self._modes.is_touching():
            self._modes.touch_to_navigation()
            return

        navigation_node = self._nodes.get_navigation_node()
        if navigation_node is not None:
            self._modes.use_creation(navigation_node)
            return

    # --- Node creation (delegated) ---

    def create_child(self) -> Optional[Rect]:
        return self._nodes.create_child()

    def create_before_sibling(self) -> Optional[Rect]:
        return self._nodes.create_before_sibling()

    def create_after_sibling(self) -> Optional[Rect]:
        return self._nodes.create_after_sibling()
