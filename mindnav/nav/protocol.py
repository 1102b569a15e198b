"""
Collaborator protocols for the navigation core.

The controller and keymap never reach for a global host object; they are
handed objects conforming to these protocols. The in-memory Canvas in
mindnav.canvas implements the node-side ones, the NiceGUI KeyboardScope in
mindnav.nav.handlers implements InputScope.
"""

from typing import Any, Callable, List, Optional, Protocol, Sequence, runtime_checkable

from mindnav.nav.geometry import Rect


@runtime_checkable
class SelectionProvider(Protocol):

    def get_single_selection(self) -> Optional[Rect]:
        """Return the one selected node, or None when nothing or several nodes are selected."""
        ...


@runtime_checkable
class ViewportProvider(Protocol):

    def get_viewport_nodes(self) -> List[Rect]:
        """
        Return every node currently laid out in the viewport.

        Order is arbitrary but must be stable for the duration of the call;
        it decides ties between equally distant candidates.
        """
        ...


@runtime_checkable
class ViewSink(Protocol):

    def zoom_to_node(self, node_id: str) -> None:
        """Fire-and-forget request to select and centre the given node."""
        ...


@runtime_checkable
class NodeService(Protocol):
    """Node-side operations the keymap delegates to."""

    def get_navigation_node(self) -> Optional[Rect]:
        """Return the node most recently navigated to (or a default), if any."""
        ...

    def create_child(self) -> Optional[Rect]:
        ...

    def create_before_sibling(self) -> Optional[Rect]:
        ...

    def create_after_sibling(self) -> Optional[Rect]:
        ...


@runtime_checkable
class InputScope(Protocol):
    """Host input scope that maps modifier+key combinations to callbacks."""

    def register(self, modifiers: Sequence[str], key: Optional[str],
                 func: Callable[[], Any]) -> Any:
        """Bind func and return an opaque handle usable with unregister()."""
        ...

    def unregister(self, handle: Any) -> None:
        ...
