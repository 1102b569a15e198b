"""
Tests for the in-memory Canvas and end-to-end navigation over it.
"""

import pytest

from mindnav.canvas import HORIZ_GAP, NODE_HEIGHT, VERT_GAP, Canvas
from mindnav.nav import Direction, Mode, ModeStore, NavigationController
from mindnav.nav.protocol import NodeService, SelectionProvider, ViewportProvider, ViewSink


@pytest.fixture
def canvas():
    """root with two children, one grandchild under the lower child."""
    c = Canvas(viewport=(-100, -300, 1200, 800))
    c.add_node(0, 0, label="Root", node_id="root")
    c.add_node(220, -60, label="Ideas", parent_id="root", node_id="ideas")
    c.add_node(220, 60, label="Tasks", parent_id="root", node_id="tasks")
    c.add_node(440, 60, label="Tests", parent_id="tasks", node_id="tests")
    return c


@pytest.fixture
def controller(canvas):
    return NavigationController(
        selection=canvas, viewport=canvas, view=canvas,
        modes=ModeStore(), nodes=canvas, weight=1.1,
    )


def test_canvas_conforms_to_protocols(canvas):
    for protocol in (SelectionProvider, ViewportProvider, ViewSink, NodeService):
        assert isinstance(canvas, protocol)


def test_single_selection_only(canvas):
    assert canvas.get_single_selection() is None
    canvas.select("root", "ideas")
    assert canvas.get_single_selection() is None
    canvas.select("ideas")
    assert canvas.get_single_selection().id == "ideas"


def test_unknown_ids_raise(canvas):
    with pytest.raises(KeyError):
        canvas.select("missing")
    with pytest.raises(KeyError):
        canvas.zoom_to_node("missing")
    with pytest.raises(KeyError):
        canvas.add_node(0, 0, parent_id="missing")


def test_degenerate_node_is_rejected(canvas):
    with pytest.raises(ValueError):
        canvas.add_node(0, 0, width=0)


def test_viewport_nodes_keep_insertion_order(canvas):
    assert [r.id for r in canvas.get_viewport_nodes()] == ["root", "ideas", "tasks", "tests"]

    canvas.set_viewport(-100, -300, 500, 800)
    assert [r.id for r in canvas.get_viewport_nodes()] == ["root", "ideas", "tasks"]


def test_zoom_selects_and_centres(canvas):
    canvas.zoom_to_node("tests")

    assert canvas.get_single_selection().id == "tests"
    assert canvas.get_navigation_node().id == "tests"
    x, y, w, h = canvas.viewport
    assert (x + w / 2, y + h / 2) == (440 + 80, 60 + 28)


def test_navigation_node_falls_back_to_selection(canvas):
    assert canvas.get_navigation_node() is None
    canvas.select("ideas")
    assert canvas.get_navigation_node().id == "ideas"


def test_arrow_walk_across_the_tree(canvas, controller):
    canvas.select("root")

    assert controller.on_directional_key(Direction.RIGHT).id == "ideas"
    assert controller.on_directional_key(Direction.DOWN).id == "tasks"
    assert controller.on_directional_key(Direction.RIGHT).id == "tests"
    assert controller.on_directional_key(Direction.RIGHT) is None
    assert controller.on_directional_key(Direction.LEFT).id == "tasks"
    assert canvas.get_single_selection().id == "tasks"


def test_editing_blocks_navigation(canvas, controller):
    canvas.select("root")
    canvas.set_editing("root")
    viewport = canvas.viewport

    assert controller.on_directional_key(Direction.RIGHT) is None
    assert canvas.get_single_selection().id == "root"
    assert canvas.viewport == viewport


def test_focus_anchors_creation_on_navigation_node(canvas, controller):
    canvas.select("root")
    controller.on_directional_key(Direction.RIGHT)

    controller.focus_node()

    assert controller.modes.mode is Mode.CREATING
    assert controller.modes.anchor.id == "ideas"


def test_create_child_places_right_of_parent(canvas):
    canvas.select("tasks")
    first = canvas.create_child()
    assert first.x == 220 + 160 + HORIZ_GAP
    assert first.y == 60 + NODE_HEIGHT + VERT_GAP
    assert canvas.parent_of(first.id) == "tasks"
    assert canvas.get_single_selection().id == first.id


def test_create_child_without_selection(canvas):
    assert canvas.create_child() is None


def test_root_has_no_siblings(canvas):
    canvas.select("root")
    assert canvas.create_after_sibling() is None
    assert canvas.create_before_sibling() is None


def test_after_sibling_pushes_lower_siblings_down(canvas):
    canvas.select("ideas")
    sibling = canvas.create_after_sibling()

    step = NODE_HEIGHT + VERT_GAP
    assert sibling.y == -60 + step
    assert canvas.get_rect("ideas").y == -60
    assert canvas.get_rect("tasks").y == 60 + step
    # subtree moves with its root
    assert canvas.get_rect("tests").y == 60 + step


def test_before_sibling_pushes_upper_siblings_up(canvas):
    canvas.select("tasks")
    sibling = canvas.create_before_sibling()

    step = NODE_HEIGHT + VERT_GAP
    assert sibling.y == 60 - step
    assert canvas.get_rect("tasks").y == 60
    assert canvas.get_rect("tests").y == 60
    assert canvas.get_rect("ideas").y == -60 - step
