"""
NiceGUI demo host for mindnav.

Renders a small mind-map from the in-memory Canvas and wires the keymap to a
page-level keyboard listener:
- Alt+Arrow keys move the selection to the nearest node in that direction
- Alt+F focuses (touch -> navigation, otherwise creation on the current node)
- Escape blurs (creation -> navigation -> touch)
- Tab / Enter / Shift+Enter create child and sibling nodes
"""

import logging
import sys

from dotenv import load_dotenv
from nicegui import ui

load_dotenv()

from mindnav.canvas import Canvas
from mindnav.config import get_hotkeys, get_offset_weight
from mindnav.nav import Keymap, KeyboardScope, ModeStore, NavigationController

logging.basicConfig(level=logging.INFO, format='%(asctime)s %(name)s %(levelname)s %(message)s')
logger = logging.getLogger(__name__)


def build_demo_canvas() -> Canvas:
    """A root with two branches, enough to exercise all four directions."""
    canvas = Canvas(viewport=(-200, -300, 1200, 800))
    root = canvas.add_node(0, 0, label="Mind map", node_id="root")
    ideas = canvas.add_node(220, -60, label="Ideas", parent_id=root.id)
    tasks = canvas.add_node(220, 60, label="Tasks", parent_id=root.id)
    canvas.add_node(440, -120, label="Navigation", parent_id=ideas.id)
    canvas.add_node(440, -30, label="Layout", parent_id=ideas.id)
    canvas.add_node(440, 60, label="Write tests", parent_id=tasks.id)
    canvas.select(root.id)
    return canvas


@ui.page('/')
def main_page():
    canvas = build_demo_canvas()
    modes = ModeStore()
    controller = NavigationController(
        selection=canvas,
        viewport=canvas,
        view=canvas,
        modes=modes,
        nodes=canvas,
        weight=get_offset_weight,
        notify=lambda message: ui.notify(message, position='bottom', timeout=1500, color='warning'),
    )

    scope = KeyboardScope()
    keymap = Keymap(scope, controller, hotkeys=get_hotkeys())
    keymap.register_all()
    scope.register([], 'Escape', controller.blur_node)

    scope.attach(on_handled=lambda: render_canvas.refresh())
    modes.set_on_change(lambda old, new: mode_label.set_text(f'Mode: {new.value}'))

    @ui.refreshable
    def render_canvas():
        vx, vy, _, _ = canvas.viewport
        selected = canvas.get_single_selection()
        with ui.element('div').style('position: relative; width: 1200px; height: 800px; overflow: hidden;') \
                .classes('bg-slate-900 rounded'):
            for rect in canvas.rects():
                border = 'border-sky-400' if selected and selected.id == rect.id else 'border-slate-600'
                ui.label(canvas.label(rect.id) or 'New topic') \
                    .classes(f'absolute rounded border-2 {border} bg-slate-800 text-white p-2') \
                    .style(f'left: {rect.x - vx}px; top: {rect.y - vy}px; '
                           f'width: {rect.width}px; height: {rect.height}px;')

    with ui.column().classes('p-4 gap-2'):
        mode_label = ui.label(f'Mode: {modes.mode.value}').classes('text-sm text-slate-400')
        render_canvas()

    logger.info(f"Demo canvas ready with {canvas.G.number_of_nodes()} nodes")


if __name__ in {"__main__", "__mp_main__"}:
    ui.run(
        title='mindnav',
        port=8081,
        reload=not getattr(sys, 'frozen', False),
    )
