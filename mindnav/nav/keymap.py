"""
Keymap - registers the navigation actions against a host input scope.

Binding priority for each action in NODE_ACTIONS:
1. options: explicit override passed to register_all()
2. config: the configured hotkey string
3. default: DEFAULT_HOTKEYS
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from mindnav.nav.constants import DEFAULT_HOTKEYS, MODIFIERS, NODE_ACTIONS
from mindnav.nav.controller import NavigationController
from mindnav.nav.geometry import Direction
from mindnav.nav.protocol import InputScope

logger = logging.getLogger(__name__)


def convert_hotkey(hotkey: str) -> Tuple[List[str], Optional[str]]:
    """
    Split a hotkey string into (modifiers, key).

    'Alt+ArrowLeft' -> (['Alt'], 'ArrowLeft'), 'Mod + Enter' -> (['Mod'], 'Enter'),
    'Tab' -> ([], 'Tab'), '' -> ([], None). A literal '+' key is written 'Shift++'.
    """
    text = (hotkey or '').strip()
    if not text:
        return [], None

    if text.endswith('++'):
        head, key = text[:-2], '+'
    elif '+' in text:
        head, _, key = text.rpartition('+')
    else:
        head, key = '', text

    modifiers = [part.strip() for part in head.split('+') if part.strip()]
    for modifier in modifiers:
        if modifier not in MODIFIERS:
            raise ValueError(f"Unknown modifier {modifier!r} in hotkey {hotkey!r}")
    return modifiers, key.strip() or None


class Keymap:
    """Registers and tears down the node action hotkeys."""

    def __init__(self, scope: InputScope, controller: NavigationController,
                 hotkeys: Optional[Mapping[str, str]] = None):
        self.scope = scope
        self.controller = controller
        self.hotkeys: Dict[str, str] = dict(DEFAULT_HOTKEYS)
        self.hotkeys.update(hotkeys or {})
        self.handles: List[Any] = []

    def register(self, modifiers: List[str], key: Optional[str], func: Callable[[], Any]) -> Any:
        return self.scope.register(modifiers, key, func)

    def callbacks(self) -> Dict[str, Callable[[], Any]]:
        """Bound callbacks for every action, one closure per arrow direction."""
        controller = self.controller

        def navigate(direction: Direction) -> Callable[[], Any]:
            return lambda: controller.on_directional_key(direction)

        return {
            'Focus': controller.focus_node,
            'CreateChild': controller.create_child,
            'CreateBeforeSib': controller.create_before_sibling,
            'CreateAfterSib': controller.create_after_sibling,
            'ArrowLeft': navigate(Direction.LEFT),
            'ArrowRight': navigate(Direction.RIGHT),
            'ArrowUp': navigate(Direction.UP),
            'ArrowDown': navigate(Direction.DOWN),
        }

    def register_all(self, options: Optional[Mapping[str, Callable[[], Any]]] = None):
        """
        Register every action in NODE_ACTIONS.

        Args:
            options: action name -> factory returning an already registered
                handle; takes precedence over the configured hotkey.
        """
        options = options or {}
        unknown = set(options) - set(NODE_ACTIONS)
        if unknown:
            raise ValueError(f"Unknown action(s) in options: {sorted(unknown)}")

        callbacks = self.callbacks()
        disabled = 0
        for action in NODE_ACTIONS:
            if action in options:
                self.handles.append(options[action]())
                continue

            modifiers, key = convert_hotkey(self.hotkeys[action])
            if key is None and not modifiers:
                # an empty binding would match every unmodified key
                logger.warning(f"No hotkey configured for '{action}'; action disabled")
                disabled += 1
                continue
            self.handles.append(self.register(modifiers, key, callbacks[action]))

        logger.info(f"Registered {len(self.handles)} node hotkeys "
                    f"({len(options)} overridden, {disabled} disabled)")

    def unregister_all(self):
        for handle in self.handles:
            self.scope.unregister(handle)
        logger.info(f"Unregistered {len(self.handles)} node hotkeys")
        self.handles = []
