"""
Keyboard Scope - NiceGUI input scope for the keymap.

Collects modifier+key bindings and dispatches NiceGUI keyboard events to
them, so the Keymap can stay independent of the UI toolkit.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Any, Callable, FrozenSet, List, Optional, Sequence

from nicegui import ui

logger = logging.getLogger(__name__)

# 'Mod' is the platform's primary shortcut modifier
MOD_KEY = 'Meta' if sys.platform == 'darwin' else 'Ctrl'


@dataclass(frozen=True, eq=False)
class KeyBinding:
    modifiers: FrozenSet[str]
    key: Optional[str]
    func: Callable[[], Any]

    def matches(self, modifiers: FrozenSet[str], key: str) -> bool:
        if self.modifiers != modifiers:
            return False
        # key None binds the modifier combination alone
        return self.key is None or self.key.lower() == key.lower()


def normalize_modifiers(modifiers: Sequence[str]) -> FrozenSet[str]:
    return frozenset(MOD_KEY if m == 'Mod' else m for m in modifiers)


class KeyboardScope:
    """InputScope implementation fed by ui.keyboard events."""

    def __init__(self):
        self._bindings: List[KeyBinding] = []

    @property
    def bindings(self) -> List[KeyBinding]:
        return list(self._bindings)

    def register(self, modifiers: Sequence[str], key: Optional[str],
                 func: Callable[[], Any]) -> KeyBinding:
        binding = KeyBinding(normalize_modifiers(modifiers), key, func)
        self._bindings.append(binding)
        return binding

    def unregister(self, handle: KeyBinding) -> None:
        if handle in self._bindings:
            self._bindings.remove(handle)

    def dispatch(self, modifiers: Sequence[str], key: str) -> bool:
        """Run the most recently registered binding matching the combination."""
        pressed = normalize_modifiers(modifiers)
        for binding in reversed(self._bindings):
            if binding.matches(pressed, key):
                binding.func()
                return True
        return False

    def handle_key(self, e) -> bool:
        """Translate a NiceGUI KeyEventArguments into a dispatch (keydown only)."""
        if not e.action.keydown:
            return False

        modifiers = []
        if e.modifiers.ctrl:
            modifiers.append('Ctrl')
        if e.modifiers.meta:
            modifiers.append('Meta')
        if e.modifiers.alt:
            modifiers.append('Alt')
        if e.modifiers.shift:
            modifiers.append('Shift')

        key = e.key.name
        handled = self.dispatch(modifiers, key)
        if handled:
            logger.debug(f"Handled {'+'.join(modifiers + [key])}")
        return handled

    def attach(self, on_handled: Optional[Callable[[], Any]] = None):
        """Create the page-level keyboard listener. Call inside a page context."""
        def on_key(e):
            if self.handle_key(e) and on_handled:
                on_handled()

        return ui.keyboard(on_key=on_key, ignore=['input', 'textarea'])
