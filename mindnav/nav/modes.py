"""
Mode store - which interaction mode the canvas is in.

One explicit state variable over {NONE, CREATING, NAVIGATING, TOUCHING}
replaces the three separately queried flags, so combinations such as
"creating and touching" cannot be expressed. Transitions are looked up in
TRANSITIONS; anything not listed there raises ModeTransitionError.
"""

import logging
from enum import Enum
from typing import Any, Callable, Optional

from mindnav.nav.errors import ModeTransitionError

logger = logging.getLogger(__name__)


class Mode(Enum):
    NONE = 'none'
    CREATING = 'creating'
    NAVIGATING = 'navigating'
    TOUCHING = 'touching'


# transition name -> {source mode: target mode}
TRANSITIONS = {
    'creation_to_navigation': {Mode.CREATING: Mode.NAVIGATING},
    'use_touch': {Mode.NAVIGATING: Mode.TOUCHING},
    'touch_to_navigation': {Mode.TOUCHING: Mode.NAVIGATING},
    'use_creation': {mode: Mode.CREATING for mode in Mode},
    'use_navigation': {
        Mode.NONE: Mode.NAVIGATING,
        Mode.CREATING: Mode.NAVIGATING,
        Mode.TOUCHING: Mode.NAVIGATING,
    },
    'reset': {mode: Mode.NONE for mode in Mode},
}


class ModeStore:
    """Holds the current mode and the node creation mode is anchored on."""

    def __init__(self, mode: Mode = Mode.NONE):
        self._mode = mode
        self._anchor: Optional[Any] = None
        self._on_change: Optional[Callable[[Mode, Mode], None]] = None

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def anchor(self) -> Optional[Any]:
        return self._anchor

    def set_on_change(self, callback: Callable[[Mode, Mode], None]):
        self._on_change = callback

    def is_creating(self) -> bool:
        return self._mode is Mode.CREATING

    def is_navigating(self) -> bool:
        return self._mode is Mode.NAVIGATING

    def is_touching(self) -> bool:
        return self._mode is Mode.TOUCHING

    def can(self, transition: str) -> bool:
        return self._mode in TRANSITIONS[transition]

    # --- Transitions ---

    def creation_to_navigation(self) -> Mode:
        return self._apply('creation_to_navigation')

    def use_touch(self) -> Mode:
        return self._apply('use_touch')

    def touch_to_navigation(self) -> Mode:
        return self._apply('touch_to_navigation')

    def use_creation(self, node: Any) -> Mode:
        return self._apply('use_creation', anchor=node)

    def use_navigation(self) -> Mode:
        return self._apply('use_navigation')

    def reset(self) -> Mode:
        return self._apply('reset')

    def _apply(self, transition: str, anchor: Any = None) -> Mode:
        targets = TRANSITIONS[transition]
        if self._mode not in targets:
            raise ModeTransitionError(transition, self._mode)

        old = self._mode
        self._mode = targets[old]
        self._anchor = anchor
        logger.debug(f"Mode {old.name} -> {self._mode.name} via {transition}")

        if self._on_change:
            self._on_change(old, self._mode)
        return self._mode
