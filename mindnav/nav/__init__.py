"""
Keyboard navigation system for mind-map canvases.

This package provides:
- select_next / rank_candidates: Directional Selector over node rectangles
- ModeStore: creation / navigation / touch mode state
- NavigationController: Arrow, focus and blur key handling
- Keymap: Hotkey registration with override > config > default priority
- KeyboardScope: NiceGUI input scope the keymap registers against

Usage:
    from mindnav.nav import NavigationController, Keymap, KeyboardScope
"""

from mindnav.nav.constants import (
    DEFAULT_OFFSET_WEIGHT,
    DEFAULT_HOTKEYS,
    NODE_ACTIONS,
)
from mindnav.nav.errors import InvalidGeometryError, InvalidWeightError, ModeTransitionError
from mindnav.nav.geometry import (
    CandidateScore,
    Direction,
    Rect,
    endpoint_offset,
    rank_candidates,
    select_next,
)
from mindnav.nav.modes import Mode, ModeStore
from mindnav.nav.controller import NavigationController
from mindnav.nav.keymap import Keymap, convert_hotkey
from mindnav.nav.handlers import KeyboardScope

__all__ = [
    'CandidateScore',
    'Direction',
    'Rect',
    'endpoint_offset',
    'rank_candidates',
    'select_next',
    'Mode',
    'ModeStore',
    'NavigationController',
    'Keymap',
    'convert_hotkey',
    'KeyboardScope',
    'InvalidGeometryError',
    'InvalidWeightError',
    'ModeTransitionError',
    'DEFAULT_OFFSET_WEIGHT',
    'DEFAULT_HOTKEYS',
    'NODE_ACTIONS',
]
