"""
Shared constants for keyboard navigation.

Hotkey strings use the "Modifier+Key" form understood by keymap.convert_hotkey.
"""

# Exponent applied to the endpoint offset when scoring candidates
DEFAULT_OFFSET_WEIGHT = 1.1

# Numerator of the per-axis normalization term (2 / height, 2 / width)
ENDPOINT_NORMALIZER = 2.0

# Logical actions a host can bind, in registration order
NODE_ACTIONS = (
    'Focus',
    'CreateChild',
    'CreateBeforeSib',
    'CreateAfterSib',
    'ArrowLeft',
    'ArrowRight',
    'ArrowUp',
    'ArrowDown',
)

DEFAULT_HOTKEYS = {
    'Focus': 'Alt+F',
    'CreateChild': 'Tab',
    'CreateBeforeSib': 'Shift+Enter',
    'CreateAfterSib': 'Enter',
    'ArrowLeft': 'Alt+ArrowLeft',
    'ArrowRight': 'Alt+ArrowRight',
    'ArrowUp': 'Alt+ArrowUp',
    'ArrowDown': 'Alt+ArrowDown',
}

MODIFIERS = ('Mod', 'Ctrl', 'Meta', 'Shift', 'Alt')

# Shown through the optional notify hook when arrows are pressed mid-edit
EDITING_HINT = 'Press Esc to leave editing before navigating'
