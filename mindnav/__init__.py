"""
mindnav - keyboard navigation for mind-map canvases.

Arrow keys move the selection to the best-matching neighbouring node;
Focus/blur keys step through the creation, navigation and touch modes.
"""

__version__ = "0.1.0"
