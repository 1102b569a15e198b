"""
Directional Selector - picks the next node for an arrow key press.

Given the selected node's rectangle, a direction and the visible nodes, every
candidate lying strictly on the pressed side is scored by

    distance = axis_offset + endpoint_offset ** weight

where axis_offset is the offset along the press axis and endpoint_offset
measures how flush the facing edges are. The lowest distance wins; ties keep
the order the candidates were given in.

Everything here is pure: no logging, no state, same input -> same output.
"""

import math
from dataclasses import dataclass
from enum import Enum
from operator import attrgetter
from typing import Iterable, List, Optional

from mindnav.nav.constants import ENDPOINT_NORMALIZER
from mindnav.nav.errors import InvalidGeometryError, InvalidWeightError


class Direction(Enum):
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    @classmethod
    def from_key(cls, name: str) -> 'Direction':
        """Map 'ArrowUp'-style key names (or 'up', 'Left', ...) to a Direction."""
        key = (name or '').strip()
        if key.startswith('Arrow'):
            key = key[len('Arrow'):]
        try:
            return cls(key.lower())
        except ValueError:
            raise ValueError(f"Unknown direction key: {name!r}") from None


@dataclass(frozen=True)
class Rect:
    """Bounding box of a canvas node at the moment of the query."""
    id: str
    x: float
    y: float
    width: float
    height: float
    is_editing: bool = False

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass
class CandidateScore:
    """Per-candidate scoring record for one selection pass."""
    node: Rect
    axis_offset: float
    cross_offset: float
    endpoint_offset: float
    distance: float


def validate_rect(rect: Rect) -> Rect:
    # `not > 0` also rejects NaN
    if not rect.width > 0 or not rect.height > 0:
        raise InvalidGeometryError(
            f"Node {rect.id!r} has degenerate size {rect.width}x{rect.height}"
        )
    return rect


def validate_weight(weight: float) -> float:
    try:
        value = float(weight)
    except (TypeError, ValueError):
        raise InvalidWeightError(f"Offset weight must be a number, got {weight!r}") from None
    if not value >= 0 or math.isinf(value):
        raise InvalidWeightError(f"Offset weight must be a finite value >= 0, got {weight!r}")
    return value


def is_in_direction(reference: Rect, candidate: Rect, direction: Direction) -> bool:
    """
    True when candidate lies strictly on the `direction` side of reference.

    The tests compare facing edges, so a candidate overlapping the reference
    along the press axis is never on either side of it.
    """
    if candidate.id == reference.id:
        return False
    if direction is Direction.RIGHT:
        return candidate.left > reference.right
    if direction is Direction.LEFT:
        return candidate.right < reference.left
    if direction is Direction.UP:
        return candidate.bottom < reference.top
    if direction is Direction.DOWN:
        return candidate.top > reference.bottom
    raise ValueError(f"Unknown direction: {direction!r}")


def endpoint_offset(reference: Rect, candidate: Rect) -> float:
    """
    Smallest edge-to-edge gap between candidate and reference.

    The 2/height and 2/width terms keep exactly flush edges from collapsing
    to a zero offset. The result is a minimum of absolute values, so it is
    never negative and can safely be raised to a fractional power.
    """
    dy = ENDPOINT_NORMALIZER / reference.height
    dx = ENDPOINT_NORMALIZER / reference.width
    return min(
        abs(candidate.top - reference.top + dy),
        abs(candidate.bottom - reference.top - dy),
        abs(candidate.left - reference.left + dx),
        abs(candidate.right - reference.left + dx),
    )


def score_candidate(reference: Rect, candidate: Rect, direction: Direction,
                    weight: float) -> CandidateScore:
    offset_x = abs(candidate.x - reference.x)
    offset_y = abs(candidate.y - reference.y)
    if direction.is_horizontal:
        axis, cross = offset_x, offset_y
    else:
        axis, cross = offset_y, offset_x

    endpoint = endpoint_offset(reference, candidate)
    try:
        penalty = endpoint ** weight
    except OverflowError:
        # saturate: a far, badly aligned candidate ranks last
        penalty = math.inf
    return CandidateScore(
        node=candidate,
        axis_offset=axis,
        cross_offset=cross,
        endpoint_offset=endpoint,
        distance=axis + penalty,
    )


def rank_candidates(reference: Rect, direction: Direction, candidates: Iterable[Rect],
                    weight: float) -> List[CandidateScore]:
    """
    Score every candidate on the `direction` side of reference, best first.

    Raises InvalidGeometryError for a degenerate rectangle (reference or
    candidate) and InvalidWeightError for a negative or NaN weight.
    """
    validate_rect(reference)
    weight = validate_weight(weight)

    scores = []
    for candidate in candidates:
        validate_rect(candidate)
        if is_in_direction(reference, candidate, direction):
            scores.append(score_candidate(reference, candidate, direction, weight))

    # sorted() is stable: equal distances keep enumeration order
    return sorted(scores, key=attrgetter('distance'))


def select_next(reference: Rect, direction: Direction, candidates: Iterable[Rect],
                weight: float) -> Optional[Rect]:
    """Return the best node to move to from reference, or None if nothing qualifies."""
    ranked = rank_candidates(reference, direction, candidates, weight)
    return ranked[0].node if ranked else None
