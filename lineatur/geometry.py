"""
Geometry of a lineatur page.

A page is filled with line groups. Each group is one line height tall and
split into ruled sub-lines by a list of proportions, e.g. 2:1:2 gives
ascender, x-height and descender zones:

    y            ----------------------------   top line
    y + 2/5 h    ----------------------------
    y + 3/5 h    ----------------------------
    y + h        ----------------------------   bottom line

Slanted helper lines are measured from the base line upwards, so 60 degrees
leans to the right and 120 degrees to the left.

Nothing in here draws. The functions return Segment tuples that a document
(see output.py) strokes onto a page. Coordinates are in mm with the origin at
the upper left corner of the page and y pointing down.
"""
from typing import NamedTuple, Optional, Tuple

import numpy as np

from .errors import InvalidInputError
from .papers import PageGeometry


class Segment(NamedTuple):
    x1: float
    y1: float
    x2: float
    y2: float
    width: float


class SlantSpec(NamedTuple):
    angle: float  # degrees, from the base line upwards
    count: int    # number of guides across one line group


class LineGroup(NamedTuple):
    x: float
    y: float
    segments: Tuple[Segment, ...]


def resolve(proportions, line_height):
    """Turn relative proportions into absolute distances that add up to
    `line_height`. An empty list stays empty (just a single base line)."""
    if len(proportions) == 0:
        return ()
    total = sum(proportions)
    if total == 0:
        raise InvalidInputError('line proportions must not add up to zero: {}'.format(
            ':'.join('{:g}'.format(p) for p in proportions)))
    return tuple(line_height * p / total for p in proportions)


def slant_run(angle, line_height):
    """Horizontal distance a guide at `angle` covers over one line height"""
    # angle from the vertical
    theta = np.radians(90.0 - angle)
    return float(abs(line_height * np.tan(theta)))


def slant_segments(x, y, line_height, width, line_width, slant):
    if slant is None or slant.count < 1:
        return ()
    b = slant_run(slant.angle, line_height)
    if slant.count == 1:
        xs = np.array([x], dtype=float)
    else:
        step = (width - b) / (slant.count - 1)
        xs = x + step * np.arange(slant.count)
    segments = []
    for xi in xs.tolist():
        if slant.angle <= 90:
            segments.append(Segment(xi, y + line_height, xi + b, y, line_width))
        else:
            segments.append(Segment(xi + b, y + line_height, xi, y, line_width))
    return tuple(segments)


def render_group(origin, line_height, width, distances, line_width,
                 slant: Optional[SlantSpec] = None):
    """Segments of one line group whose upper left corner is `origin`.

    Order: horizontal lines top to bottom, left border, right border, then the
    slanted guides from left to right. Without distances only the base line
    at the bottom of the group is drawn and there are no borders.
    """
    x, y = origin
    segments = []
    if len(distances) == 0:
        segments.append(Segment(x, y + line_height, x + width, y + line_height, line_width))
    else:
        cursor = y
        segments.append(Segment(x, cursor, x + width, cursor, line_width))
        for d in distances:
            cursor += d
            segments.append(Segment(x, cursor, x + width, cursor, line_width))
        segments.append(Segment(x, y, x, y + line_height, line_width))
        segments.append(Segment(x + width, y, x + width, y + line_height, line_width))
    segments.extend(slant_segments(x, y, line_height, width, line_width, slant))
    return tuple(segments)


def tile(paper, margins, line_height, line_spacing, proportions, slant=None, line_width=0.3):
    """Repeat line groups down the page for as long as a whole group fits
    above the bottom margin. Returns a tuple of LineGroup."""
    if line_height <= 0 or line_spacing < 0:
        raise InvalidInputError('line height must be positive and line spacing not negative '
                                '(got {} and {})'.format(line_height, line_spacing))
    distances = resolve(proportions, line_height)
    page = PageGeometry.from_paper(paper, margins)
    groups = []
    y = page.y
    while (y + line_height) < page.bottom:
        segments = render_group((page.x, y), line_height, page.width, distances,
                                line_width, slant)
        groups.append(LineGroup(page.x, y, segments))
        y += line_height + line_spacing
    return tuple(groups)


def page_segments(groups):
    """All segments of a page in drawing order"""
    return tuple(s for g in groups for s in g.segments)
