"""Ruled paper ("Lineatur") for calligraphy practice."""
from .errors import (InvalidInputError, LineaturError, MalformedNumberListError,
                     UnknownPaperSizeError, UnknownPresetError, UnsupportedFormatError,
                     WrongArityError)
from .geometry import LineGroup, Segment, SlantSpec, page_segments, render_group, resolve, tile
from .papers import DEFAULT_MARGINS, PAPER_SIZES, Margins, PageGeometry, PaperSize, paper_size

__version__ = "0.1.0"
