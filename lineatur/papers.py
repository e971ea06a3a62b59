"""
Paper sizes and page geometry. All lengths are in mm.

Size explanation: https://unsharpen.com/paper-sizes/
"""
from types import MappingProxyType
from typing import NamedTuple

from .errors import UnknownPaperSizeError


class PaperSize(NamedTuple):
    width: float
    height: float


class Margins(NamedTuple):
    top: float
    right: float
    bottom: float
    left: float


class PageGeometry(NamedTuple):
    """Printable rectangle of a page once the margins are taken off"""
    x: float
    y: float
    width: float
    bottom: float  # lowest y a line group may reach (exclusive)

    @classmethod
    def from_paper(cls, paper, margins):
        return cls(x=margins.left,
                   y=margins.top,
                   width=paper.width - margins.right - margins.left,
                   bottom=paper.height - margins.bottom)


PAPER_SIZES = MappingProxyType({
    "A5": PaperSize(148.0, 210.0),
    "A4": PaperSize(210.0, 297.0),
    "Invoice": PaperSize(140.0, 216.0),
    "Legal": PaperSize(203.0, 330.0),
    "Letter": PaperSize(216.0, 279.0),
})

DEFAULT_PAPER = "A4"
DEFAULT_MARGINS = Margins(5.0, 15.0, 15.0, 5.0)


def paper_names():
    return tuple(PAPER_SIZES)


def paper_size(name):
    """Look up a paper size by name. Names are case sensitive ("A4", "Letter")."""
    try:
        return PAPER_SIZES[name]
    except KeyError:
        raise UnknownPaperSizeError(name, paper_names()) from None
