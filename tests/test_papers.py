import pytest

from lineatur.errors import LineaturError, UnknownPaperSizeError
from lineatur.papers import (DEFAULT_MARGINS, PAPER_SIZES, Margins, PageGeometry, PaperSize,
                             paper_names, paper_size)


def test_catalog():
    assert paper_size("A5") == PaperSize(148, 210)
    assert paper_size("A4") == PaperSize(210, 297)
    assert paper_size("Invoice") == PaperSize(140, 216)
    assert paper_size("Legal") == PaperSize(203, 330)
    assert paper_size("Letter") == PaperSize(216, 279)
    assert paper_names() == ("A5", "A4", "Invoice", "Legal", "Letter")


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        PAPER_SIZES["A3"] = PaperSize(297, 420)


@pytest.mark.parametrize("name", ["a4", "A3", "", "Tabloid"])
def test_unknown_size(name):
    with pytest.raises(UnknownPaperSizeError) as exc:
        paper_size(name)
    assert exc.value.name == name
    assert isinstance(exc.value, LineaturError)
    assert "Letter" in str(exc.value)


def test_page_geometry():
    page = PageGeometry.from_paper(PaperSize(210, 297), Margins(5, 15, 15, 5))
    assert page == PageGeometry(x=5, y=5, width=190, bottom=282)


def test_default_margins():
    assert DEFAULT_MARGINS == Margins(top=5, right=15, bottom=15, left=5)
