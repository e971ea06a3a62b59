import xml.etree.ElementTree as ET

import pytest

from lineatur.errors import UnsupportedFormatError
from lineatur.geometry import Segment, SlantSpec, page_segments, tile
from lineatur.output import (GcodeDocument, PdfDocument, SvgDocument, document_class,
                             open_document, write_page)
from lineatur.papers import DEFAULT_MARGINS, paper_size

SVG_NS = '{http://www.w3.org/2000/svg}'
A4 = paper_size("A4")


@pytest.fixture
def segments():
    return page_segments(tile(A4, DEFAULT_MARGINS, 10, 5, [2, 1, 2], SlantSpec(60, 10)))


@pytest.mark.parametrize("filename, cls", [
    ("out.pdf", PdfDocument),
    ("OUT.PDF", PdfDocument),
    ("dir/out.svg", SvgDocument),
    ("lines.gcode", GcodeDocument),
])
def test_document_class(filename, cls):
    assert document_class(filename) is cls


@pytest.mark.parametrize("filename", ["out.png", "output", "out.pdf.txt"])
def test_unsupported_format(filename):
    with pytest.raises(UnsupportedFormatError) as exc:
        document_class(filename)
    assert ".svg" in str(exc.value)


def test_pdf(tmp_path, segments):
    fn = tmp_path / "out.pdf"
    write_page(str(fn), A4, segments)
    data = fn.read_bytes()
    assert data.startswith(b"%PDF")
    assert data.rstrip().endswith(b"%%EOF")


def test_pdf_more_pages(tmp_path, segments):
    fn = tmp_path / "two.pdf"
    with open_document(str(fn), A4) as doc:
        doc.add_page()
        doc.draw(segments)
        doc.add_page()
        doc.draw(segments)
        doc.save(str(fn))
    assert doc.pages == 2
    assert fn.read_bytes().startswith(b"%PDF")


def test_pdf_nothing_written_without_save(tmp_path, segments):
    fn = tmp_path / "never.pdf"
    with open_document(str(fn), A4) as doc:
        doc.draw(segments)
    assert not fn.exists()


def test_svg(tmp_path, segments):
    fn = tmp_path / "out.svg"
    write_page(str(fn), A4, segments)
    root = ET.parse(str(fn)).getroot()
    assert root.get("width") == "210.0mm"
    assert root.get("height") == "297.0mm"
    lines = root.findall(".//{}line".format(SVG_NS))
    assert len(lines) == len(segments)
    first = lines[0]
    assert float(first.get("x1")) == pytest.approx(segments[0].x1)
    assert float(first.get("y1")) == pytest.approx(segments[0].y1)
    assert float(first.get("stroke-width")) == pytest.approx(0.3)


def test_svg_line_width_switch():
    doc = SvgDocument(A4)
    doc.draw([Segment(0, 0, 10, 0, 0.3), Segment(0, 5, 10, 5, 0.3), Segment(0, 10, 10, 10, 0.8)])
    root = ET.fromstring(doc.tostring())
    widths = [float(l.get("stroke-width")) for l in root.iter("{}line".format(SVG_NS))]
    assert widths == pytest.approx([0.3, 0.3, 0.8])
    assert doc.line_width == 0.8


def test_svg_single_page():
    doc = SvgDocument(A4)
    doc.add_page()
    with pytest.raises(RuntimeError):
        doc.add_page()


def test_gcode_flips_y():
    doc = GcodeDocument(A4)
    doc.draw([Segment(5, 5, 195, 5, 0.3)])
    line = doc._lines[0]
    assert (line.start.x, line.start.y) == pytest.approx((5, 292))
    assert (line.end.x, line.end.y) == pytest.approx((195, 292))


def test_gcode(tmp_path, segments):
    fn = tmp_path / "out.gcode"
    write_page(str(fn), A4, segments)
    text = fn.read_text()
    assert "Pen down" in text
    assert "Pen up" in text
    assert "go home" in text
