"""
Documents that lineatur segments get drawn into.

* PDF via Cairo (pycairo bindings: https://pycairo.readthedocs.io/en/latest/index.html)
* SVG via svgwrite (https://pypi.org/project/svgwrite/)
* GCode for a pen plotter via svg-to-gcode (https://pypi.org/project/svg-to-gcode/)

Every document works in mm with the origin in the upper left corner of the
page. Nothing is written to disk before save() is called.
"""
import io
import os

try:
    import cairo
except ImportError:
    raise ImportError('PDF output needs pycairo. https://pypi.org/project/pycairo/')
try:
    import svgwrite
except ImportError:
    raise ImportError('SVG output needs the svgwrite module. https://pypi.org/project/svgwrite/')
try:
    from svg_to_gcode.compiler import Compiler, interfaces
    from svg_to_gcode import geometry as geom
except ImportError:
    raise ImportError('GCode output needs the svg_to_gcode library. '
                      'Install with pip: `pip install svg-to-gcode`')

from .errors import UnsupportedFormatError

MM_TO_PT = 72.0 / 25.4


class Document(object):
    """A single page document. Use it as a context manager:

        with open_document('out.pdf', paper) as doc:
            doc.add_page()
            doc.draw(segments)
            doc.save('out.pdf')
    """
    extension = None
    max_pages = 1

    def __init__(self, paper):
        self.paper = paper
        self.line_width = None
        self.pages = 0

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    def set_line_width(self, width):
        self.line_width = width

    def add_page(self):
        if self.max_pages and self.pages >= self.max_pages:
            raise RuntimeError('{} output holds at most {} page(s)'.format(
                self.extension, self.max_pages))
        self.pages += 1

    def stroke_segment(self, x1, y1, x2, y2):
        raise NotImplementedError

    def draw(self, segments):
        """Stroke all segments, switching the line width only when it changes"""
        if self.pages == 0:
            self.add_page()
        for s in segments:
            if s.width != self.line_width:
                self.set_line_width(s.width)
            self.stroke_segment(s.x1, s.y1, s.x2, s.y2)

    def save(self, filename):
        raise NotImplementedError

    def close(self):
        pass


class PdfDocument(Document):
    """Portrait PDF without page margins, drawn with Cairo in mm user units"""
    extension = '.pdf'
    max_pages = 0  # no limit

    def __init__(self, paper):
        super().__init__(paper)
        self._buffer = io.BytesIO()
        self._surface = cairo.PDFSurface(self._buffer,
                                         paper.width * MM_TO_PT,
                                         paper.height * MM_TO_PT)
        self._ctx = cairo.Context(self._surface)
        self._ctx.scale(MM_TO_PT, MM_TO_PT)
        self._ctx.set_source_rgb(0, 0, 0)
        self._finished = False

    def set_line_width(self, width):
        super().set_line_width(width)
        self._ctx.set_line_width(width)

    def add_page(self):
        # cairo starts with an open page; emit it once a second one is wanted
        if self.pages > 0:
            self._ctx.show_page()
        super().add_page()

    def stroke_segment(self, x1, y1, x2, y2):
        self._ctx.move_to(x1, y1)
        self._ctx.line_to(x2, y2)
        self._ctx.stroke()

    def save(self, filename):
        self.close()
        with open(filename, 'wb') as f:
            f.write(self._buffer.getvalue())

    def close(self):
        if not self._finished:
            self._surface.finish()
            self._finished = True


class SvgDocument(Document):
    extension = '.svg'

    def __init__(self, paper):
        super().__init__(paper)
        self._dwg = svgwrite.Drawing(size=('{}mm'.format(paper.width),
                                           '{}mm'.format(paper.height)))
        self._dwg.viewbox(0, 0, paper.width, paper.height)
        self._lines = self._dwg.add(self._dwg.g(id='lineatur', stroke='black',
                                                stroke_linecap='butt'))

    def stroke_segment(self, x1, y1, x2, y2):
        attribs = {} if self.line_width is None else {'stroke_width': self.line_width}
        self._lines.add(self._dwg.line(start=(x1, y1), end=(x2, y2), **attribs))

    def tostring(self):
        return self._dwg.tostring()

    def save(self, filename):
        self._dwg.saveas(filename)


class PenPlotterInterface(interfaces.Gcode):
    """
    Interface for a plotter with a servo-controlled pen holder. The laser
    commands of svg_to_gcode are turned into pen up/down moves.
    """
    pen_up = 270
    pen_down = 70

    def laser_off(self):
        return f"M3 S{self.pen_up}; Pen up\nG4 P0.5; Pause"

    # laser power is ignored, only used to lower the pen
    def set_laser_power(self, power):
        if power < 0 or power > 1:
            raise ValueError(f"{power} is out of bounds. Laser power must be given between 0 and 1. "
                             f"The interface will scale it correctly.")
        return f"M3 S{self.pen_down}; Pen down\nG4 P0.5; Pause"


class GcodeDocument(Document):
    """
    Pen plotter output. The plotter's origin is the lower left corner, so y
    is flipped to make the plot look like the PDF. Line widths are up to the
    pen and are ignored.
    """
    extension = '.gcode'
    movement_speed = 5000  # mm/min
    cutting_speed = 1400   # mm/min

    def __init__(self, paper):
        super().__init__(paper)
        self._lines = []

    def stroke_segment(self, x1, y1, x2, y2):
        h = self.paper.height
        self._lines.append(geom.Line(geom.Vector(x1, h - y1), geom.Vector(x2, h - y2)))

    def compiler(self):
        gcode_compiler = Compiler(PenPlotterInterface,
                                  movement_speed=self.movement_speed,
                                  cutting_speed=self.cutting_speed,
                                  pass_depth=1,
                                  custom_footer=["G1 F4000 X0.0 Y0.0; go home"])
        gcode_compiler.append_curves(self._lines)
        return gcode_compiler

    def save(self, filename):
        self.compiler().compile_to_file(filename)


DOCUMENT_TYPES = {cls.extension: cls for cls in (PdfDocument, SvgDocument, GcodeDocument)}


def document_class(filename):
    """Pick the document type from the file extension"""
    ext = os.path.splitext(filename)[1].lower()
    try:
        return DOCUMENT_TYPES[ext]
    except KeyError:
        raise UnsupportedFormatError(filename, sorted(DOCUMENT_TYPES)) from None


def open_document(filename, paper):
    return document_class(filename)(paper)


def write_page(filename, paper, segments):
    """Draw one page of segments and save it to `filename`"""
    with open_document(filename, paper) as doc:
        doc.add_page()
        doc.draw(segments)
        doc.save(filename)
