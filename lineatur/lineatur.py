#!/usr/bin/env python3

"""
Make ruled paper ("Lineatur") for calligraphy practice as a PDF, SVG or
GCode file. Units are mm. Print without scaling.

The output type follows the file name: .pdf, .svg or .gcode (pen plotter).

Examples:
---------
Deutsche Kurrentschrift, 2:1:2 with 10 slanted helper lines at 60 degrees:
lineatur -p 2:1:2 -s 60:10

Copperplate on US letter with wider margins:
lineatur --preset copperplate -ps Letter -m 15:15:15:15 -o copperplate.pdf

Just base lines, 8mm apart, for a plotter:
lineatur -lh 8 -ls 0 -o lines.gcode
"""
import argparse
import sys

from .errors import LineaturError
from .geometry import page_segments, tile
from .output import document_class, write_page
from .papers import DEFAULT_PAPER, paper_names, paper_size
from .parsing import parse_margins, parse_proportions, parse_slant
from .presets import get_preset, preset_names, usage_examples

NOTES = """\
Line proportions: no argument = just one line
Line proportions: num = two lines (the value doesn't matter)
Line proportions: num[:num...]
Slanted helper lines: "num:num" the angle and number per line of slanted helper lines
Page margins: num:num:num:num top, right, bottom and left margins of the page in mm
"""


def positive_int(text):
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError('{} is not a positive integer'.format(text))
    return value


def unsigned_int(text):
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError('{} must not be negative'.format(text))
    return value


def positive_float(text):
    value = float(text)
    if not value > 0:
        raise argparse.ArgumentTypeError('{} is not a positive number'.format(text))
    return value


def parse_args(argv=None):
    PARSER = argparse.ArgumentParser(
        prog='lineatur',
        description='Make ruled paper for calligraphy practice. Units are mm.',
        epilog=NOTES + usage_examples(),
        formatter_class=argparse.RawDescriptionHelpFormatter)
    PARSER.add_argument('-o', '--output', help='Output file (.pdf, .svg or .gcode)',
                        default='output.pdf')
    PARSER.add_argument('-ps', '--paper-size', dest='paper_size',
                        help='Paper size of your printer. Possible values: {}. '
                        'Print without scaling.'.format(', '.join(paper_names())),
                        default=DEFAULT_PAPER)
    PARSER.add_argument('-p', '--proportions', help='Line proportions, e.g. 2:1:2',
                        default=None)
    PARSER.add_argument('-s', '--slant', help='Slanted helper lines: angle:number, e.g. 60:10',
                        default=None)
    PARSER.add_argument('-m', '--margins', help='Page margins top:right:bottom:left',
                        default='5:15:15:5')
    PARSER.add_argument('-lh', '--line-height', dest='line_height', type=positive_int,
                        help='Line height in mm.', default=10)
    PARSER.add_argument('-ls', '--line-spacing', dest='line_spacing', type=unsigned_int,
                        help='Line spacing in mm.', default=5)
    PARSER.add_argument('-lw', '--line-width', dest='line_width', type=positive_float,
                        help='Line width in mm.', default=0.3)
    PARSER.add_argument('--preset', choices=preset_names(),
                        help='Proportions and slant of a known script. '
                        '-p and -s override the preset values.')
    PARSER.add_argument('-v', '--verbose', help='Print out the parameters used.',
                        action='store_true')
    return PARSER.parse_args(argv)


def layout(config):
    """Validate the options and lay out the page. Returns (paper, groups).
    Raises a LineaturError for anything that does not make sense."""
    paper = paper_size(config.paper_size)
    preset = get_preset(config.preset) if config.preset else None
    if config.proportions is not None:
        proportions = parse_proportions(config.proportions)
    else:
        proportions = preset.proportions if preset else ()
    if config.slant is not None:
        slant = parse_slant(config.slant)
    else:
        slant = preset.slant if preset else None
    margins = parse_margins(config.margins)
    # fail on the file type before any drawing happens
    document_class(config.output)

    if config.verbose:
        print('Parameters:')
        print('Paper size: {} ({:g}x{:g}mm)'.format(config.paper_size, paper.width, paper.height))
        print('Margins: {}'.format(':'.join('{:g}'.format(m) for m in margins)))
        print('Line height: {}mm'.format(config.line_height))
        print('Line spacing: {}mm'.format(config.line_spacing))
        print('Line width: {}mm'.format(config.line_width))
        print('Proportions: {}'.format(':'.join('{:g}'.format(p) for p in proportions) or '-'))
        if slant:
            print('Slant: {:g} deg, {} lines'.format(slant.angle, slant.count))

    groups = tile(paper, margins,
                  line_height=config.line_height,
                  line_spacing=config.line_spacing,
                  proportions=proportions,
                  slant=slant,
                  line_width=config.line_width)
    return paper, groups


def run(config):
    paper, groups = layout(config)
    if config.verbose:
        print('Number of line groups: {}'.format(len(groups)))
    write_page(config.output, paper, page_segments(groups))
    print('Saved to file {}'.format(config.output))


def main(argv=None):
    config = parse_args(argv)
    try:
        run(config)
    except LineaturError as e:
        print(e, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
