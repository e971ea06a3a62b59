"""
Parsing of the colon separated number lists used on the command line:

    proportions   "2:1:2"        any number of values, or empty
    slant         "60:10"        angle and number of guides per line, or empty
    margins       "5:15:15:5"    top, right, bottom, left in mm, or empty
"""
from .errors import MalformedNumberListError, WrongArityError
from .geometry import SlantSpec
from .papers import DEFAULT_MARGINS, Margins


def parse_number_list(text, option=''):
    """Split `text` at colons into floats. Every token has to be an unsigned
    integer, the empty string gives an empty tuple."""
    if not text:
        return ()
    values = []
    for token in text.split(':'):
        # int() would accept "+3", " 3" or "3_000"
        if not token.isascii() or not token.isdigit():
            raise MalformedNumberListError(option, text)
        values.append(float(int(token)))
    return tuple(values)


def parse_proportions(text, option='-p'):
    return parse_number_list(text, option)


def parse_slant(text, option='-s'):
    """Returns a SlantSpec, or None when no slanted guides are wanted"""
    values = parse_number_list(text, option)
    if len(values) == 0:
        return None
    if len(values) != 2:
        raise WrongArityError(option, text, (0, 2))
    angle, count = values
    return SlantSpec(angle=angle, count=int(count))


def parse_margins(text, option='-m'):
    values = parse_number_list(text, option)
    if len(values) == 0:
        return DEFAULT_MARGINS
    if len(values) != 4:
        raise WrongArityError(option, text, (0, 4))
    return Margins(*values)
