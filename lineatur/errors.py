"""
Exceptions raised for bad lineatur parameters.

Everything derives from ValueError, so a caller can catch the whole family
with a single `except ValueError`.
"""


class LineaturError(ValueError):
    """Base class for all configuration and input errors"""


class UnknownPaperSizeError(LineaturError):
    def __init__(self, name, known=()):
        self.name = name
        msg = 'paper size "{}" chosen for printing is unknown/not allowed'.format(name)
        if known:
            msg += ' (possible values: {})'.format(', '.join(known))
        super().__init__(msg)


class UnknownPresetError(LineaturError):
    def __init__(self, name, known=()):
        self.name = name
        msg = 'unknown preset "{}"'.format(name)
        if known:
            msg += ' (possible values: {})'.format(', '.join(known))
        super().__init__(msg)


class MalformedNumberListError(LineaturError):
    """A colon separated list holds something that is not an unsigned integer"""
    def __init__(self, option, text):
        self.option = option
        self.text = text
        super().__init__('wrong arguments for {}: {}'.format(option, text))


class WrongArityError(LineaturError):
    def __init__(self, option, text, allowed):
        self.option = option
        self.text = text
        self.allowed = tuple(allowed)
        counts = ' or '.join(str(n) for n in self.allowed)
        super().__init__('wrong number of arguments for {}: {} (expected {} values)'.format(
            option, text, counts))


class InvalidInputError(LineaturError):
    """Geometry input that passed parsing but cannot be laid out"""


class UnsupportedFormatError(LineaturError):
    def __init__(self, filename, known=()):
        self.filename = filename
        msg = 'cannot write "{}": unsupported file type'.format(filename)
        if known:
            msg += ' (use one of: {})'.format(', '.join(known))
        super().__init__(msg)
