r"""
Select Graphic Rendition escape sequences

see: https://en.wikipedia.org/wiki/ANSI_escape_code#SGR_parameters

>>> BOLD + 'hi' + NO_BOLD
'\x1b[1mhi\x1b[22m'
>>> fg_256(196)
'\x1b[38;5;196m'
>>> enable_sequence(ForegroundColor(7)), disable_sequence(ForegroundColor(7))
('\x1b[38;5;7m', '\x1b[39m')
"""

from attrstr.attributes import ForegroundColor, BackgroundColor

CSI = "\x1b["


def sgr(*params):
    """Returns the escape sequence that sets the given SGR parameters"""
    return CSI + ';'.join(str(p) for p in params) + 'm'


RESET = sgr(0)
BOLD = sgr(1)
UNDERLINE = sgr(4)
BLINK = sgr(5)
INVERSE = sgr(7)
NO_BOLD = sgr(22)
NO_UNDERLINE = sgr(24)
NO_BLINK = sgr(25)
NO_INVERSE = sgr(27)
FG_DEFAULT = sgr(39)
BG_DEFAULT = sgr(49)


def fg_256(n):
    return sgr(38, 5, ForegroundColor(n).index)


def bg_256(n):
    return sgr(48, 5, BackgroundColor(n).index)


def enable_sequence(attr):
    """Returns the sequence that turns attr on"""
    return CSI + attr.enable_params + 'm'


def disable_sequence(attr):
    """Returns the sequence that turns attr off

    Colors are turned off by restoring the channel default, whatever the index.
    """
    return CSI + attr.disable_params + 'm'
