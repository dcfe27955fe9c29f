"""Display attributes that can be attached to ranges of text

Toggles are singletons:

>>> BOLD
Bold
>>> BOLD.enable_params, BOLD.disable_params
('1', '22')

Colors are values, equal when their channel and index match:

>>> ForegroundColor(196) == ForegroundColor(196)
True
>>> ForegroundColor(3) == BackgroundColor(3)
False
>>> ForegroundColor(196).enable_params, ForegroundColor(196).disable_params
('38;5;196', '39')
>>> parse_attribute('bg:17')
BackgroundColor(17)
"""


class Attribute(object):
    """One terminal display property; subclasses are the closed set of kinds"""
    __slots__ = []

    enable_params = None
    disable_params = None

    def _key(self):
        raise NotImplementedError()

    def __eq__(self, other):
        if not isinstance(other, Attribute):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __setattr__(self, name, value):
        raise AttributeError('%s is immutable' % type(self).__name__)

    def __delattr__(self, name):
        raise AttributeError('%s is immutable' % type(self).__name__)


class Toggle(Attribute):
    __slots__ = ['name', 'enable_params', 'disable_params']

    def __init__(self, name, on, off):
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'enable_params', str(on))
        object.__setattr__(self, 'disable_params', str(off))

    def _key(self):
        return ('toggle', self.name)

    def __repr__(self):
        return self.name


class DefaultColor(Attribute):
    """Resets one color channel; enabling and disabling emit the same code"""
    __slots__ = ['name', 'enable_params', 'disable_params']

    def __init__(self, name, code):
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'enable_params', str(code))
        object.__setattr__(self, 'disable_params', str(code))

    def _key(self):
        return ('default', self.name)

    def __repr__(self):
        return self.name


class _Color256(Attribute):
    __slots__ = ['index']
    selector = None
    default_code = None

    def __init__(self, index):
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValueError('color index must be an int, not %r' % (index,))
        if not 0 <= index <= 255:
            raise ValueError('color index %d not in 0-255' % index)
        object.__setattr__(self, 'index', index)

    @property
    def enable_params(self):
        return '%d;5;%d' % (self.selector, self.index)

    @property
    def disable_params(self):
        return str(self.default_code)

    def _key(self):
        return (self.selector, self.index)

    def __repr__(self):
        return '%s(%d)' % (type(self).__name__, self.index)


class ForegroundColor(_Color256):
    __slots__ = []
    selector = 38
    default_code = 39


class BackgroundColor(_Color256):
    __slots__ = []
    selector = 48
    default_code = 49


BLINK = Toggle('Blink', 5, 25)
BOLD = Toggle('Bold', 1, 22)
INVERSE = Toggle('Inverse', 7, 27)
UNDERLINE = Toggle('Underline', 4, 24)
FG_DEFAULT = DefaultColor('ForegroundDefault', 39)
BG_DEFAULT = DefaultColor('BackgroundDefault', 49)

_NAMED = {
    'blink': BLINK,
    'bold': BOLD,
    'inverse': INVERSE,
    'underline': UNDERLINE,
    'fg:default': FG_DEFAULT,
    'bg:default': BG_DEFAULT,
}

_CHANNELS = {'fg': ForegroundColor, 'bg': BackgroundColor}


def parse_attribute(word):
    r"""Returns the attribute named by a config word like 'bold' or 'fg:33'

    >>> parse_attribute(' Underline ')
    Underline
    >>> parse_attribute('fg:default')
    ForegroundDefault
    >>> parse_attribute('fg:300')
    Traceback (most recent call last):
        ...
    ValueError: color index 300 not in 0-255
    """
    word = word.strip().lower()
    if word in _NAMED:
        return _NAMED[word]
    channel, sep, index = word.partition(':')
    if sep and channel in _CHANNELS and index.isdigit():
        return _CHANNELS[channel](int(index))
    raise ValueError('unknown attribute %r' % word)
