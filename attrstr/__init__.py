"""Strings with terminal display attributes over byte ranges, rendered with ANSI escape codes"""

from attrstr.attributes import (Attribute, BLINK, BOLD, INVERSE, UNDERLINE,
                                FG_DEFAULT, BG_DEFAULT, ForegroundColor,
                                BackgroundColor, parse_attribute)
from attrstr.attributed import AttributedText, AttributeRange
from attrstr.errors import AttrStrError, BoundaryError, ReversedRangeError, SchemeError
