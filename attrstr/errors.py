"""Exceptions raised by attrstr"""


class AttrStrError(Exception):
    pass


class BoundaryError(AttrStrError, ValueError):
    """A byte range that runs past the text or splits a character"""


class ReversedRangeError(BoundaryError):
    """A byte range whose start comes after its end"""


class SchemeError(AttrStrError, ValueError):
    """Malformed highlighting scheme configuration"""
