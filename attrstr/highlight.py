"""Syntax highlighting of source text into AttributedText

Tokens come from pygments; each token type is styled with the attributes
its nearest styled ancestor maps to in a scheme.

Schemes can be written as ini text::

    [syntax]
    Keyword = bold, fg:33
    String.Doc = fg:244, underline
    Comment =
"""

import configparser
import logging

import pygments
from pygments import token
from pygments.lexers import PythonLexer

from attrstr.attributed import AttributedText
from attrstr.attributes import parse_attribute, BOLD, UNDERLINE, INVERSE, ForegroundColor, BackgroundColor
from attrstr.errors import SchemeError

logger = logging.getLogger(__name__)

DEFAULT_SCHEME = {
    token.Keyword: (BOLD, ForegroundColor(33)),
    token.Keyword.Constant: (ForegroundColor(33),),
    token.Name.Builtin: (ForegroundColor(36),),
    token.Name.Function: (ForegroundColor(178),),
    token.Name.Class: (BOLD, ForegroundColor(178)),
    token.Name.Decorator: (ForegroundColor(140),),
    token.String: (ForegroundColor(34),),
    token.String.Doc: (ForegroundColor(244),),
    token.Number: (ForegroundColor(135),),
    token.Comment: (ForegroundColor(244),),
    token.Generic.Emph: (UNDERLINE,),
    token.Generic.Strong: (BOLD,),
    token.Error: (INVERSE, BackgroundColor(160)),
}

SECTION = 'syntax'


def style_for(ttype, scheme):
    """Returns the attributes for ttype, falling back to its ancestors

    >>> style_for(token.Name.Builtin.Pseudo, DEFAULT_SCHEME)
    (ForegroundColor(36),)
    >>> style_for(token.Text, DEFAULT_SCHEME)
    ()
    """
    while ttype is not None:
        if ttype in scheme:
            return tuple(scheme[ttype])
        ttype = ttype.parent
    return ()


def highlight(source, lexer=None, scheme=None):
    """Returns an AttributedText of source with token attributes attached

    The plain text is the concatenation of token values; lexers normalize
    line endings, so it can differ from source there.
    """
    if lexer is None:
        lexer = PythonLexer(stripnl=False, ensurenl=False)
    if scheme is None:
        scheme = DEFAULT_SCHEME
    tokens = list(pygments.lex(source, lexer))
    text = AttributedText(''.join(value for _, value in tokens))
    offset = 0
    for ttype, value in tokens:
        end = offset + len(value.encode('utf-8'))
        for attribute in style_for(ttype, scheme):
            text.attach(attribute, offset, end)
        offset = end
    logger.debug('highlighted %d tokens into %r', len(tokens), text)
    return text


def token_type(path):
    """Returns the pygments token type named by a dotted path like 'Name.Function'"""
    parts = path.strip().split('.')
    ttype = getattr(token, parts[0], None)
    if not token.is_token_subtype(ttype, token.Token):
        raise SchemeError('unknown token type %r' % path)
    for part in parts[1:]:
        if not part or not part[0].isupper():
            raise SchemeError('unknown token type %r' % path)
        ttype = getattr(ttype, part)
    return ttype


def parse_scheme(config_text, base=None):
    """Returns a new scheme: base overridden by the [syntax] section of config_text

    >>> s = parse_scheme('[syntax]\\nKeyword = underline\\nComment =\\n')
    >>> s[token.Keyword], s[token.Comment]
    ((Underline,), ())
    >>> s[token.String] == DEFAULT_SCHEME[token.String]
    True
    """
    if base is None:
        base = DEFAULT_SCHEME
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str
    try:
        parser.read_string(config_text)
    except configparser.Error as e:
        raise SchemeError('cannot parse scheme: %s' % e)
    scheme = dict(base)
    if not parser.has_section(SECTION):
        return scheme
    for key, value in parser.items(SECTION):
        words = [w for w in value.split(',') if w.strip()]
        try:
            attributes = tuple(parse_attribute(w) for w in words)
        except ValueError as e:
            raise SchemeError('bad style for %s: %s' % (key, e))
        ttype = token_type(key)
        logger.debug('scheme override %s = %r', ttype, attributes)
        scheme[ttype] = attributes
    return scheme
