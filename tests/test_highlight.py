import unittest

from pygments import token
from pygments.lexers import get_lexer_by_name

from attrstr.attributed import AttributeRange
from attrstr.attributes import BOLD, UNDERLINE, ForegroundColor
from attrstr.errors import SchemeError
from attrstr.highlight import highlight, parse_scheme, style_for, token_type, DEFAULT_SCHEME


class TestHighlight(unittest.TestCase):
    def test_keeps_plain_text(self):
        source = 'def f(x):\n    return "日本" # ok\n'
        self.assertEqual(highlight(source).plain_text, source)

    def test_keyword_styled(self):
        text = highlight('return x')
        self.assertIn(AttributeRange(BOLD, 0, 6), text.ranges())
        self.assertTrue(text.render().startswith('\x1b[1m\x1b[38;5;33mreturn'))

    def test_multibyte_string_range(self):
        source = '"日本"'
        text = highlight(source)
        self.assertEqual(text.ranges(), (AttributeRange(ForegroundColor(34), 0, 8),))

    def test_custom_scheme(self):
        scheme = {token.Name: (UNDERLINE,)}
        text = highlight('a = b', scheme=scheme)
        self.assertEqual(text.ranges(), (AttributeRange(UNDERLINE, 0, 1),
                                         AttributeRange(UNDERLINE, 4, 5)))

    def test_empty_scheme_renders_plain(self):
        self.assertEqual(highlight('x = 1', scheme={}).render(), 'x = 1')

    def test_other_lexer(self):
        lexer = get_lexer_by_name('json', stripnl=False, ensurenl=False)
        text = highlight('{"a": 1}', lexer=lexer, scheme={token.Number: (BOLD,)})
        self.assertEqual(text.ranges(), (AttributeRange(BOLD, 6, 7),))


class TestScheme(unittest.TestCase):
    def test_style_for_walks_parents(self):
        self.assertEqual(style_for(token.String.Double, DEFAULT_SCHEME),
                         DEFAULT_SCHEME[token.String])
        self.assertEqual(style_for(token.Punctuation, DEFAULT_SCHEME), ())

    def test_token_type(self):
        self.assertIs(token_type('Name.Function'), token.Name.Function)
        self.assertIs(token_type('String'), token.Literal.String)
        for bad in ['name', 'Nope', 'Name.function', 'Name..Function', 'is_token_subtype']:
            self.assertRaises(SchemeError, token_type, bad)

    def test_parse_scheme(self):
        scheme = parse_scheme('[syntax]\nKeyword = underline, fg:1\nName.Function =\n')
        self.assertEqual(scheme[token.Keyword], (UNDERLINE, ForegroundColor(1)))
        self.assertEqual(scheme[token.Name.Function], ())
        self.assertEqual(scheme[token.Number], DEFAULT_SCHEME[token.Number])
        self.assertEqual(DEFAULT_SCHEME[token.Keyword], (BOLD, ForegroundColor(33)))

    def test_parse_scheme_base(self):
        scheme = parse_scheme('[syntax]\nComment = bold\n', base={})
        self.assertEqual(scheme, {token.Comment: (BOLD,)})

    def test_parse_scheme_without_section(self):
        self.assertEqual(parse_scheme('[other]\nx = 1\n'), DEFAULT_SCHEME)

    def test_parse_scheme_errors(self):
        self.assertRaises(SchemeError, parse_scheme, 'Keyword = bold')
        self.assertRaises(SchemeError, parse_scheme, '[syntax]\nKeyword = shiny\n')
        self.assertRaises(SchemeError, parse_scheme, '[syntax]\nKeyword = fg:999\n')
        self.assertRaises(SchemeError, parse_scheme, '[syntax]\nkeyword = bold\n')


if __name__ == '__main__':
    unittest.main()
