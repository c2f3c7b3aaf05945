#
# Copyright (C) 2012-2013 The Python Software Foundation.
# See LICENSE.txt and CONTRIBUTORS.txt.
#
"""Tests for reqlib.util and the package's exceptions."""
import unittest

from reqlib import ParseError, ReqlibException
from reqlib.util import (Comparison, ENV_VARS, scan_comparison,
                         scan_env_var, scan_identifier, scan_python_str,
                         scan_version_text, skip_ws)


class UtilTestCase(unittest.TestCase):

    def test_skip_ws(self):
        self.assertEqual(skip_ws(' \t x '), 'x ')
        self.assertEqual(skip_ws('x'), 'x')
        self.assertEqual(skip_ws(''), '')
        # only spaces and tabs are whitespace here
        self.assertEqual(skip_ws('\nx'), '\nx')

    def test_identifier(self):
        cases = (
            ('foo', ('foo', '')),
            ('foo-bar baz', ('foo-bar', ' baz')),
            ('A.B-C_D', ('A.B-C_D', '')),
            ('a--b', ('a--b', '')),
            ('foo-', ('foo', '-')),
            ('foo_[bar]', ('foo', '_[bar]')),
            ('1', ('1', '')),
        )
        for s, expected in cases:
            self.assertEqual(scan_identifier(s), expected)
        for s in ('', '-foo', '.foo', ' foo', '[foo]'):
            self.assertRaises(ParseError, scan_identifier, s)

    def test_python_str(self):
        cases = (
            ("'abc' rest", ('abc', ' rest')),
            ('"abc"', ('abc', '')),
            ('"it\'s"', ("it's", '')),
            ("'say \"hi\"'", ('say "hi"', '')),
            ("''", ('', '')),
            ("'a b\tc'", ('a b\tc', '')),
            ("'<=>~!@#$%^&*()-_+={}[]|:;,./?`'", (
                '<=>~!@#$%^&*()-_+={}[]|:;,./?`', '')),
        )
        for s, expected in cases:
            self.assertEqual(scan_python_str(s), expected)
        for s in ("'abc", '"abc', "'a\\b'", "'a\nb'", 'abc', ''):
            self.assertRaises(ParseError, scan_python_str, s)

        with self.assertRaises(ParseError) as cm:
            scan_python_str("'abc")
        self.assertIn('error in string literal', str(cm.exception))
        with self.assertRaises(ParseError) as cm:
            scan_python_str('abc')
        self.assertIn('string literal expected', str(cm.exception))

    def test_env_var(self):
        self.assertEqual(len(ENV_VARS), 12)
        for name in ENV_VARS:
            self.assertEqual(scan_env_var(name + ' =='), (name, ' =='))
            self.assertEqual(scan_env_var(name + '=='), (name, '=='))
        self.assertEqual(scan_env_var('python_full_version<"3"'),
                         ('python_full_version', '<"3"'))
        for s in ('python_versions', 'Python_version', 'platform', 'extra_',
                  '', ' os_name', 'foo'):
            self.assertRaises(ParseError, scan_env_var, s)

    def test_comparison(self):
        cases = (
            ('===1', Comparison.ARBITRARY_EQUAL, '1'),
            ('==1', Comparison.EQUAL, '1'),
            ('~=1', Comparison.COMPATIBLE_RELEASE, '1'),
            ('!=1', Comparison.NOT_EQUAL, '1'),
            ('<=1', Comparison.LESS_THAN_OR_EQUAL, '1'),
            ('>=1', Comparison.GREATER_THAN_OR_EQUAL, '1'),
            ('<1', Comparison.LESS_THAN, '1'),
            ('> 1', Comparison.GREATER_THAN, ' 1'),
        )
        for s, op, rest in cases:
            self.assertEqual(scan_comparison(s), (op, rest))
            self.assertEqual(str(op), s[:-len(rest)])
        for s in ('', '=1', '=>1', '!1', ' ==1'):
            self.assertRaises(ParseError, scan_comparison, s)

    def test_comparison_from_text(self):
        self.assertIs(Comparison.from_text('~='),
                      Comparison.COMPATIBLE_RELEASE)
        self.assertEqual(len(Comparison), 8)
        for s in ('=>', '', ' ==', 'in'):
            self.assertRaises(ParseError, Comparison.from_text, s)
            self.assertRaises(ValueError, Comparison.from_text, s)

    def test_version_text(self):
        self.assertEqual(scan_version_text('1.0.*, <2'), ('1.0.*', ', <2'))
        self.assertEqual(scan_version_text('1!2.0+local-1)'),
                         ('1!2.0+local-1', ')'))
        self.assertEqual(scan_version_text('foo_bar;'), ('foo_bar', ';'))
        for s in ('', ' 1.0', ',1.0'):
            self.assertRaises(ParseError, scan_version_text, s)


class ParseErrorTestCase(unittest.TestCase):

    def test_hierarchy(self):
        self.assertTrue(issubclass(ParseError, ReqlibException))
        self.assertTrue(issubclass(ParseError, ValueError))

    def test_attributes(self):
        e = ParseError('oops', 'def', 'abcdef')
        self.assertEqual(str(e), 'oops')
        self.assertEqual(e.remainder, 'def')
        self.assertEqual(e.text, 'abcdef')
        self.assertEqual(e.position, 3)

        e = ParseError('oops', 'def')
        self.assertEqual(e.text, 'def')
        self.assertEqual(e.position, 0)


if __name__ == '__main__':  # pragma: no cover
    unittest.main()
