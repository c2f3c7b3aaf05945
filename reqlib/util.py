#
# Copyright (C) 2012 The Python Software Foundation.
# See LICENSE.txt and CONTRIBUTORS.txt.
#
"""
Lexical primitives shared by the requirement, marker and version grammars.

Each ``scan_*`` function takes the text still to be parsed and returns a
tuple of the value recognised at its start and the remainder, or raises
:class:`~reqlib.ParseError` if nothing acceptable is found there.
"""
import enum
import re

from . import ParseError

__all__ = ['Comparison', 'ENV_VARS', 'scan_identifier', 'scan_python_str',
           'scan_env_var', 'scan_comparison', 'scan_version_text',
           'skip_ws']

# PEP 508 only allows spaces and tabs between tokens.
WS = re.compile(r'[ \t]*')

IDENTIFIER = re.compile(r'[A-Za-z0-9](?:[-_.]*[A-Za-z0-9])*')

# Characters allowed in a marker string literal, apart from the quotes.
_PYTHON_STR_C = r"[ \tA-Za-z0-9().{}\-_*#:;,/?\[\]!~`@$%^&=+|<>]"
PYTHON_STR = re.compile(r"'((?:%s|\")*)'|\"((?:%s|')*)\"" % (_PYTHON_STR_C,
                                                             _PYTHON_STR_C))

ENV_VARS = frozenset([
    'python_version',
    'python_full_version',
    'os_name',
    'sys_platform',
    'platform_release',
    'platform_system',
    'platform_version',
    'platform_machine',
    'platform_python_implementation',
    'implementation_name',
    'implementation_version',
    'extra',
])

# Longest names first, so that no name is matched as a prefix of another.
ENV_VAR = re.compile(r'(%s)\b' % '|'.join(sorted(ENV_VARS, key=len,
                                                 reverse=True)))

COMPARE_OP = re.compile(r'===|==|~=|!=|<=|>=|<|>')
VERSION_TEXT = re.compile(r'[A-Za-z0-9\-_.*+!]+')


class Comparison(enum.Enum):
    """
    The version comparison operators of PEP 440.
    """
    LESS_THAN = '<'
    LESS_THAN_OR_EQUAL = '<='
    NOT_EQUAL = '!='
    EQUAL = '=='
    GREATER_THAN_OR_EQUAL = '>='
    GREATER_THAN = '>'
    COMPATIBLE_RELEASE = '~='
    ARBITRARY_EQUAL = '==='

    @classmethod
    def from_text(cls, s):
        """
        Look up an operator from its exact textual form.

        :raises ParseError: if *s* isn't one of the eight operators.
        """
        try:
            return cls(s)
        except ValueError:
            raise ParseError('unknown comparison operator: %r' % s, s)

    def __str__(self):
        return self.value


def skip_ws(s):
    return s[WS.match(s).end():]


def scan_identifier(s):
    m = IDENTIFIER.match(s)
    if not m:
        raise ParseError('identifier expected: %s' % s, s)
    return m.group(0), s[m.end():]


def scan_python_str(s):
    """
    Scan a quoted string literal and return its content without the quotes.
    """
    m = PYTHON_STR.match(s)
    if not m:
        if s and s[0] in '\'"':
            raise ParseError('error in string literal: %s' % s, s)
        raise ParseError('string literal expected: %s' % s, s)
    result = m.group(1)
    if result is None:
        result = m.group(2)
    return result, s[m.end():]


def scan_env_var(s):
    m = ENV_VAR.match(s)
    if not m:
        raise ParseError('environment marker name expected: %s' % s, s)
    return m.group(1), s[m.end():]


def scan_comparison(s):
    m = COMPARE_OP.match(s)
    if not m:
        raise ParseError('comparison operator expected: %s' % s, s)
    return Comparison.from_text(m.group(0)), s[m.end():]


def scan_version_text(s):
    """
    Scan the version part of a version constraint. It isn't validated
    here, so that wildcards and arbitrary strings (for ``===``) get through.
    """
    m = VERSION_TEXT.match(s)
    if not m:
        raise ParseError('invalid version: %s' % s, s)
    return m.group(0), s[m.end():]
