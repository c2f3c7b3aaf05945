# -*- coding: utf-8 -*-
#
# Copyright (C) 2012-2017 Vinay Sajip.
# Licensed to the Python Software Foundation under a contributor agreement.
# See LICENSE.txt and CONTRIBUTORS.txt.
#
"""
Parser for the environment markers micro-language defined in PEP 508.

Markers are parsed into a tree of :class:`Basic`, :class:`And` and
:class:`Or` nodes. Evaluating the tree against a particular environment is
left to the caller.
"""

# Note: the grammar in PEP 508 writes marker_or, marker_and and marker_expr
# as mutually recursive alternatives. Parsed that way, each level would call
# itself before consuming any input. Here each precedence level only calls
# the next higher one, and repetitions of 'and' / 'or' are handled with a
# loop, so every recursive call consumes at least a '('.

import enum
import re

from . import ParseError
from .util import Comparison, scan_env_var, scan_python_str, skip_ws

__all__ = ['Membership', 'Variable', 'Literal', 'MarkerExpr', 'Basic', 'And',
           'Or', 'parse_marker', 'scan_marker']

MARKER_OP = re.compile(r'(===|==|~=|!=|<=|>=|<|>|in\b|not[ \t]+in\b)')
OR = re.compile(r'or\b')
AND = re.compile(r'and\b')


class Membership(enum.Enum):
    IN = 'in'
    NOT_IN = 'not in'

    def __str__(self):
        return self.value


def _marker_op(s):
    """
    Look up a marker operator from its text: one of the comparison
    operators, 'in' or 'not in'.
    """
    if isinstance(s, (Comparison, Membership)):
        return s
    s = ' '.join(s.split())
    if s in ('in', 'not in'):
        return Membership(s)
    return Comparison.from_text(s)


class Variable(str):
    """
    The name of an environment marker variable, such as ``os_name``.
    """
    __slots__ = ()

    def __repr__(self):
        return 'Variable(%s)' % str.__repr__(self)


class Literal(str):
    """
    The content of a quoted string in a marker, without the quotes.
    """
    __slots__ = ()

    def __repr__(self):
        return 'Literal(%s)' % str.__repr__(self)

    def quoted(self):
        if '"' in self:
            return "'%s'" % self
        return '"%s"' % self


def _operand_str(o):
    if isinstance(o, Literal):
        return o.quoted()
    return str(o)


class MarkerExpr(object):
    """
    Base class for the nodes of a parsed marker. Nodes are immutable, and
    compare equal when they are of the same kind and have equal fields.
    """
    __slots__ = ()
    _fields = ()

    def __init__(self, *args):
        if len(args) != len(self._fields):
            raise TypeError('%s takes %d arguments (%d given)' %
                            (self.__class__.__name__, len(self._fields),
                             len(args)))
        for name, value in zip(self._fields, args):
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError('%s is immutable' % self.__class__.__name__)

    def _astuple(self):
        return tuple(getattr(self, name) for name in self._fields)

    def __eq__(self, other):
        if not isinstance(other, MarkerExpr):
            return NotImplemented
        return (type(self) is type(other) and
                self._astuple() == other._astuple())

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.__class__.__name__,) + self._astuple())

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__,
                           ', '.join(repr(v) for v in self._astuple()))


class Basic(MarkerExpr):
    """
    A single comparison, such as ``python_version < "3.8"``.
    """
    __slots__ = _fields = ('left', 'op', 'right')

    def __init__(self, left, op, right):
        super(Basic, self).__init__(left, _marker_op(op), right)

    def __str__(self):
        return '%s %s %s' % (_operand_str(self.left), self.op,
                             _operand_str(self.right))


class _Binary(MarkerExpr):
    __slots__ = _fields = ('left', 'right')
    keyword = None

    def _child_str(self, child, right):
        s = str(child)
        # 'and' binds tighter than 'or', and both associate to the left.
        if isinstance(child, Or) and isinstance(self, And):
            s = '(%s)' % s
        elif right and type(child) is type(self):
            s = '(%s)' % s
        return s

    def __str__(self):
        return '%s %s %s' % (self._child_str(self.left, False), self.keyword,
                             self._child_str(self.right, True))


class And(_Binary):
    __slots__ = ()
    keyword = 'and'


class Or(_Binary):
    __slots__ = ()
    keyword = 'or'


def _marker_var(s):
    # either an environment variable name, or a string literal
    if s and s[0] in '\'"':
        value, s = scan_python_str(s)
        value = Literal(value)
    elif not s:
        raise ParseError('unexpected end of input', s)
    else:
        value, s = scan_env_var(s)
        value = Variable(value)
    return value, skip_ws(s)


def _marker_expr(s):
    if s and s[0] == '(':
        result, s = _marker_or(skip_ws(s[1:]))
        if not s or s[0] != ')':
            raise ParseError('unterminated parenthesis: %s' % s, s)
        s = skip_ws(s[1:])
    else:
        lhs, s = _marker_var(s)
        m = MARKER_OP.match(s)
        if not m:
            raise ParseError('marker operator expected: %s' % s, s)
        op = _marker_op(m.group(1))
        rhs, s = _marker_var(skip_ws(s[m.end():]))
        result = Basic(lhs, op, rhs)
    return result, s


def _marker_and(s):
    lhs, s = _marker_expr(s)
    while s:
        m = AND.match(s)
        if not m:
            break
        rhs, s = _marker_expr(skip_ws(s[m.end():]))
        lhs = And(lhs, rhs)
    return lhs, s


def _marker_or(s):
    lhs, s = _marker_and(s)
    while s:
        m = OR.match(s)
        if not m:
            break
        rhs, s = _marker_and(skip_ws(s[m.end():]))
        lhs = Or(lhs, rhs)
    return lhs, s


def scan_marker(s):
    """
    Parse a marker at the start of *s*, and return a tuple of the parsed
    marker and the text following it (with leading whitespace removed).

    :raises ParseError: if no marker can be parsed at the start of *s*.
    """
    return _marker_or(skip_ws(s))


def parse_marker(s):
    """
    Parse a complete marker expression, such as
    ``os_name == "posix" and python_version >= "3.8"``.

    :raises ParseError: if *s* isn't a valid marker, or has trailing data.
    """
    try:
        result, rest = scan_marker(s)
        if rest:
            raise ParseError('unexpected trailing data: %s' % rest, rest)
    except ParseError as e:
        e.text = s
        raise
    return result
