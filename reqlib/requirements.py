# -*- coding: utf-8 -*-
#
# Copyright (C) 2012-2017 Vinay Sajip.
# Licensed to the Python Software Foundation under a contributor agreement.
# See LICENSE.txt and CONTRIBUTORS.txt.
#
"""
Parser for the dependency specifications of PEP 508, such as
``name[extra1,extra2] >= 1.0, < 2.0; os_name == "posix"``.
"""

import logging

from . import ParseError
from .markers import scan_marker
from .uri import scan_uri_reference
from .util import (COMPARE_OP, scan_comparison, scan_identifier,
                   scan_version_text, skip_ws)
from .version import VersionSpec

__all__ = ['RequirementSpecifier', 'parse_specification']

logger = logging.getLogger(__name__)


class RequirementSpecifier(object):
    """
    A parsed dependency specification.

    :param name: The name of the required distribution.
    :param extras: The names of the extras requested, in order.
    :param version_specs: The version constraints, as :class:`VersionSpec`
                          instances or ``(operator, version)`` pairs.
    :param urlspec: The URL of a direct reference, if any.
    :param marker_expr: The parsed environment marker, if any.
    """

    __slots__ = ('_name', '_extras', '_version_specs', '_urlspec',
                 '_marker_expr')

    def __init__(self, name, extras=(), version_specs=(), urlspec=None,
                 marker_expr=None):
        self._name = name
        self._extras = tuple(extras)
        self._version_specs = tuple(vs if isinstance(vs, VersionSpec)
                                    else VersionSpec(*vs)
                                    for vs in version_specs)
        self._urlspec = urlspec
        self._marker_expr = marker_expr

    @property
    def name(self):
        return self._name

    @property
    def extras(self):
        return self._extras

    @property
    def version_specs(self):
        return self._version_specs

    @property
    def urlspec(self):
        return self._urlspec

    @property
    def marker_expr(self):
        return self._marker_expr

    def contains(self, version):
        """
        Check if a version satisfies every version constraint of this
        requirement. A requirement without constraints is satisfied by any
        version.

        :param version: The version to check, as a string or a
                        :class:`~reqlib.version.Version`.
        """
        for vs in self._version_specs:
            if not vs.contains(version):
                logger.debug('%s: %s does not satisfy %s', self._name,
                             version, vs)
                return False
        return True

    def _astuple(self):
        return (self._name, self._extras, self._version_specs,
                self._urlspec, self._marker_expr)

    def __eq__(self, other):
        if not isinstance(other, RequirementSpecifier):
            return NotImplemented
        return self._astuple() == other._astuple()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self._astuple())

    def __repr__(self):
        return '<RequirementSpecifier %s>' % self

    def __str__(self):
        result = self._name
        if self._extras:
            result += '[%s]' % ','.join(self._extras)
        if self._urlspec is not None:
            result += ' @ %s' % self._urlspec
            if self._marker_expr is not None:
                # a URL must be followed by whitespace
                result += ' '
        elif self._version_specs:
            result += ' ' + ', '.join(str(vs) for vs in self._version_specs)
        if self._marker_expr is not None:
            result += '; %s' % self._marker_expr
        return result


def _extras(s):
    # s starts with '['
    s = skip_ws(s[1:])
    result = []
    if s and s[0] != ']':
        while True:
            extra, s = scan_identifier(s)
            result.append(extra)
            s = skip_ws(s)
            if not s or s[0] != ',':
                break
            s = skip_ws(s[1:])
    if not s or s[0] != ']':
        raise ParseError('unterminated extra: %s' % s, s)
    return result, skip_ws(s[1:])


def _version_one(s):
    op, s = scan_comparison(skip_ws(s))
    v, s = scan_version_text(skip_ws(s))
    return VersionSpec(op, v), skip_ws(s)


def _version_many(s):
    vs, s = _version_one(s)
    result = [vs]
    while s and s[0] == ',':
        vs, s = _version_one(s[1:])
        result.append(vs)
    return result, s


def _versionspec(s):
    if s[0] != '(':
        return _version_many(s)
    result, s = _version_many(s[1:])
    if not s or s[0] != ')':
        raise ParseError('unterminated parenthesis: %s' % s, s)
    return result, skip_ws(s[1:])


def _quoted_marker(s):
    # s starts with ';'
    return scan_marker(s[1:])


def parse_specification(s):
    """
    Parse a dependency specification.

    A specification names a distribution, optionally followed by a list of
    extras in brackets, then either version constraints or ``@`` and a
    URL, and finally an optional environment marker after ``;``.

    :param s: The specification, for example ``'foo [bar] >= 1.0'``.
    :return: A :class:`RequirementSpecifier` instance.
    :raises ParseError: if *s* isn't a valid specification. The exception's
                        ``remainder`` is the text which couldn't be parsed.
    """
    try:
        name, rest = scan_identifier(skip_ws(s))
        rest = skip_ws(rest)
        extras = versions = ()
        uri = marker = None
        if rest and rest[0] == '[':
            extras, rest = _extras(rest)
        if rest and rest[0] == '@':
            # The URL form is tried first: nothing else can follow the
            # extras with an '@'.
            uri, rest = scan_uri_reference(skip_ws(rest[1:]))
            rest = skip_ws(rest)
        elif rest and (rest[0] == '(' or COMPARE_OP.match(rest)):
            versions, rest = _versionspec(rest)
        if rest and rest[0] == ';':
            marker, rest = _quoted_marker(rest)
        if rest:
            raise ParseError('unexpected trailing data: %s' % rest, rest)
    except ParseError as e:
        e.text = s
        raise
    return RequirementSpecifier(name, extras, versions, uri, marker)
