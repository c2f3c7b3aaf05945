# -*- coding: utf-8 -*-
#
# Copyright (C) 2012-2017 The Python Software Foundation.
# See LICENSE.txt and CONTRIBUTORS.txt.
#
"""
Implementation of the PEP 440 version scheme: parsing of version strings,
their total ordering, and matching against version specifiers such as
``>= 1.0``, ``== 1.2.*`` or ``~= 2.2``.
"""

import logging
import re
from collections import namedtuple

from . import ParseError
from .util import Comparison, scan_comparison, scan_version_text, skip_ws

__all__ = ['Version', 'LocalVersionPart', 'VersionSpec', 'parse_version']

logger = logging.getLogger(__name__)


PEP440_VERSION_RE = re.compile(r'''
    v?
    (?:(?P<epoch>[0-9]+)!)?
    (?P<release>[0-9]+(?:\.[0-9]+)*)
    (?:
        [-_.]?
        (?P<pre_l>alpha|preview|beta|a|b|c|rc|pre)
        [-_.]?
        (?P<pre_n>[0-9]+)?
    )?
    (?:
        -(?P<post_n1>[0-9]+)
        |
        [-_.]?
        (?P<post_l>post|rev|r)
        [-_.]?
        (?P<post_n2>[0-9]+)?
    )?
    (?:
        [-_.]?
        (?P<dev_l>dev)
        [-_.]?
        (?P<dev_n>[0-9]+)?
    )?
    (?:\+(?P<local>[a-z0-9]+(?:[-_.][a-z0-9]+)*))?
''', re.VERBOSE | re.I)

_LOCAL_SEPARATORS = re.compile(r'[-_.]')

_PRE_LETTERS = {
    'alpha': 'a',
    'beta': 'b',
    'c': 'rc',
    'pre': 'rc',
    'preview': 'rc',
}

# States of an optional segment in an ordering key. An absent segment
# sorts either below or above every value that segment can take.
ABSENT_LOW = -1
PRESENT = 0
ABSENT_HIGH = 1


def _tagged(value, absent):
    if value is None:
        return absent, ()
    return PRESENT, value


def _strip_zeros(release):
    release = list(release)
    while release and release[-1] == 0:
        release.pop()
    return tuple(release)


def _parse_letter(letter, number, default=None):
    if not letter:
        return None
    letter = letter.lower()
    if default is not None:
        letter = default
    else:
        letter = _PRE_LETTERS.get(letter, letter)
    return letter, int(number or 0)


class LocalVersionPart(object):
    """
    One dot-separated component of a local version label: either a number
    or a lower-cased alphanumeric string. Numbers always sort above
    strings.
    """

    __slots__ = ('_value',)

    def __init__(self, value):
        if isinstance(value, str):
            value = value.lower()
        elif not isinstance(value, int):
            raise TypeError('local version part must be int or str, '
                            'not %s' % type(value).__name__)
        self._value = value

    @classmethod
    def parse(cls, s):
        if s.isdigit():
            return cls(int(s))
        return cls(s)

    @property
    def value(self):
        return self._value

    @property
    def is_numeric(self):
        return isinstance(self._value, int)

    @property
    def key(self):
        if self.is_numeric:
            return 1, self._value, ''
        return 0, 0, self._value

    def _check_compatible(self, other):
        if type(self) != type(other):
            raise TypeError('cannot compare %r and %r' % (self, other))

    def __eq__(self, other):
        self._check_compatible(other)
        return self.key == other.key

    def __ne__(self, other):
        return not self.__eq__(other)

    def __lt__(self, other):
        self._check_compatible(other)
        return self.key < other.key

    def __gt__(self, other):
        return not (self.__lt__(other) or self.__eq__(other))

    def __le__(self, other):
        return self.__lt__(other) or self.__eq__(other)

    def __ge__(self, other):
        return self.__gt__(other) or self.__eq__(other)

    def __hash__(self):
        return hash(self.key)

    def __str__(self):
        return str(self._value)

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self._value)


class Version(object):
    """
    A version identifier as defined by PEP 440, for example
    ``1!2.0.0b2.post1+ubuntu.3``.

    Instances are immutable, hashable and totally ordered. Two versions
    are equal when they only differ in spelling (``1.0`` and ``1.0.0``,
    ``1.0c1`` and ``1.0rc1``).

    :param s: The version string. Surrounding whitespace is ignored.
    :raises ParseError: if *s* isn't a valid version.
    """

    __slots__ = ('_string', '_parts', '_key')

    def __init__(self, s):
        if not isinstance(s, str):
            raise TypeError('expected a version string, not %r' % (s,))
        self._string = s = s.strip()
        m = PEP440_VERSION_RE.fullmatch(s)
        if not m:
            m = PEP440_VERSION_RE.match(s)
            remainder = s[m.end():] if m else s
            raise ParseError('invalid version: %r' % s, remainder, s)
        groups = m.groupdict()
        epoch = int(groups['epoch'] or 0)
        release = tuple(int(i) for i in groups['release'].split('.'))
        pre = _parse_letter(groups['pre_l'], groups['pre_n'])
        if groups['post_n1'] is not None:
            post = ('post', int(groups['post_n1']))
        else:
            post = _parse_letter(groups['post_l'], groups['post_n2'], 'post')
        dev = _parse_letter(groups['dev_l'], groups['dev_n'])
        local = groups['local']
        if local is not None:
            local = tuple(LocalVersionPart.parse(part) for part in
                          _LOCAL_SEPARATORS.split(local))
        self._set_parts(epoch, release, pre, post, dev, local)

    @classmethod
    def from_parts(cls, epoch=0, release=(0,), pre=None, post=None, dev=None,
                   local=None):
        """
        Build a version from its segments rather than from a string.

        *pre* is a ``(letter, number)`` pair, *post* and *dev* are either
        numbers or ``('post', number)`` / ``('dev', number)`` pairs, and
        *local* is a sequence of :class:`LocalVersionPart` instances or of
        plain ints and strings.
        """
        result = cls.__new__(cls)
        if isinstance(post, int):
            post = ('post', post)
        if isinstance(dev, int):
            dev = ('dev', dev)
        if pre is not None:
            pre = _parse_letter(pre[0], pre[1])
        if local is not None:
            local = tuple(p if isinstance(p, LocalVersionPart)
                          else LocalVersionPart(p) for p in local)
        result._set_parts(epoch, tuple(release), pre, post, dev, local)
        result._string = result.canonical()
        return result

    def _set_parts(self, epoch, release, pre, post, dev, local):
        if not release:
            raise ValueError('a version needs at least one release number')
        self._parts = (epoch, release, pre, post, dev, local)
        self._key = self._cmpkey()

    def _replace(self, **kwargs):
        parts = dict(zip(('epoch', 'release', 'pre', 'post', 'dev', 'local'),
                         self._parts))
        parts.update(kwargs)
        return self.from_parts(**parts)

    def _cmpkey(self):
        epoch, release, pre, post, dev, local = self._parts
        if pre is None and post is None and dev is not None:
            # 1.0.dev0 sorts before 1.0a0
            pre = _tagged(None, ABSENT_LOW)
        else:
            pre = _tagged(pre, ABSENT_HIGH)
        post = _tagged(post, ABSENT_LOW)
        dev = _tagged(dev, ABSENT_HIGH)
        if local is not None:
            local = tuple(part.key for part in local)
        local = _tagged(local, ABSENT_LOW)
        return epoch, _strip_zeros(release), pre, post, dev, local

    @property
    def epoch(self):
        return self._parts[0]

    @property
    def release(self):
        return self._parts[1]

    @property
    def pre(self):
        return self._parts[2]

    @property
    def post(self):
        return self._parts[3]

    @property
    def dev(self):
        return self._parts[4]

    @property
    def local(self):
        return self._parts[5]

    @property
    def public_key(self):
        """
        The ordering key of the public part of the version (local label
        ignored).
        """
        return self._key[:5] + (_tagged(None, ABSENT_LOW),)

    @property
    def base_key(self):
        return self._key[:2]

    @property
    def is_prerelease(self):
        return self.pre is not None or self.dev is not None

    @property
    def is_postrelease(self):
        return self.post is not None

    @property
    def is_devrelease(self):
        return self.dev is not None

    @property
    def public(self):
        return self.canonical(local=False)

    @property
    def base_version(self):
        return self.prefix_str()

    def canonical(self, strip_zeros=False, local=True):
        """
        Return the normalized text of this version.

        :param strip_zeros: If true, trailing zero components of the
                            release are dropped (at least one is kept).
        :param local: If false, the local version label is left out.
        """
        epoch, release, pre, post, dev, local_parts = self._parts
        parts = []
        if epoch:
            parts.append('%d!' % epoch)
        if strip_zeros:
            release = _strip_zeros(release) or release[:1]
        parts.append('.'.join(str(i) for i in release))
        if pre is not None:
            parts.append('%s%d' % pre)
        if post is not None:
            parts.append('.post%d' % post[1])
        if dev is not None:
            parts.append('.dev%d' % dev[1])
        if local and local_parts is not None:
            parts.append('+' + '.'.join(str(p) for p in local_parts))
        return ''.join(parts)

    def prefix_str(self, drop_last=False):
        """
        Return the epoch and release of this version as text, suitable for
        building a prefix match such as ``== 1.2.*``.

        :param drop_last: If true, the last release component is left out.
        """
        release = self.release
        if drop_last:
            release = release[:-1]
        result = '.'.join(str(i) for i in release)
        if self.epoch:
            result = '%d!%s' % (self.epoch, result)
        return result

    def _check_compatible(self, other):
        if type(self) != type(other):
            raise TypeError('cannot compare %r and %r' % (self, other))

    def __eq__(self, other):
        self._check_compatible(other)
        return self._key == other._key

    def __ne__(self, other):
        return not self.__eq__(other)

    def __lt__(self, other):
        self._check_compatible(other)
        return self._key < other._key

    def __gt__(self, other):
        return not (self.__lt__(other) or self.__eq__(other))

    def __le__(self, other):
        return self.__lt__(other) or self.__eq__(other)

    def __ge__(self, other):
        return self.__gt__(other) or self.__eq__(other)

    # See http://docs.python.org/reference/datamodel#object.__hash__
    def __hash__(self):
        return hash(self._key)

    def __repr__(self):
        return "%s('%s')" % (self.__class__.__name__, self._string)

    def __str__(self):
        return self.canonical()


def parse_version(s):
    """
    Parse a version string.

    :raises ParseError: if *s* isn't a valid version.
    """
    return Version(s)


class VersionSpec(namedtuple('VersionSpec', 'comparison version')):
    """
    A single version constraint: a comparison operator and the text of the
    version it compares against, such as ``('>=', '1.0')``.

    The version text is kept as written, wildcard included, and is only
    parsed when :meth:`contains` is called: what it may look like depends
    on the operator, and an invalid version must not make the constraint
    itself unusable.
    """

    __slots__ = ()

    _operators = {
        Comparison.LESS_THAN: '_match_lt',
        Comparison.LESS_THAN_OR_EQUAL: '_match_le',
        Comparison.NOT_EQUAL: '_match_ne',
        Comparison.EQUAL: '_match_eq',
        Comparison.GREATER_THAN_OR_EQUAL: '_match_ge',
        Comparison.GREATER_THAN: '_match_gt',
        Comparison.COMPATIBLE_RELEASE: '_match_compatible',
        Comparison.ARBITRARY_EQUAL: '_match_arbitrary',
    }

    def __new__(cls, comparison, version):
        if not isinstance(comparison, Comparison):
            comparison = Comparison.from_text(comparison)
        return super(VersionSpec, cls).__new__(cls, comparison, version)

    @classmethod
    def from_text(cls, s):
        """
        Parse a single constraint such as ``'>= 1.0'``.

        :raises ParseError: if *s* isn't an operator followed by a version.
        """
        try:
            comparison, rest = scan_comparison(skip_ws(s))
            version, rest = scan_version_text(skip_ws(rest))
            rest = skip_ws(rest)
            if rest:
                raise ParseError('unexpected trailing data: %s' % rest, rest)
        except ParseError as e:
            e.text = s
            raise
        return cls(comparison, version)

    def __str__(self):
        return '%s%s' % (self.comparison.value, self.version)

    def _parse(self, s):
        try:
            result = Version(s)
        except ParseError:
            logger.debug('%s: %r is not a valid version', self, s)
            result = None
        return result

    def contains(self, version):
        """
        Check if a version satisfies this constraint.

        :param version: The version to check, as a string or a
                        :class:`Version`. A string which isn't a valid
                        version doesn't satisfy any constraint.
        :return: True if it satisfies the constraint, else False.
        """
        if not isinstance(version, Version):
            version = self._parse(version)
            if version is None:
                return False
        if self.comparison is Comparison.ARBITRARY_EQUAL:
            return self._match_arbitrary(version, self.version, False)
        s = self.version
        prefix = s.endswith('.*')
        if prefix:
            if self.comparison not in (Comparison.EQUAL,
                                       Comparison.NOT_EQUAL):
                logger.debug('%s: wildcard not allowed with %s', self,
                             self.comparison.value)
                return False
            s = s[:-2]
        constraint = self._parse(s)
        if constraint is None:
            return False
        f = getattr(self, self._operators[self.comparison])
        return f(version, constraint, prefix)

    def _adopt_local(self, version, constraint):
        # A constraint without a local label matches any local label.
        if constraint.local is None and version.local is not None:
            constraint = constraint._replace(local=version.local)
        return constraint

    def _match_prefix(self, version, constraint):
        if version.epoch != constraint.epoch:
            return False
        n = min(len(version.release), len(constraint.release))
        if version.release[:n] != constraint.release[:n]:
            return False
        # == 2.0.* matches 2
        return not any(constraint.release[n:])

    def _match_eq(self, version, constraint, prefix):
        if prefix:
            return self._match_prefix(version, constraint)
        return version == self._adopt_local(version, constraint)

    def _match_ne(self, version, constraint, prefix):
        return not self._match_eq(version, constraint, prefix)

    def _match_le(self, version, constraint, prefix):
        return version.public_key <= constraint.public_key

    def _match_ge(self, version, constraint, prefix):
        return version.public_key >= constraint.public_key

    def _match_lt(self, version, constraint, prefix):
        if not version < constraint:
            return False
        # < 2.0 must not match 2.0a1
        return (constraint.is_prerelease or not version.is_prerelease or
                version.base_key != constraint.base_key)

    def _match_gt(self, version, constraint, prefix):
        if not version > constraint:
            return False
        if version.base_key == constraint.base_key:
            # > 2.0 must match neither 2.0.post1 nor 2.0+local
            if version.is_postrelease and not constraint.is_postrelease:
                return False
            if version.local is not None:
                return False
        return True

    def _match_compatible(self, version, constraint, prefix):
        if len(constraint.release) < 2:
            logger.debug('%s: at least two release components needed', self)
            return False
        if not self._match_ge(version, constraint, prefix):
            return False
        constraint = self._parse(constraint.prefix_str(drop_last=True))
        if constraint is None:
            return False
        return self._match_prefix(version, constraint)

    def _match_arbitrary(self, version, constraint, prefix):
        return str(version).lower() == constraint.lower()
