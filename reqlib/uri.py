#
# Copyright (C) 2012 The Python Software Foundation.
# See LICENSE.txt and CONTRIBUTORS.txt.
#
"""
Recogniser for the URI syntax of RFC 3986, Appendix A.

The grammar is only used to find where the URL of a direct reference
requirement (``name @ url``) ends, so the patterns below recognise text
without decomposing it.
"""
import re

from . import ParseError

__all__ = ['scan_uri_reference', 'is_uri', 'is_uri_reference',
           'is_absolute_uri']

HEXDIG = r'[0-9A-Fa-f]'

UNRESERVED = r'[A-Za-z0-9\-._~]'
PCT_ENCODED = r'%%%s{2}' % HEXDIG
GEN_DELIMS = r'[:/?#\[\]@]'
SUB_DELIMS = r"[!$&'()*+,;=]"
RESERVED = r'(?:%s|%s)' % (GEN_DELIMS, SUB_DELIMS)

PCHAR = r'(?:%s|%s|%s|[:@])' % (UNRESERVED, PCT_ENCODED, SUB_DELIMS)

SEGMENT = r'%s*' % PCHAR
SEGMENT_NZ = r'%s+' % PCHAR
# non-zero-length segment without any colon
SEGMENT_NZ_NC = r'(?:%s|%s|%s|@)+' % (UNRESERVED, PCT_ENCODED, SUB_DELIMS)

PATH_ABEMPTY = r'(?:/%s)*' % SEGMENT
PATH_ABSOLUTE = r'/(?:%s(?:/%s)*)?' % (SEGMENT_NZ, SEGMENT)
PATH_NOSCHEME = r'%s(?:/%s)*' % (SEGMENT_NZ_NC, SEGMENT)
PATH_ROOTLESS = r'%s(?:/%s)*' % (SEGMENT_NZ, SEGMENT)
PATH_EMPTY = r''
PATH = r'(?:%s|%s|%s|%s|%s)' % (PATH_ABEMPTY, PATH_ABSOLUTE, PATH_NOSCHEME,
                                PATH_ROOTLESS, PATH_EMPTY)

# Alternatives are longest first, as a regex takes the first that fits.
DEC_OCTET = r'(?:25[0-5]|2[0-4][0-9]|1[0-9]{2}|[1-9][0-9]|[0-9])'
IPV4ADDRESS = r'%s\.%s\.%s\.%s' % ((DEC_OCTET,) * 4)

H16 = r'%s{1,4}' % HEXDIG
LS32 = r'(?:%s:%s|%s)' % (H16, H16, IPV4ADDRESS)


def _h16_prefix(n):
    # [ *n( h16 ":" ) h16 ]
    return r'(?:(?:%s:){0,%d}%s)?' % (H16, n, H16)


IPV6ADDRESS = r'(?:%s)' % '|'.join([
    r'(?:%s:){6}%s' % (H16, LS32),
    r'::(?:%s:){5}%s' % (H16, LS32),
    r'(?:%s)?::(?:%s:){4}%s' % (H16, H16, LS32),
    r'%s::(?:%s:){3}%s' % (_h16_prefix(1), H16, LS32),
    r'%s::(?:%s:){2}%s' % (_h16_prefix(2), H16, LS32),
    r'%s::%s:%s' % (_h16_prefix(3), H16, LS32),
    r'%s::%s' % (_h16_prefix(4), LS32),
    r'%s::%s' % (_h16_prefix(5), H16),
    r'%s::' % _h16_prefix(6),
])

IPVFUTURE = r'[vV]%s+\.(?:%s|%s|:)+' % (HEXDIG, UNRESERVED, SUB_DELIMS)
IP_LITERAL = r'\[(?:%s|%s)\]' % (IPV6ADDRESS, IPVFUTURE)

REG_NAME = r'(?:%s|%s|%s)*' % (UNRESERVED, PCT_ENCODED, SUB_DELIMS)
HOST = r'(?:%s|%s|%s)' % (IP_LITERAL, IPV4ADDRESS, REG_NAME)
PORT = r'[0-9]*'
USERINFO = r'(?:%s|%s|%s|:)*' % (UNRESERVED, PCT_ENCODED, SUB_DELIMS)
AUTHORITY = r'(?:%s@)?%s(?::%s)?' % (USERINFO, HOST, PORT)

SCHEME = r'[A-Za-z][A-Za-z0-9+\-.]*'
QUERY = r'(?:%s|[/?])*' % PCHAR
FRAGMENT = QUERY

HIER_PART = r'(?://%s%s|%s|%s|%s)' % (AUTHORITY, PATH_ABEMPTY, PATH_ABSOLUTE,
                                      PATH_ROOTLESS, PATH_EMPTY)
RELATIVE_PART = r'(?://%s%s|%s|%s|%s)' % (AUTHORITY, PATH_ABEMPTY,
                                          PATH_ABSOLUTE, PATH_NOSCHEME,
                                          PATH_EMPTY)

URI = r'%s:%s(?:\?%s)?(?:#%s)?' % (SCHEME, HIER_PART, QUERY, FRAGMENT)
ABSOLUTE_URI = r'%s:%s(?:\?%s)?' % (SCHEME, HIER_PART, QUERY)
RELATIVE_REF = r'%s(?:\?%s)?(?:#%s)?' % (RELATIVE_PART, QUERY, FRAGMENT)
URI_REFERENCE = r'(?:%s|%s)' % (URI, RELATIVE_REF)

_URI_RE = re.compile(URI)
_ABSOLUTE_URI_RE = re.compile(ABSOLUTE_URI)
_URI_REFERENCE_RE = re.compile(URI_REFERENCE)
# In a requirement, the URL is not empty and must be followed by whitespace
# or end the line.
_DELIMITED_URI_REFERENCE_RE = re.compile(r'(?=[^ \t])(%s)(?=[ \t]|$)' %
                                         URI_REFERENCE)


def scan_uri_reference(s):
    """
    Recognise a URI reference at the start of *s*.

    The reference must be followed by whitespace or the end of the text.
    Return a tuple of the reference text and the remainder of *s*.

    :raises ParseError: if no such reference can be found.
    """
    m = _DELIMITED_URI_REFERENCE_RE.match(s)
    if not m:
        raise ParseError('invalid URI: %s' % s, s)
    return m.group(1), s[m.end():]


def is_uri(s):
    return _URI_RE.fullmatch(s) is not None


def is_absolute_uri(s):
    return _ABSOLUTE_URI_RE.fullmatch(s) is not None


def is_uri_reference(s):
    return _URI_REFERENCE_RE.fullmatch(s) is not None
