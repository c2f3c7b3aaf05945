# -*- coding: utf-8 -*-
#
# Copyright (C) 2012 The Python Software Foundation.
# See LICENSE.txt and CONTRIBUTORS.txt.
#
import logging

__version__ = '0.1.0'


class ReqlibException(Exception):
    pass


class ParseError(ReqlibException, ValueError):
    """
    Raised when some text doesn't match the grammar being applied to it.

    :param msg: A description of what was expected.
    :param remainder: The part of the input which could not be consumed.
    :param text: The complete input. If not specified, it's taken to be
                 the same as *remainder*; the top-level parse functions
                 fill it in before the exception reaches the caller.
    """
    def __init__(self, msg, remainder='', text=None):
        super(ParseError, self).__init__(msg)
        self.remainder = remainder
        if text is None:
            text = remainder
        self.text = text

    @property
    def position(self):
        """
        The offset in ``text`` at which parsing stopped.
        """
        return len(self.text) - len(self.remainder)


logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())
