# -*- coding: utf-8 -*-
#
# Copyright (C) 2012-2013 The Python Software Foundation.
# See LICENSE.txt and CONTRIBUTORS.txt.
#
from test_markers import MarkersTestCase
from test_requirements import RequirementsTestCase
from test_uri import URITestCase
from test_util import UtilTestCase, ParseErrorTestCase
from test_version import (VersionTestCase, LocalVersionPartTestCase,
                          VersionSpecTestCase)
