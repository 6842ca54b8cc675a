"""
bdface test suite
"""

import unittest

from tests.test_binary import *
from tests.test_encoding import *
from tests.test_bdf import *
from tests.test_raster import *
from tests.test_face import *


if __name__ == '__main__':
    unittest.main()
