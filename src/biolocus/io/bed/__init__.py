# This source code is part of the Biolocus package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This subpackage is used for parsing and writing feature lines in the
*Browser Extensible Data* (BED) format.

BED locates features by 0-based half-open intervals, hence the parsed
:class:`Feature` objects carry intervals in the
:attr:`Convention.ZERO_BASED` convention.
Lines with 3 up to 12 columns (*BED3* to *BED12*) are supported.
"""

__name__ = "biolocus.io.bed"

from .parse import *
from .write import *
