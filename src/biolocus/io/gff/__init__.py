# This source code is part of the Biolocus package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This subpackage is used for parsing and writing feature lines in the
*Generic Feature Format 3* (GFF3).

GFF3 locates features by 1-based closed intervals, hence the parsed
:class:`Feature` objects carry intervals in the
:attr:`Convention.ONE_BASED` convention.

.. note: Hierarchical relations between features, expressed via the
   ``Parent`` attribute, are not resolved.
   The ``ID`` and ``Parent`` attributes are available in
   :attr:`Feature.attributes` for callers that need to build such a
   structure.
"""

__name__ = "biolocus.io.gff"

from .parse import *
from .write import *
