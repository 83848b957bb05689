# This source code is part of the Biolocus package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This is the top-level package of *Biolocus*.

It provides the coordinate model shared by all annotation formats:
A :class:`Position` is an offset on a reference sequence and an
:class:`Interval` is a range on a named reference sequence.
Both are tagged with the :class:`Convention` they were constructed
under, either 1-based (closed intervals, as in GFF3) or 0-based
(half-open intervals, as in BED), so that coordinates of both
conventions cannot be mixed up accidentally.
Conversion between the conventions is always explicit.

The :class:`Strand` of a feature distinguishes between an unknown
strand (:attr:`Strand.UNKNOWN`) and features where strandedness does
not apply (:attr:`Strand.UNSTRANDED`).

The format specific parsers in :mod:`biolocus.io` create
:class:`Feature` objects from single annotation lines.
Lines without a feature are represented by :class:`Comment` and
:class:`Header` markers, invalid lines raise an
:class:`AnnotationError`.
"""

__version__ = "0.1.0"
__name__ = "biolocus"

from .error import *
from .location import *
from .feature import *
