# This source code is part of the Biolocus package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for parsing and writing annotation lines.

Each supported format has its own subpackage, providing a function that
parses a single line, a function that parses an iterable of lines and
a function that writes a :class:`Feature` back into a line.
Reading the lines from files is left to the caller.
"""

__name__ = "biolocus.io"

from .general import *
