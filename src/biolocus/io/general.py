# This source code is part of the Biolocus package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains the format independent machinery for applying a
line parser to a sequence of lines.
"""

__name__ = "biolocus.io"
__all__ = ["iterate_records"]

from contextlib import contextmanager
from ..error import AnnotationError


_ERROR_MODES = ("raise", "yield")


def iterate_records(parse_line, lines, on_error="raise", **kwargs):
    """
    Apply a line parser to each line of an iterable of lines.

    Line numbers are counted from 1 in the order of `lines`.
    As each line is parsed independently, an invalid line does not
    affect the parsing of the subsequent lines.

    Parameters
    ----------
    parse_line : callable
        The line parser, e.g. :func:`parse_gff3_line()`.
        It is called as ``parse_line(line, line_number, **kwargs)``.
    lines : iterable object of str
        The decoded lines.
        Line terminators are allowed, so an opened text file can be
        given directly.
    on_error : {'raise', 'yield'}, optional
        If ``'raise'``, an :class:`AnnotationError` is raised at the
        first invalid line.
        If ``'yield'``, the error is yielded in place of the record and
        iteration continues with the next line.
    **kwargs
        Additional arguments for `parse_line`.

    Yields
    ------
    record : Feature or Comment or Header or AnnotationError
        The parsing result of each line.

    Examples
    --------

    >>> from biolocus.io.bed import parse_bed_line
    >>> lines = ["track name=test", "chr1 0 10", "chr1 10 5"]
    >>> for record in iterate_records(parse_bed_line, lines, on_error="yield"):
    ...     print(type(record).__name__)
    Header
    Feature
    InvalidInterval
    """
    if on_error not in _ERROR_MODES:
        raise ValueError(
            f"'{on_error}' is not a valid error mode, "
            f"expected one of {_ERROR_MODES}"
        )
    for line_number, line in enumerate(lines, start=1):
        try:
            record = parse_line(line, line_number, **kwargs)
        except AnnotationError as error:
            if on_error == "raise":
                raise
            record = error
        yield record


def strip_line_terminator(line):
    """
    Remove a trailing ``\\n`` or ``\\r\\n`` from a line.
    """
    return line.rstrip("\r\n")


@contextmanager
def line_context(line_number):
    """
    Attach the line number to any :class:`AnnotationError` raised
    within the context, that does not carry one yet.
    """
    try:
        yield
    except AnnotationError as error:
        if error.line_number is None:
            error.line_number = line_number
        raise
