# This source code is part of the Biolocus package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biolocus.io.bed"
__all__ = ["parse_bed_line", "parse_bed"]

import re
import numpy as np
from ...error import (
    InvalidCoordinate,
    InvalidInterval,
    InvalidScore,
    MalformedLine,
    ScoreRangeWarning,
)
from ...feature import Comment, Feature, Header
from ...location import Convention, Interval, strand_from_symbol
from ..general import iterate_records, line_context, strip_line_terminator


_MIN_COLUMNS = 3
_MAX_COLUMNS = 12
_HEADER_KEYWORDS = ("track", "browser")
# Maps column counts, that end within a group of dependent columns,
# to the column count that completes the group
_INCOMPLETE_COLUMNS = {7: 8, 10: 12, 11: 12}
_MIN_SCORE = 0
_MAX_SCORE = 1000
_INTEGER = re.compile(r"-?[0-9]+")


def parse_bed_line(line, line_number, expected_columns=12):
    """
    Parse a single line of a *Browser Extensible Data*
    (`BED <https://genome.ucsc.edu/FAQ/FAQformat.html#format1>`_) file.

    A BED line has 3 to 12 whitespace separated columns, all columns
    after the third one are optional:

    ================  ==================================================
    **chrom**         :attr:`Feature.ref_name`
    **chromStart**    Start of the 0-based half-open
                      :attr:`Feature.interval`
    **chromEnd**      End of the 0-based half-open
                      :attr:`Feature.interval`
    **name**          :attr:`Feature.name`
    **score**         :attr:`Feature.score` as ``int``
    **strand**        :attr:`Feature.strand`
    **thickStart**    Start of :attr:`Feature.thick`
    **thickEnd**      End of :attr:`Feature.thick`
    **itemRgb**       :attr:`Feature.item_rgb`
    **blockCount**    Number of :attr:`Feature.blocks`
    **blockSizes**    Comma separated lengths of :attr:`Feature.blocks`
    **blockStarts**   Comma separated starts of :attr:`Feature.blocks`,
                      relative to *chromStart*
    ================  ==================================================

    Columns missing in the line are absent in the returned
    :class:`Feature`.
    A missing *strand* column results in :attr:`Strand.UNSTRANDED`,
    while ``.`` results in :attr:`Strand.UNKNOWN`.
    Dependent columns must be given together, i.e. *thickStart* requires
    *thickEnd* and *blockCount* requires *blockSizes* and
    *blockStarts*.

    A score outside the conventional range of 0 to 1000 does not fail
    the parsing, but a :class:`ScoreRangeWarning` is attached to
    :attr:`Feature.warnings`.

    Parameters
    ----------
    line : str
        The decoded line, optionally including its line terminator.
    line_number : int
        The 1-based number of the line, used for error reporting.
    expected_columns : int, optional
        The maximum number of columns to be parsed, from 3 to 12.
        Columns beyond this number are ignored.
        As groups of dependent columns cannot be split, 7, 10 and 11
        are not allowed.

    Returns
    -------
    record : Feature or Comment or Header
        The parsed feature, a :class:`Comment` for comment and blank
        lines or a :class:`Header` for ``track`` and ``browser`` lines.

    Raises
    ------
    ValueError
        If `expected_columns` is not a valid number of columns.
    MalformedLine
        If the line has less than 3 columns, an incomplete group of
        dependent columns, an invalid *itemRgb* or an invalid block
        definition.
    InvalidCoordinate
        If *chromStart*, *chromEnd*, *thickStart* or *thickEnd* is not an
        integer.
    InvalidInterval
        If *chromStart* or *chromEnd* is negative, if *chromEnd* is lower
        than *chromStart*, or if the thick part or a block is not
        within the feature.
    InvalidReference
        If the *chrom* is empty.
    InvalidScore
        If *score* is not an integer.
    InvalidStrand
        If *strand* is not recognized.

    Examples
    --------

    >>> feature = parse_bed_line("chr1\\t0\\t100\\tfeat1\\t500\\t+", 1)
    >>> print(feature.ref_name, feature.name, feature.score)
    chr1 feat1 500
    >>> print(feature.interval.bounds(), feature.interval.length)
    (0, 100) 100
    >>> print(parse_bed_line("track name=genes", 1))
    Header(line_number=1, text='track name=genes')
    """
    if not _MIN_COLUMNS <= expected_columns <= _MAX_COLUMNS:
        raise ValueError(
            f"Expected columns must be between {_MIN_COLUMNS} and "
            f"{_MAX_COLUMNS}, not {expected_columns}"
        )
    if expected_columns in _INCOMPLETE_COLUMNS:
        raise ValueError(
            "Expected columns must not split a group of dependent "
            f"columns, use {_INCOMPLETE_COLUMNS[expected_columns]} instead "
            f"of {expected_columns}"
        )
    line = strip_line_terminator(line)
    if len(line.strip()) == 0 or line.startswith("#"):
        return Comment(line_number, line)
    columns = line.split()
    if columns[0] in _HEADER_KEYWORDS:
        return Header(line_number, line)

    columns = columns[:expected_columns]
    n_columns = len(columns)
    if n_columns < _MIN_COLUMNS:
        raise MalformedLine(
            f"Expected at least {_MIN_COLUMNS} columns, "
            f"but got {n_columns}",
            line_number, expected_fields=_MIN_COLUMNS, found=n_columns
        )
    if n_columns in _INCOMPLETE_COLUMNS:
        expected = _INCOMPLETE_COLUMNS[n_columns]
        raise MalformedLine(
            f"Expected {expected} columns, but got {n_columns}",
            line_number, expected_fields=expected, found=n_columns
        )

    with line_context(line_number):
        chrom_start = _parse_coordinate(columns[1], "chromStart")
        chrom_end = _parse_coordinate(columns[2], "chromEnd")
        if chrom_start < 0 or chrom_end < 0:
            raise InvalidInterval(
                f"Negative coordinates {chrom_start}-{chrom_end} "
                f"are not allowed"
            )
        interval = Interval(
            columns[0], chrom_start, chrom_end, Convention.ZERO_BASED
        )

        name = columns[3] if n_columns > 3 else None
        score = _parse_score(columns[4]) if n_columns > 4 else None
        warnings = ()
        if score is not None and not _MIN_SCORE <= score <= _MAX_SCORE:
            warnings = (ScoreRangeWarning(score, line_number),)
        # An absent strand column means unstranded
        strand = strand_from_symbol(columns[5] if n_columns > 5 else None)
        thick = _parse_thick(interval, columns[6], columns[7]) \
                if n_columns > 7 else None
        item_rgb = _parse_item_rgb(columns[8]) if n_columns > 8 else None
        blocks = _parse_blocks(interval, columns[9], columns[10], columns[11]) \
                 if n_columns > 9 else ()

        return Feature(
            interval=interval,
            strand=strand,
            score=score,
            name=name,
            thick=thick,
            item_rgb=item_rgb,
            blocks=blocks,
            warnings=warnings,
        )


def parse_bed(lines, expected_columns=12, on_error="raise"):
    """
    Parse BED lines.

    Parameters
    ----------
    lines : iterable object of str
        The decoded lines of a BED file.
    expected_columns : int, optional
        The maximum number of columns to be parsed in each line.
    on_error : {'raise', 'yield'}, optional
        Whether an invalid line raises its :class:`AnnotationError` or
        the error is yielded in place of the record.

    Yields
    ------
    record : Feature or Comment or Header or AnnotationError
        The parsing result of each line.
    """
    yield from iterate_records(
        parse_bed_line, lines, on_error, expected_columns=expected_columns
    )


def _parse_coordinate(value, column):
    if not _INTEGER.fullmatch(value):
        raise InvalidCoordinate(f"'{column}' must be an integer, not '{value}'")
    return int(value)


def _parse_score(score):
    if score == ".":
        return None
    if not _INTEGER.fullmatch(score):
        raise InvalidScore(f"'{score}' is not a valid integer score")
    return int(score)


def _parse_thick(interval, thick_start, thick_end):
    start, end = interval.bounds()
    thick_start = _parse_coordinate(thick_start, "thickStart")
    thick_end = _parse_coordinate(thick_end, "thickEnd")
    if not start <= thick_start <= thick_end <= end:
        raise InvalidInterval(
            f"Thick part {thick_start}-{thick_end} is not within "
            f"the feature {start}-{end}"
        )
    return Interval(
        interval.ref_name, thick_start, thick_end, Convention.ZERO_BASED
    )


def _parse_item_rgb(item_rgb):
    try:
        rgb = [int(component) for component in item_rgb.split(",")]
    except ValueError:
        raise MalformedLine(f"'{item_rgb}' is not a valid RGB value") \
            from None
    # A single '0' is the common shorthand for black
    if rgb == [0]:
        return (0, 0, 0)
    if len(rgb) != 3 or any(not 0 <= component <= 255 for component in rgb):
        raise MalformedLine(f"'{item_rgb}' is not a valid RGB value")
    return tuple(rgb)


def _parse_blocks(interval, block_count, block_sizes, block_starts):
    if not _INTEGER.fullmatch(block_count) or int(block_count) < 1:
        raise MalformedLine(f"'{block_count}' is not a valid block count")
    block_count = int(block_count)
    sizes = _parse_integer_list(block_sizes, "blockSizes")
    rel_starts = _parse_integer_list(block_starts, "blockStarts")
    if len(sizes) != block_count or len(rel_starts) != block_count:
        raise MalformedLine(
            f"Expected {block_count} blocks, but got {len(sizes)} "
            f"block sizes and {len(rel_starts)} block starts"
        )

    chrom_start, chrom_end = interval.bounds()
    starts = chrom_start + rel_starts
    ends = starts + sizes
    if (sizes < 0).any() or (starts < chrom_start).any() \
       or (ends > chrom_end).any():
        raise InvalidInterval(
            f"Blocks must be within the feature {chrom_start}-{chrom_end}"
        )
    return tuple(
        Interval(interval.ref_name, int(start), int(end), Convention.ZERO_BASED)
        for start, end in zip(starts, ends)
    )


def _parse_integer_list(value, column):
    # Lists are usually written with a trailing comma
    items = value.rstrip(",").split(",")
    if not all(_INTEGER.fullmatch(item) for item in items):
        raise MalformedLine(f"'{value}' is not a valid '{column}' list")
    return np.array([int(item) for item in items], dtype=np.int64)
