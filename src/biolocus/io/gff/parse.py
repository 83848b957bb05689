# This source code is part of the Biolocus package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biolocus.io.gff"
__all__ = ["parse_gff3_line", "parse_gff3"]

import re
import warnings
from urllib.parse import unquote
from ...error import (
    InvalidCoordinate,
    InvalidInterval,
    InvalidPhase,
    InvalidReference,
    InvalidScore,
    InvalidStrand,
    MalformedAttribute,
    MalformedLine,
)
from ...feature import Comment, Feature
from ...location import Convention, Interval, strand_from_symbol
from ..general import iterate_records, line_context, strip_line_terminator


_N_COLUMNS = 9
_COORDINATE = re.compile(r"-?[0-9]+")
_SCORE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_PHASES = {"0": 0, "1": 1, "2": 2}


def parse_gff3_line(line, line_number):
    """
    Parse a single line of a *Generic Feature Format 3*
    (`GFF3 <https://github.com/The-Sequence-Ontology/Specifications/blob/master/gff3.md>`_)
    file.

    Each feature line consists of 9 tab separated columns:

    ==============  ====================================================
    **seqid**       :attr:`Feature.ref_name`, percent-decoded
    **source**      :attr:`Feature.source`, ``None`` for ``.``
    **type**        :attr:`Feature.type`
    **start**       Start of the 1-based closed :attr:`Feature.interval`
    **end**         End of the 1-based closed :attr:`Feature.interval`
    **score**       :attr:`Feature.score` as ``float``, ``None`` for ``.``
    **strand**      :attr:`Feature.strand`, ``+``, ``-``, ``.`` or ``?``
    **phase**       :attr:`Feature.phase`, ``None`` for ``.``
    **attributes**  :attr:`Feature.attributes`, percent-decoded
    ==============  ====================================================

    The GFF3 symbols ``.`` and ``?`` are both interpreted as
    :attr:`Strand.UNKNOWN`, since GFF3 has no symbol for features
    where strandedness does not apply.
    Attribute values containing commas are kept as a single string.

    Parameters
    ----------
    line : str
        The decoded line, optionally including its line terminator.
    line_number : int
        The 1-based number of the line, used for error reporting.

    Returns
    -------
    record : Feature or Comment
        The parsed feature, or a :class:`Comment` for comment, directive
        and blank lines.

    Raises
    ------
    MalformedLine
        If the line does not have exactly 9 tab separated columns.
    InvalidReference
        If the *seqid* is empty.
    InvalidCoordinate
        If *start* or *end* is not an integer, or *start* is not
        positive.
    InvalidInterval
        If *end* is lower than *start*.
    InvalidScore
        If *score* is not a floating point number.
    InvalidStrand
        If *strand* is not recognized.
    InvalidPhase
        If *phase* is not ``.``, ``0``, ``1`` or ``2``.
    MalformedAttribute
        If an attribute entry has no ``=``.

    Examples
    --------

    >>> feature = parse_gff3_line("chr1\\t.\\tgene\\t1\\t100\\t.\\t+\\t.\\tID=gene1", 1)
    >>> print(feature.ref_name, feature.type, feature.interval.length)
    chr1 gene 100
    >>> print(feature.strand)
    Strand.FORWARD
    >>> print(dict(feature.attributes))
    {'ID': 'gene1'}
    """
    line = strip_line_terminator(line)
    if len(line.strip()) == 0 or line.startswith("#"):
        return Comment(line_number, line)

    columns = line.split("\t")
    if len(columns) != _N_COLUMNS:
        raise MalformedLine(
            f"Expected {_N_COLUMNS} columns, but got {len(columns)}",
            line_number, expected_fields=_N_COLUMNS, found=len(columns)
        )
    seqid, source, type, start, end, score, strand, phase, attrib = columns

    with line_context(line_number):
        seqid = unquote(seqid)
        if len(seqid) == 0:
            raise InvalidReference("The 'seqid' must not be empty")
        start = _parse_coordinate(start, "start")
        end = _parse_coordinate(end, "end")
        if start < 1:
            raise InvalidCoordinate(f"'start' must be positive, not {start}")
        if end < start:
            raise InvalidInterval(f"The end {end} precedes the start {start}")
        interval = Interval(seqid, start, end, Convention.ONE_BASED)
        return Feature(
            interval=interval,
            strand=_parse_strand(strand),
            type=unquote(type),
            source=None if source == "." else unquote(source),
            score=_parse_score(score),
            phase=_parse_phase(phase),
            attributes=_parse_attributes(attrib),
        )


def parse_gff3(lines, on_error="raise"):
    """
    Parse GFF3 lines.

    Parsing stops after a ``##FASTA`` directive, as the subsequent
    lines contain sequence data instead of features.

    Parameters
    ----------
    lines : iterable object of str
        The decoded lines of a GFF3 file.
    on_error : {'raise', 'yield'}, optional
        Whether an invalid line raises its :class:`AnnotationError` or
        the error is yielded in place of the record.

    Yields
    ------
    record : Feature or Comment or AnnotationError
        The parsing result of each line.

    Warns
    -----
    UserWarning
        If the lines contain a ``##FASTA`` directive.
    """
    for record in iterate_records(parse_gff3_line, lines, on_error):
        yield record
        if isinstance(record, Comment) and record.directive == "FASTA":
            warnings.warn(
                f"FASTA data after line {record.line_number} is ignored"
            )
            return


def _parse_coordinate(value, column):
    if not _COORDINATE.fullmatch(value):
        raise InvalidCoordinate(f"'{column}' must be an integer, not '{value}'")
    return int(value)


def _parse_score(score):
    if score == ".":
        return None
    if not _SCORE.fullmatch(score):
        raise InvalidScore(f"'{score}' is not a valid score")
    return float(score)


def _parse_strand(strand):
    # An empty column would be interpreted as unstranded
    if strand == "":
        raise InvalidStrand("The 'strand' column must not be empty")
    return strand_from_symbol(strand)


def _parse_phase(phase):
    if phase == ".":
        return None
    try:
        return _PHASES[phase]
    except KeyError:
        raise InvalidPhase(f"'{phase}' is not a valid phase") from None


def _parse_attributes(attributes):
    """
    Parse the *attributes* column into a dictionary.
    """
    attrib_dict = {}
    if attributes == ".":
        return attrib_dict
    for entry in attributes.split(";"):
        if len(entry.strip()) == 0:
            # Tolerate trailing or doubled separators
            continue
        key, sep, val = entry.partition("=")
        if not sep or len(key.strip()) == 0:
            raise MalformedAttribute(
                f"Attribute entry '{entry}' is invalid", raw_pair=entry
            )
        attrib_dict[unquote(key.strip())] = unquote(val)
    return attrib_dict
