# This source code is part of the Biolocus package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biolocus.io.gff"
__all__ = ["format_gff3_line"]

import string
from urllib.parse import quote
from ...location import Convention, Strand


# All punctuation characters except
# percent, semicolon, equals, ampersand, comma
_NOT_QUOTED = "".join(
    [char for char in string.punctuation if char not in "%;=&,"]
) + " "


def format_gff3_line(feature):
    """
    Write a :class:`Feature` as GFF3 line.

    Reserved characters in the *seqid*, *source*, *type* and
    *attributes* columns are percent-encoded.
    The location is always written as 1-based closed interval,
    independent of the convention of :attr:`Feature.interval`.
    Missing values are written as ``.``.

    Parameters
    ----------
    feature : Feature
        The feature to be written.

    Returns
    -------
    line : str
        The GFF3 line, without line terminator.

    Raises
    ------
    ValueError
        If the feature has no type, or if its interval is empty and
        hence cannot be expressed in GFF3.

    Examples
    --------

    >>> interval = make_interval("chr1", 0, 100, Convention.ZERO_BASED)
    >>> feature = Feature(
    ...     interval, Strand.REVERSE, type="gene", attributes={"Note": "a;b"}
    ... )
    >>> print(format_gff3_line(feature).replace("\\t", " "))
    chr1 . gene 1 100 . - . Note=a%3Bb
    """
    if feature.type is None or len(feature.type) == 0:
        raise ValueError("GFF3 features require a type")
    if feature.interval.length == 0:
        raise ValueError("GFF3 cannot express zero-length features")
    start, end = feature.interval.bounds(Convention.ONE_BASED)

    seqid = _quote(feature.ref_name)
    source = _quote(feature.source) if feature.source is not None else "."
    type = _quote(feature.type)
    score = str(feature.score) if feature.score is not None else "."
    # GFF3 has no symbol for unstranded features
    strand = "." if feature.strand == Strand.UNSTRANDED \
             else feature.strand.symbol
    phase = str(feature.phase) if feature.phase is not None else "."
    if len(feature.attributes) == 0:
        attributes = "."
    else:
        attributes = ";".join(
            [_quote(key) + "=" + _quote(val)
             for key, val in feature.attributes.items()]
        )

    return "\t".join(
        [seqid, source, type, str(start), str(end),
         score, strand, phase, attributes]
    )


def _quote(value):
    # Tabs and line breaks are always encoded
    return quote(value, safe=_NOT_QUOTED)
