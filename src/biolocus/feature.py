# This source code is part of the Biolocus package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biolocus"
__all__ = ["Feature", "Comment", "Header"]

from dataclasses import dataclass, field
from types import MappingProxyType
from .location import Strand


_OPTIONAL_FIELDS = (
    "type", "source", "score", "phase", "attributes",
    "name", "thick", "item_rgb", "blocks", "warnings",
)


@dataclass(frozen=True, repr=False)
class Feature:
    """
    The parsed content of a single annotation line.

    A :class:`Feature` combines the location of the annotated element
    with the columns of the line it was parsed from.
    Columns that are not part of the source format, or that are absent
    in the line, are ``None`` (or empty).

    Objects of this class are immutable and are not retained by the
    parser that created them.

    Parameters
    ----------
    interval : Interval
        The location of the feature.
        GFF3 features are located by a 1-based closed interval, BED
        features by a 0-based half-open interval.
    strand : Strand, optional
        The strand of the feature.
    type : str, optional
        The feature type (GFF3 *type* column), e.g. ``'gene'``.
        Always ``None`` for BED features.
    source : str, optional
        The source of the feature (GFF3 *source* column).
    score : float or int, optional
        The score of the feature, a float in GFF3 and an integer in BED.
    phase : int, optional
        The reading frame phase (GFF3 *phase* column).
    attributes : dict, optional
        Maps the decoded GFF3 attribute keys to their decoded values.
        The feature stores a read-only copy of the dictionary.
        Always empty for BED features.
    name : str, optional
        The feature name (BED *name* column).
    thick : Interval, optional
        The thickly drawn part of the feature, usually the coding
        region (BED *thickStart* and *thickEnd* columns).
    item_rgb : tuple(int, int, int), optional
        The display color (BED *itemRgb* column).
    blocks : tuple of Interval, optional
        The absolute locations of the blocks (usually exons) of the
        feature (BED *blockCount*, *blockSizes* and *blockStarts*
        columns).
    warnings : tuple of Warning, optional
        Non-fatal problems, that were found while parsing the line.

    Attributes
    ----------
    ref_name : str
        The name of the reference sequence of the feature, taken from
        its :attr:`interval`.
    """

    interval: object
    strand: Strand = Strand.UNSTRANDED
    type: object = None
    source: object = None
    score: object = None
    phase: object = None
    # The attributes are not hashable, but they are covered by equality
    attributes: dict = field(default_factory=dict, hash=False)
    name: object = None
    thick: object = None
    item_rgb: object = None
    blocks: tuple = ()
    warnings: tuple = ()

    def __post_init__(self):
        # Read-only view on a copy, so that the attributes cannot be
        # changed via the original dictionary either
        object.__setattr__(
            self, "attributes", MappingProxyType(dict(self.attributes))
        )

    def __repr__(self):
        """Represent Feature as a string for debugging."""
        args = [repr(self.interval)]
        if self.strand != Strand.UNSTRANDED:
            args.append(str(self.strand))
        for name in _OPTIONAL_FIELDS:
            value = getattr(self, name)
            # Absent values are omitted
            if value is None or value == {} or value == ():
                continue
            if isinstance(value, MappingProxyType):
                value = dict(value)
            args.append(f"{name}={value!r}")
        return f"Feature({', '.join(args)})"

    @property
    def ref_name(self):
        return self.interval.ref_name

    @property
    def length(self):
        return self.interval.length


@dataclass(frozen=True)
class Comment:
    """
    Marker for a line that does not describe a feature, i.e. a comment,
    a GFF3 directive or a blank line.

    Parameters
    ----------
    line_number : int
        The 1-based number of the line.
    text : str
        The line without line terminator.

    Attributes
    ----------
    directive : str or None
        The content of a GFF3 directive line (``##...``) without the
        leading ``##``.
        ``None`` for plain comments and blank lines.
    """

    line_number: int
    text: str

    @property
    def directive(self):
        if self.text.startswith("##"):
            return self.text[2:]
        return None


@dataclass(frozen=True)
class Header:
    """
    Marker for a BED header line, i.e. a ``track`` or ``browser`` line.

    Parameters
    ----------
    line_number : int
        The 1-based number of the line.
    text : str
        The line without line terminator.

    Attributes
    ----------
    keyword : str
        The first word of the line (``'track'`` or ``'browser'``).
    """

    line_number: int
    text: str

    @property
    def keyword(self):
        return self.text.split(maxsplit=1)[0]
