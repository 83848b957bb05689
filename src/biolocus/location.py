# This source code is part of the Biolocus package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biolocus"
__all__ = [
    "Convention",
    "Strand",
    "Position",
    "Interval",
    "make_position",
    "convert",
    "make_interval",
    "length",
    "overlaps",
    "strand_from_symbol",
    "parse_region",
    "span",
    "reference_sort_key",
]

import numbers
import re
from enum import Enum, auto
import numpy as np
from .error import (
    InvalidCoordinate,
    InvalidInterval,
    InvalidReference,
    InvalidStrand,
)


class Convention(Enum):
    """
    This enum type describes the coordinate convention a position or
    interval was constructed under.

        - **ONE_BASED** - The first base of a sequence has the position
          1. Intervals include their start and their end (closed
          intervals), as used in GFF3 files.
        - **ZERO_BASED** - The first base of a sequence has the position
          0. Intervals include their start but exclude their end
          (half-open intervals), as used in BED files.
    """

    ONE_BASED = auto()
    ZERO_BASED = auto()


class Strand(Enum):
    """
    This enum type describes the strand of a feature.

        - **FORWARD** - The feature is located on the forward strand.
        - **REVERSE** - The feature is located on the reverse strand.
        - **UNKNOWN** - The feature is stranded, but the strand is not
          specified.
        - **UNSTRANDED** - Strandedness does not apply to the feature.
    """

    FORWARD = auto()
    REVERSE = auto()
    UNKNOWN = auto()
    UNSTRANDED = auto()

    @property
    def symbol(self):
        """
        The text symbol of the strand, as written in annotation files.
        An empty string for :attr:`UNSTRANDED`.
        """
        return _STRAND_TO_SYMBOL[self]


_STRAND_TO_SYMBOL = {
    Strand.FORWARD: "+",
    Strand.REVERSE: "-",
    Strand.UNKNOWN: ".",
    Strand.UNSTRANDED: "",
}
# GFF3 uses '?' for stranded features with unknown strand
_SYMBOL_TO_STRAND = {
    "+": Strand.FORWARD,
    "-": Strand.REVERSE,
    ".": Strand.UNKNOWN,
    "?": Strand.UNKNOWN,
}
# Lowest valid position in each convention
_FIRST_POSITION = {
    Convention.ONE_BASED: 1,
    Convention.ZERO_BASED: 0,
}
_REGION_BOUNDS = re.compile(r"([0-9][0-9,]*)-([0-9][0-9,]*)")
_DECIMAL = re.compile(r"[0-9]+")


class Position:
    """
    A :class:`Position` is an integer offset on a reference sequence,
    tagged with the :class:`Convention` it was constructed under.

    A position never reinterprets its convention:
    Two positions are only equal, if both the value and the convention
    are equal.
    Use :func:`convert()` to switch between conventions.

    Objects of this class are immutable.

    Parameters
    ----------
    value : int
        The offset on the reference sequence.
    convention : Convention
        The convention `value` is given in.

    Attributes
    ----------
    value, convention
        Same as the parameters.

    Raises
    ------
    InvalidCoordinate
        If `value` is not an integer or lies before the first position
        of the sequence in the given convention.
    """

    def __init__(self, value, convention):
        if not isinstance(convention, Convention):
            raise TypeError(
                f"Expected 'Convention', not '{type(convention).__name__}'"
            )
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise InvalidCoordinate(
                f"Position must be an integer, not '{type(value).__name__}'"
            )
        value = int(value)
        if value < _FIRST_POSITION[convention]:
            raise InvalidCoordinate(
                f"Position {value} is invalid in {convention.name} convention"
            )
        self._value = value
        self._convention = convention

    def __repr__(self):
        """Represent Position as a string for debugging."""
        return f"Position({self._value}, {self._convention})"

    @property
    def value(self):
        return self._value

    @property
    def convention(self):
        return self._convention

    def __eq__(self, item):
        if not isinstance(item, Position):
            return False
        return (
            self._value == item._value
            and self._convention == item._convention
        )

    def __hash__(self):
        return hash((self._value, self._convention))


class Interval:
    """
    An :class:`Interval` is a range on a named reference sequence,
    defined by a start and an end :class:`Position`.

    The interval is closed under :attr:`Convention.ONE_BASED` and
    half-open under :attr:`Convention.ZERO_BASED`.
    Consequently, zero-length intervals (e.g. the location of an
    insertion) can only be expressed in the 0-based convention.
    Note that the end of an interval is not converted like a single
    position:
    The 1-based closed interval ``1-10`` and the 0-based half-open
    interval ``0-10`` describe the same ten bases.

    Objects of this class are immutable.
    Intervals are ordered by their reference sequence name
    (see :func:`reference_sort_key()`), then by start and then by end.

    Parameters
    ----------
    ref_name : str
        The name of the reference sequence, e.g. a chromosome.
    start, end : int or Position
        The start and end of the interval.
        Given :class:`Position` objects must use `convention`.
    convention : Convention
        The convention of `start` and `end`.

    Attributes
    ----------
    ref_name : str
        Same as the parameter.
    start, end : Position
        The start and end of the interval in its own convention.
    convention : Convention
        Same as the parameter.
    length : int
        The number of bases the interval spans.

    Raises
    ------
    InvalidReference
        If `ref_name` is empty.
    InvalidCoordinate
        If `start` or `end` is not a valid position in `convention`.
    InvalidInterval
        If `end` precedes `start`.

    Examples
    --------

    >>> gff_interval = Interval("chr1", 1, 10, Convention.ONE_BASED)
    >>> bed_interval = Interval("chr1", 0, 10, Convention.ZERO_BASED)
    >>> print(gff_interval.length, bed_interval.length)
    10 10
    >>> print(gff_interval.bounds(Convention.ZERO_BASED))
    (0, 10)
    >>> print(gff_interval)
    chr1:1-10
    """

    def __init__(self, ref_name, start, end, convention):
        if not isinstance(ref_name, str) or len(ref_name) == 0:
            raise InvalidReference(
                "The reference sequence name must be a non-empty string"
            )
        start = _as_position(start, convention)
        end = _as_position(end, convention)
        # In a closed interval 'end == start - 1' would be an empty
        # interval, which is only representable as half-open interval
        if end.value < start.value:
            raise InvalidInterval(
                f"The end {end.value} precedes the start {start.value}"
            )
        self._ref_name = ref_name
        self._start = start
        self._end = end
        self._convention = convention
        # Internal 0-based half-open representation
        self._start0 = start.value - _FIRST_POSITION[convention]
        self._end0 = end.value

    def __repr__(self):
        """Represent Interval as a string for debugging."""
        return (
            f"Interval({self._ref_name!r}, {self._start.value}, "
            f"{self._end.value}, {self._convention})"
        )

    def __str__(self):
        # Region string notation, always 1-based closed
        return f"{self._ref_name}:{self._start0 + 1}-{self._end0}"

    @property
    def ref_name(self):
        return self._ref_name

    @property
    def start(self):
        return self._start

    @property
    def end(self):
        return self._end

    @property
    def convention(self):
        return self._convention

    @property
    def length(self):
        return self._end0 - self._start0

    def bounds(self, convention=Convention.ZERO_BASED):
        """
        Get the start and end of the interval as integers in the given
        convention.

        Parameters
        ----------
        convention : Convention, optional
            The convention of the returned values.
            By default, half-open 0-based bounds are returned.

        Returns
        -------
        start, end : int
            The bounds of the interval.
        """
        return _from_half_open(self._start0, self._end0, convention)

    def as_convention(self, convention):
        """
        Express the same span in another convention.

        Parameters
        ----------
        convention : Convention
            The convention of the returned interval.

        Returns
        -------
        interval : Interval
            The interval in the new convention.

        Raises
        ------
        InvalidInterval
            If a zero-length interval is converted into the 1-based
            closed convention.
        """
        if convention == self._convention:
            return self
        start, end = self.bounds(convention)
        return Interval(self._ref_name, start, end, convention)

    def _sort_key(self):
        return (reference_sort_key(self._ref_name), self._start0, self._end0)

    def __eq__(self, item):
        if not isinstance(item, Interval):
            return False
        return (
            self._ref_name == item._ref_name
            and self._convention == item._convention
            and self._start0 == item._start0
            and self._end0 == item._end0
        )

    def __lt__(self, item):
        if not isinstance(item, Interval):
            return NotImplemented
        return self._sort_key() < item._sort_key()

    def __gt__(self, item):
        if not isinstance(item, Interval):
            return NotImplemented
        return self._sort_key() > item._sort_key()

    def __hash__(self):
        return hash(
            (self._ref_name, self._start0, self._end0, self._convention)
        )


def make_position(value, convention):
    """
    Create a :class:`Position` in the given convention.

    Parameters
    ----------
    value : int
        The offset on the reference sequence.
    convention : Convention
        The convention `value` is given in.

    Returns
    -------
    position : Position
        The created position.

    Raises
    ------
    InvalidCoordinate
        If `value` is below 0 in the 0-based or below 1 in the 1-based
        convention.
    """
    return Position(value, convention)


def convert(position, target_convention):
    """
    Convert a :class:`Position` into another convention.

    The conversion is lossless: Converting a position back into its
    original convention gives the original position.

    Parameters
    ----------
    position : Position
        The position to be converted.
    target_convention : Convention
        The convention of the returned position.

    Returns
    -------
    converted : Position
        The position in `target_convention`.

    Examples
    --------

    >>> one_based = convert(make_position(0, Convention.ZERO_BASED), Convention.ONE_BASED)
    >>> print(one_based.value)
    1
    >>> print(convert(one_based, Convention.ZERO_BASED).value)
    0
    """
    if position.convention == target_convention:
        return position
    value = (
        position.value
        - _FIRST_POSITION[position.convention]
        + _FIRST_POSITION[target_convention]
    )
    return Position(value, target_convention)


def make_interval(ref_name, start, end, convention):
    """
    Create an :class:`Interval` on a reference sequence.

    Parameters
    ----------
    ref_name : str
        The name of the reference sequence.
    start, end : int or Position
        The start and end of the interval.
    convention : Convention
        The convention of `start` and `end`.
        The interval is closed for :attr:`Convention.ONE_BASED` and
        half-open for :attr:`Convention.ZERO_BASED`.

    Returns
    -------
    interval : Interval
        The created interval.
    """
    return Interval(ref_name, start, end, convention)


def length(interval):
    """
    Get the number of bases spanned by an :class:`Interval`,
    independent of its convention.

    Parameters
    ----------
    interval : Interval
        The interval to measure.

    Returns
    -------
    length : int
        The length of the interval.
    """
    return interval.length


def overlaps(a, b):
    """
    Check whether two intervals overlap.

    Intervals on different reference sequences never overlap.
    Intervals that only touch each other do not overlap either, e.g.
    the 0-based half-open intervals ``[0,5)`` and ``[5,10)``.

    Parameters
    ----------
    a, b : Interval
        The intervals to compare.

    Returns
    -------
    overlap : bool
        True, if the intervals share at least one base.

    Examples
    --------

    >>> a = make_interval("chr1", 0, 5, Convention.ZERO_BASED)
    >>> print(overlaps(a, make_interval("chr1", 5, 10, Convention.ZERO_BASED)))
    False
    >>> print(overlaps(a, make_interval("chr1", 5, 10, Convention.ONE_BASED)))
    True
    """
    if a.ref_name != b.ref_name:
        return False
    a_start, a_end = a.bounds()
    b_start, b_end = b.bounds()
    return max(a_start, b_start) < min(a_end, b_end)


def strand_from_symbol(symbol):
    """
    Get the :class:`Strand` corresponding to a strand symbol.

    Parameters
    ----------
    symbol : str or None
        ``'+'`` or ``'-'`` for the forward or reverse strand,
        ``'.'`` or ``'?'`` for an unknown strand and ``None`` or an
        empty string for an unstranded feature.

    Returns
    -------
    strand : Strand
        The corresponding strand.

    Raises
    ------
    InvalidStrand
        If the symbol is not recognized.
    """
    if symbol is None or symbol == "":
        return Strand.UNSTRANDED
    try:
        return _SYMBOL_TO_STRAND[symbol]
    except KeyError:
        raise InvalidStrand(f"'{symbol}' is not a valid strand symbol") \
            from None


def parse_region(region):
    """
    Parse a region string of the form ``<seqid>:<start>-<end>`` into an
    :class:`Interval`.

    The bounds are interpreted as 1-based closed coordinates, as usual
    for region strings.
    The last colon separates the reference sequence name from the
    bounds, hence the name itself may contain colons.
    Thousands separators are allowed in the bounds.

    Parameters
    ----------
    region : str
        The region string.

    Returns
    -------
    interval : Interval
        The 1-based closed interval described by the string.

    Raises
    ------
    InvalidReference
        If the region has no reference sequence name.
    InvalidCoordinate
        If the bounds are missing or not numeric.

    Examples
    --------

    >>> interval = parse_region("chr2:1,001-2,000")
    >>> print(interval.ref_name, interval.length)
    chr2 1000
    """
    ref_name, sep, bounds = region.strip().rpartition(":")
    if not sep or len(ref_name) == 0:
        raise InvalidReference(
            f"Region '{region}' is not in the form <seqid>:<start>-<end>"
        )
    match = _REGION_BOUNDS.fullmatch(bounds)
    if match is None:
        raise InvalidCoordinate(
            f"Region '{region}' is not in the form <seqid>:<start>-<end>"
        )
    start, end = [int(group.replace(",", "")) for group in match.groups()]
    return Interval(ref_name, start, end, Convention.ONE_BASED)


def span(*intervals):
    """
    Get the smallest interval, that covers all given intervals.

    Parameters
    ----------
    *intervals : Interval
        The intervals to be covered.
        All intervals must be located on the same reference sequence.

    Returns
    -------
    spanning : Interval
        The covering interval, in the convention of the first given
        interval.

    Raises
    ------
    InvalidReference
        If the intervals are located on different reference sequences.
    """
    if len(intervals) == 0:
        raise ValueError("At least one interval is required")
    ref_name = intervals[0].ref_name
    for interval in intervals[1:]:
        if interval.ref_name != ref_name:
            raise InvalidReference(
                f"Cannot span intervals on '{ref_name}' "
                f"and '{interval.ref_name}'"
            )
    bounds = np.array([interval.bounds() for interval in intervals])
    convention = intervals[0].convention
    start, end = _from_half_open(
        int(np.min(bounds[:, 0])), int(np.max(bounds[:, 1])), convention
    )
    return Interval(ref_name, start, end, convention)


def reference_sort_key(ref_name):
    """
    Get a key for sorting reference sequence names.

    Names consisting only of decimal digits are ordered numerically and
    before all other names, which are ordered lexically.

    Parameters
    ----------
    ref_name : str
        The name of the reference sequence.

    Returns
    -------
    key : tuple
        The sort key.

    Examples
    --------

    >>> print(sorted(["chrX", "10", "2", "chr1"], key=reference_sort_key))
    ['2', '10', 'chr1', 'chrX']
    """
    if _DECIMAL.fullmatch(ref_name):
        return (0, int(ref_name), ref_name)
    return (1, 0, ref_name)


def _as_position(value, convention):
    if isinstance(value, Position):
        if value.convention != convention:
            raise InvalidCoordinate(
                f"Position uses {value.convention.name} convention, "
                f"but {convention.name} convention is required"
            )
        return value
    return Position(value, convention)


def _from_half_open(start, end, convention):
    """
    Convert 0-based half-open bounds into the bounds of the given
    convention.
    """
    return start + _FIRST_POSITION[convention], end
