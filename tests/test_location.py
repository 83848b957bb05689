# This source code is part of the Biolocus package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import itertools
import numpy as np
import pytest
import biolocus
from biolocus import (
    Convention,
    Interval,
    Position,
    Strand,
    convert,
    length,
    make_interval,
    make_position,
    overlaps,
)


ONE = Convention.ONE_BASED
ZERO = Convention.ZERO_BASED


@pytest.mark.parametrize(
    "value, source, target",
    [
        (value, source, target) for value, source, target
        in itertools.product([0, 1, 2, 99, 2**40], [ONE, ZERO], [ONE, ZERO])
        # 0 is not a valid 1-based position
        if not (value == 0 and source == ONE)
    ]
)
def test_conversion_is_reversible(value, source, target):
    """
    Converting a position into another convention and back must give
    the original position.
    """
    position = make_position(value, source)
    assert convert(convert(position, target), source) == position


def test_conversion_offset():
    assert convert(make_position(0, ZERO), ONE) == Position(1, ONE)
    assert convert(make_position(10, ONE), ZERO) == Position(9, ZERO)
    # Conversion into the same convention is the identity
    position = make_position(5, ONE)
    assert convert(position, ONE) is position


def test_position_keeps_convention():
    """
    Positions with the same value in different conventions describe
    different bases and must not be equal.
    """
    assert make_position(5, ONE) != make_position(5, ZERO)
    assert make_position(5, ONE) == make_position(5, ONE)
    assert len({make_position(5, ONE), make_position(5, ZERO)}) == 2


def test_position_accepts_numpy_integers():
    position = make_position(np.int64(7), ZERO)
    assert position.value == 7
    assert type(position.value) is int


@pytest.mark.parametrize(
    "value, convention",
    [(-1, ZERO), (0, ONE), (-5, ONE), (1.5, ZERO), ("3", ONE), (True, ZERO)]
)
def test_invalid_position(value, convention):
    with pytest.raises(biolocus.InvalidCoordinate) as excinfo:
        make_position(value, convention)
    assert excinfo.value.kind == "InvalidCoordinate"
    assert excinfo.value.line_number is None


def test_position_requires_convention():
    with pytest.raises(TypeError):
        Position(5, "one-based")


@pytest.mark.parametrize(
    "start, end, convention, exp_length",
    [
        (1, 10, ONE, 10),
        (0, 10, ZERO, 10),
        (5, 5, ONE, 1),
        (5, 5, ZERO, 0),
        (1, 230218, ONE, 230218),
    ]
)
def test_length(start, end, convention, exp_length):
    interval = make_interval("chr1", start, end, convention)
    assert length(interval) == exp_length
    assert interval.length == exp_length


def test_length_independent_of_convention():
    """
    The same genomic span has the same length in both conventions.
    """
    gff_interval = make_interval("chr1", 1, 10, ONE)
    bed_interval = make_interval("chr1", 0, 10, ZERO)
    assert length(gff_interval) == length(bed_interval) == 10
    assert gff_interval.bounds(ZERO) == bed_interval.bounds(ZERO) == (0, 10)
    assert gff_interval.bounds(ONE) == bed_interval.bounds(ONE) == (1, 10)
    assert gff_interval.as_convention(ZERO) == bed_interval
    assert bed_interval.as_convention(ONE) == gff_interval
    # The convention is part of the identity of an interval
    assert gff_interval != bed_interval


def test_interval_positions():
    interval = make_interval("chr1", 1, 10, ONE)
    assert interval.start == Position(1, ONE)
    assert interval.end == Position(10, ONE)
    assert interval.convention == ONE
    assert interval.ref_name == "chr1"


def test_interval_from_positions():
    start = make_position(0, ZERO)
    end = make_position(10, ZERO)
    assert make_interval("chr1", start, end, ZERO) \
        == make_interval("chr1", 0, 10, ZERO)
    # Mixing conventions is not allowed
    with pytest.raises(biolocus.InvalidCoordinate):
        make_interval("chr1", start, make_position(10, ONE), ZERO)
    with pytest.raises(biolocus.InvalidCoordinate):
        make_interval("chr1", start, end, ONE)


def test_zero_length_interval():
    """
    Point insertions are only representable in the 0-based half-open
    convention.
    """
    insertion = make_interval("chr1", 5, 5, ZERO)
    assert insertion.length == 0
    with pytest.raises(biolocus.InvalidInterval):
        make_interval("chr1", 6, 5, ONE)
    with pytest.raises(biolocus.InvalidInterval):
        insertion.as_convention(ONE)


@pytest.mark.parametrize(
    "start, end, convention",
    [(10, 9, ZERO), (10, 8, ONE), (100, 1, ONE)]
)
def test_invalid_interval(start, end, convention):
    with pytest.raises(biolocus.InvalidInterval):
        make_interval("chr1", start, end, convention)


@pytest.mark.parametrize(
    "start, end, convention",
    [(0, 10, ONE), (-1, 10, ZERO), (1, 0, ONE)]
)
def test_interval_invalid_coordinate(start, end, convention):
    with pytest.raises(biolocus.InvalidCoordinate):
        make_interval("chr1", start, end, convention)


@pytest.mark.parametrize("ref_name", ["", None, 1])
def test_invalid_reference(ref_name):
    with pytest.raises(biolocus.InvalidReference):
        make_interval(ref_name, 0, 10, ZERO)


def test_interval_is_immutable():
    interval = make_interval("chr1", 0, 10, ZERO)
    with pytest.raises(AttributeError):
        interval.ref_name = "chr2"
    with pytest.raises(AttributeError):
        interval.start = make_position(1, ZERO)


@pytest.mark.parametrize(
    "a, b, exp_overlap",
    [
        # Touching half-open intervals do not overlap
        (("chr1", 0, 5, ZERO), ("chr1", 5, 10, ZERO), False),
        (("chr1", 0, 5, ZERO), ("chr1", 4, 10, ZERO), True),
        # Different reference sequences
        (("chr1", 0, 5, ZERO), ("chr2", 4, 10, ZERO), False),
        # Mixed conventions: [0,5) and [1,5] share the bases 1 to 4
        (("chr1", 0, 5, ZERO), ("chr1", 1, 5, ONE), True),
        # [0,5) and [6,10] are adjacent
        (("chr1", 0, 5, ZERO), ("chr1", 6, 10, ONE), False),
        # Containment
        (("chr1", 0, 100, ZERO), ("chr1", 40, 50, ZERO), True),
        # Zero-length intervals never overlap
        (("chr1", 0, 100, ZERO), ("chr1", 40, 40, ZERO), False),
        # Closed intervals overlap, if they share a boundary
        (("chr1", 1, 5, ONE), ("chr1", 5, 10, ONE), True),
    ]
)
def test_overlaps(a, b, exp_overlap):
    a = make_interval(*a)
    b = make_interval(*b)
    assert overlaps(a, b) == exp_overlap
    assert overlaps(b, a) == exp_overlap


@pytest.mark.parametrize(
    "symbol, exp_strand",
    [
        ("+", Strand.FORWARD),
        ("-", Strand.REVERSE),
        (".", Strand.UNKNOWN),
        ("?", Strand.UNKNOWN),
        ("", Strand.UNSTRANDED),
        (None, Strand.UNSTRANDED),
    ]
)
def test_strand_from_symbol(symbol, exp_strand):
    assert biolocus.strand_from_symbol(symbol) == exp_strand


@pytest.mark.parametrize("symbol", ["*", "++", "plus", "0", " "])
def test_invalid_strand(symbol):
    with pytest.raises(biolocus.InvalidStrand):
        biolocus.strand_from_symbol(symbol)


def test_unknown_and_unstranded_are_distinct():
    assert Strand.UNKNOWN != Strand.UNSTRANDED
    assert Strand.UNKNOWN.symbol == "."
    assert Strand.UNSTRANDED.symbol == ""
    assert Strand.FORWARD.symbol == "+"
    assert Strand.REVERSE.symbol == "-"


@pytest.mark.parametrize(
    "region, exp_ref_name, exp_bounds",
    [
        ("chr1:1-100", "chr1", (1, 100)),
        ("chr2:1,001-2,000", "chr2", (1001, 2000)),
        ("HLA-A*01:01:01:01:1-3503", "HLA-A*01:01:01:01", (1, 3503)),
        (" 7:5-5 ", "7", (5, 5)),
    ]
)
def test_parse_region(region, exp_ref_name, exp_bounds):
    interval = biolocus.parse_region(region)
    assert interval.ref_name == exp_ref_name
    assert interval.convention == ONE
    assert interval.bounds(ONE) == exp_bounds


def test_region_string():
    """
    The string representation of an interval is a region string,
    that can be parsed again.
    """
    interval = make_interval("chrX", 99, 200, ZERO)
    assert str(interval) == "chrX:100-200"
    assert biolocus.parse_region(str(interval)) == interval.as_convention(ONE)


@pytest.mark.parametrize(
    "region, exp_error",
    [
        ("chr1", biolocus.InvalidReference),
        (":1-100", biolocus.InvalidReference),
        ("chr1:100", biolocus.InvalidCoordinate),
        ("chr1:a-b", biolocus.InvalidCoordinate),
        ("chr1:-5-10", biolocus.InvalidCoordinate),
        ("chr1:0-10", biolocus.InvalidCoordinate),
        ("chr1:10-5", biolocus.InvalidInterval),
    ]
)
def test_invalid_region(region, exp_error):
    with pytest.raises(exp_error):
        biolocus.parse_region(region)


def test_span():
    a = make_interval("chr1", 10, 20, ZERO)
    b = make_interval("chr1", 5, 8, ONE)
    c = make_interval("chr1", 30, 30, ZERO)
    spanning = biolocus.span(a, b, c)
    assert spanning == make_interval("chr1", 4, 30, ZERO)
    # The convention of the first interval is used
    assert biolocus.span(b, a) == make_interval("chr1", 5, 20, ONE)
    assert biolocus.span(a) == a


def test_span_errors():
    with pytest.raises(ValueError):
        biolocus.span()
    with pytest.raises(biolocus.InvalidReference):
        biolocus.span(
            make_interval("chr1", 0, 10, ZERO),
            make_interval("chr2", 0, 10, ZERO),
        )


def test_reference_order():
    names = ["chrX", "10", "chr10", "2", "chr2", "1"]
    assert sorted(names, key=biolocus.reference_sort_key) \
        == ["1", "2", "10", "chr10", "chr2", "chrX"]


def test_interval_order():
    intervals = [
        make_interval("10", 0, 10, ZERO),
        make_interval("2", 5, 10, ZERO),
        make_interval("2", 0, 20, ZERO),
        make_interval("2", 0, 10, ZERO),
        make_interval("chr1", 1, 10, ONE),
    ]
    assert sorted(intervals) == [
        make_interval("2", 0, 10, ZERO),
        make_interval("2", 0, 20, ZERO),
        make_interval("2", 5, 10, ZERO),
        make_interval("10", 0, 10, ZERO),
        make_interval("chr1", 1, 10, ONE),
    ]
    assert make_interval("2", 0, 10, ZERO) < make_interval("10", 0, 5, ZERO)
    assert make_interval("chr1", 5, 6, ONE) > make_interval("chr1", 0, 5, ZERO)


def test_interval_hash():
    intervals = {
        make_interval("chr1", 0, 10, ZERO),
        make_interval("chr1", 0, 10, ZERO),
        make_interval("chr1", 1, 10, ONE),
    }
    assert len(intervals) == 2
