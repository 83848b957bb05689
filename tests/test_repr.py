# This source code is part of the Biolocus package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest
from biolocus import (
    Comment,
    Convention,
    Feature,
    Header,
    Interval,
    Position,
    Strand,
)


@pytest.mark.parametrize(
    "repr_object",
    [
        Position(5, Convention.ONE_BASED),
        Position(0, Convention.ZERO_BASED),
        Interval("chr1", 0, 10, Convention.ZERO_BASED),
        Interval("HLA-A*01:01", 1, 1, Convention.ONE_BASED),
        Feature(
            Interval("chr1", 1, 100, Convention.ONE_BASED),
            Strand.FORWARD,
            type="gene",
            attributes={"ID": "gene1"},
        ),
        Feature(
            Interval("chr22", 1000, 5000, Convention.ZERO_BASED),
            Strand.REVERSE,
            name="cloneA",
            score=960,
            item_rgb=(255, 0, 0),
            blocks=(
                Interval("chr22", 1000, 1567, Convention.ZERO_BASED),
                Interval("chr22", 4512, 5000, Convention.ZERO_BASED),
            ),
        ),
        Comment(3, "##gff-version 3"),
        Header(1, "track name=test"),
    ],
)
def test_repr(repr_object):
    assert eval(repr(repr_object)) == repr_object
