# This source code is part of the Biolocus package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biolocus.io.bed"
__all__ = ["format_bed_line"]

import numpy as np
from ...location import Convention, Strand


def format_bed_line(feature, columns=None):
    """
    Write a :class:`Feature` as tab separated BED line.

    The location is always written as 0-based half-open interval,
    independent of the convention of :attr:`Feature.interval`.

    Parameters
    ----------
    feature : Feature
        The feature to be written.
    columns : int, optional
        The number of columns to be written, from 3 to 12.
        Groups of dependent columns cannot be split, hence 7, 10 and 11
        columns are not allowed.
        Missing values in the written columns are filled with
        placeholders:
        ``.`` for *name*, ``0`` for *score*, ``.`` for *strand*, the
        feature bounds for *thickStart* and *thickEnd*, ``0`` for
        *itemRgb* and a single block spanning the feature.
        By default, as many columns are written as the feature has
        values for.

    Returns
    -------
    line : str
        The BED line, without line terminator.

    Examples
    --------

    >>> interval = make_interval("chr1", 1, 100, Convention.ONE_BASED)
    >>> feature = Feature(interval, Strand.FORWARD, name="feat1")
    >>> print(format_bed_line(feature).replace("\\t", " "))
    chr1 0 100 feat1 0 +
    >>> print(format_bed_line(feature, columns=4).replace("\\t", " "))
    chr1 0 100 feat1
    """
    if columns is None:
        columns = _present_columns(feature)
    elif not 3 <= columns <= 12 or columns in (7, 10, 11):
        raise ValueError(f"Cannot write {columns} BED columns")

    start, end = feature.interval.bounds(Convention.ZERO_BASED)
    fields = [feature.ref_name, str(start), str(end)]
    fields.append(feature.name if feature.name is not None else ".")
    fields.append(str(feature.score) if feature.score is not None else "0")
    fields.append(
        "." if feature.strand == Strand.UNSTRANDED else feature.strand.symbol
    )
    if feature.thick is not None:
        thick_start, thick_end = feature.thick.bounds(Convention.ZERO_BASED)
    else:
        thick_start, thick_end = start, end
    fields += [str(thick_start), str(thick_end)]
    if feature.item_rgb is not None:
        fields.append(",".join([str(component) for component in feature.item_rgb]))
    else:
        fields.append("0")
    if len(feature.blocks) > 0:
        block_bounds = np.array(
            [block.bounds(Convention.ZERO_BASED) for block in feature.blocks]
        )
    else:
        block_bounds = np.array([[start, end]])
    block_sizes = block_bounds[:, 1] - block_bounds[:, 0]
    block_starts = block_bounds[:, 0] - start
    fields += [
        str(len(block_bounds)),
        ",".join([str(size) for size in block_sizes]) + ",",
        ",".join([str(rel_start) for rel_start in block_starts]) + ",",
    ]

    return "\t".join(fields[:columns])


def _present_columns(feature):
    """
    Get the minimum number of columns that covers all values of the
    feature.
    """
    if len(feature.blocks) > 0:
        return 12
    if feature.item_rgb is not None:
        return 9
    if feature.thick is not None:
        return 8
    if feature.strand != Strand.UNSTRANDED:
        return 6
    if feature.score is not None:
        return 5
    if feature.name is not None:
        return 4
    return 3
