# This source code is part of the Biolocus package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains all errors and warnings raised while building
locations or parsing annotation lines.
"""

__name__ = "biolocus"
__all__ = [
    "AnnotationError",
    "MalformedLine",
    "InvalidCoordinate",
    "InvalidInterval",
    "InvalidReference",
    "InvalidStrand",
    "InvalidScore",
    "InvalidPhase",
    "MalformedAttribute",
    "ScoreRangeWarning",
]


class AnnotationError(ValueError):
    """
    Base class for all errors of this package.

    Parameters
    ----------
    message : str
        Description of the problem.
    line_number : int, optional
        The 1-based number of the offending line.
        ``None`` if the error was not raised while parsing a line.

    Attributes
    ----------
    message, line_number
        Same as the parameters.
    kind : str
        A machine readable name of the error kind, equal to the
        class name (e.g. ``'InvalidStrand'``).
    """

    def __init__(self, message, line_number=None):
        super().__init__(message)
        self.message = message
        self.line_number = line_number

    @property
    def kind(self):
        return type(self).__name__

    def __str__(self):
        if self.line_number is None:
            return self.message
        return f"Line {self.line_number}: {self.message}"


class MalformedLine(AnnotationError):
    """
    Indicates a wrong number of fields or an unparseable column
    structure.

    Parameters
    ----------
    message : str
        Description of the problem.
    line_number : int, optional
        The 1-based number of the offending line.
    expected_fields, found : int, optional
        The expected and the actual number of fields, if the error is
        caused by a wrong field count.
    """

    def __init__(self, message, line_number=None,
                 expected_fields=None, found=None):
        super().__init__(message, line_number)
        self.expected_fields = expected_fields
        self.found = found


class InvalidCoordinate(AnnotationError):
    """
    Indicates a non-numeric or out-of-domain coordinate.
    """

    pass


class InvalidInterval(AnnotationError):
    """
    Indicates an interval whose end precedes its start, or a
    sub-interval that escapes its parent interval.
    """

    pass


class InvalidReference(AnnotationError):
    """
    Indicates an empty or otherwise unusable reference sequence name.
    """

    pass


class InvalidStrand(AnnotationError):
    """
    Indicates a strand symbol outside the recognized set.
    """

    pass


class InvalidScore(AnnotationError):
    """
    Indicates a score column that cannot be parsed as a number.
    """

    pass


class InvalidPhase(AnnotationError):
    """
    Indicates a GFF3 phase other than ``.``, ``0``, ``1`` or ``2``.
    """

    pass


class MalformedAttribute(AnnotationError):
    """
    Indicates a GFF3 attribute entry without a ``key=value`` structure.

    Parameters
    ----------
    message : str
        Description of the problem.
    line_number : int, optional
        The 1-based number of the offending line.
    raw_pair : str, optional
        The attribute entry as found in the line.
    """

    def __init__(self, message, line_number=None, raw_pair=None):
        super().__init__(message, line_number)
        self.raw_pair = raw_pair


class ScoreRangeWarning(UserWarning):
    """
    Indicates a BED score outside the conventional range of 0 to 1000.

    The line is still parsed, an instance of this class is attached to
    the :attr:`Feature.warnings` of the resulting feature.

    Parameters
    ----------
    score : int
        The out-of-range score.
    line_number : int, optional
        The 1-based number of the line.
    """

    def __init__(self, score, line_number=None):
        message = f"BED score {score} is outside the range 0 to 1000"
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)
        self.score = score
        self.line_number = line_number

    def __eq__(self, item):
        if not isinstance(item, ScoreRangeWarning):
            return False
        return self.score == item.score and self.line_number == item.line_number

    def __hash__(self):
        return hash((self.score, self.line_number))
