"""Exception types raised by the Segregation CA core."""


class SegregationError(Exception):
    """Base class for all simulation errors."""


class InvalidDimensionError(SegregationError, ValueError):
    """Grid side length is not a positive integer."""


class InvalidDistributionError(SegregationError, ValueError):
    """A distribution fraction lies outside [0, 1]."""


class OutOfCapacityError(SegregationError, ValueError):
    """Requested actor counts exceed the number of grid cells."""


class ThresholdOutOfRangeError(SegregationError, ValueError):
    """Satisfaction threshold lies outside [0, 1]."""


class InvariantBrokenError(SegregationError, RuntimeError):
    """Vacancy bookkeeping went inconsistent during repopulation."""
