"""Failures raised while reading the rune and passive catalogs."""


class DataError(Exception):
    """Root of every catalog loading failure."""


class DataLoadError(DataError):
    """A catalog file is absent, unreadable or not JSON."""


class DataValidationError(DataError):
    """A catalog entry has the wrong shape, type or an unknown field."""


class DataReferenceError(DataError):
    """A passive node points at a node id the catalog does not define."""
