"""Exception classes raised by djgrid components.

All errors are raised synchronously where a component is misused, and are
left for the caller to handle.
"""


class GridError(Exception):
    """Base class for all djgrid errors."""


class InvalidArgumentError(GridError, ValueError):
    """A value of the wrong type or shape was passed to a component."""


class UnsupportedFormatError(GridError):
    """A column format name is not known to the formatter."""


class UnknownAttributeError(GridError):
    """A sort or filter referenced an attribute that was never registered."""


class MissingAccessorError(GridError):
    """A row object has no accessor for a requested attribute."""


class MissingLabelError(GridError):
    """A column has neither a label nor an attribute name."""


class MissingDependencyError(GridError):
    """A required collaborator was not attached before use."""
