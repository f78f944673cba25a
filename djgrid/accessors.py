"""Attribute access on grid rows.

Rows handed to grid columns may be dictionaries, Django model instances or
any other object. Objects may expose a value through a ``get_<name>()`` or
``is_<name>()`` accessor, or through a plain attribute or property.

The accessor used for a given row type and attribute name is looked up once
and cached, so rendering a page of rows doesn't repeat the lookup for each
cell.
"""

from __future__ import annotations

from functools import lru_cache, partial
from typing import Any, Callable, Mapping

from djgrid.errors import MissingAccessorError


#: Method prefixes checked, in order, before falling back to an attribute.
ACCESSOR_PREFIXES = ('get_', 'is_')


def _read_attribute(
    attr_name: str,
    row: Any,
) -> Any:
    try:
        value = getattr(row, attr_name)
    except AttributeError:
        raise MissingAccessorError(
            '%s has no accessor or attribute for "%s"'
            % (type(row).__name__, attr_name))

    if callable(value):
        value = value()

    return value


@lru_cache(maxsize=None)
def get_row_accessor(
    row_type: type,
    name: str,
) -> Callable[[Any], Any]:
    """Return a function reading an attribute from rows of a given type.

    Accessor methods (``get_<name>``, then ``is_<name>``) defined on the
    type take precedence. Otherwise the returned function reads ``<name>``
    from the row itself, which also covers instance attributes.

    Callable values are called without arguments.

    Args:
        row_type (type):
            The type of the row.

        name (str):
            The attribute name.

    Returns:
        callable:
        A function taking a row and returning the value. It raises
        :py:class:`~djgrid.errors.MissingAccessorError` if the row doesn't
        provide the attribute.
    """
    for prefix in ACCESSOR_PREFIXES:
        accessor_name = '%s%s' % (prefix, name)

        if hasattr(row_type, accessor_name):
            return partial(_read_attribute, accessor_name)

    return partial(_read_attribute, name)


def has_row_accessor(
    row: Any,
    name: str,
) -> bool:
    """Return whether a row provides a value for an attribute.

    Args:
        row (object):
            The row to check.

        name (str):
            The attribute name.

    Returns:
        bool:
        ``True`` if the attribute can be read from the row.
    """
    if isinstance(row, Mapping):
        return name in row

    return (any(hasattr(type(row), '%s%s' % (prefix, name))
                for prefix in ACCESSOR_PREFIXES) or
            hasattr(row, name))
