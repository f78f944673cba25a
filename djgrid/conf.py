"""Project-wide defaults for djgrid components.

Each default can be overridden in the Django settings module, and any
component can override it again through its constructor arguments.
"""

from __future__ import annotations

from typing import Any, Dict

from django.conf import settings


#: Default values for each supported setting.
#:
#: Type:
#:     dict
DEFAULTS: Dict[str, Any] = {
    # Name of the query parameter holding the 1-based page number.
    'DJGRID_PAGE_PARAM': 'page',

    # Name of the query parameter holding the number of items per page.
    'DJGRID_PAGE_SIZE_PARAM': 'per-page',

    'DJGRID_DEFAULT_PAGE_SIZE': 20,
    'DJGRID_MAX_PAGE_SIZE': 50,

    # Name of the query parameter holding the sort tokens.
    'DJGRID_SORT_PARAM': 'sort',
    'DJGRID_SORT_SEPARATOR': ',',
    'DJGRID_ENABLE_MULTI_SORT': False,

    # Content placed in cells that have nothing to show.
    'DJGRID_EMPTY_CELL': '&nbsp;',
}


def get_grid_setting(
    name: str,
    value: Any = None,
) -> Any:
    """Return the value for a djgrid setting.

    Args:
        name (str):
            The name of the setting, as listed in :py:data:`DEFAULTS`.

        value (object, optional):
            An explicit value provided by the caller. If not ``None``, this
            is returned as-is.

    Returns:
        object:
        The explicit value, the value from the Django settings, or the
        default.

    Raises:
        KeyError:
            The setting name is not a djgrid setting.
    """
    if value is not None:
        return value

    return getattr(settings, name, DEFAULTS[name])
