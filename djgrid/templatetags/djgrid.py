"""Template tags for rendering grids and their page navigation.

Load these with ``{% load djgrid %}``. The ``grid_date`` filter is also used
by grids themselves to format dates that could only be read at render time.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional, TYPE_CHECKING

import pytz
from dateutil.parser import parse as parse_date
from django import template
from django.template.defaultfilters import date as date_filter
from django.utils import timezone
from django.utils.html import escape

from djgrid.pagination import PaginationView

if TYPE_CHECKING:
    from django.template.context import Context
    from django.utils.safestring import SafeString

    from djgrid.grids import Gridview
    from djgrid.pagination import Pagination


logger = logging.getLogger(__name__)
register = template.Library()


@register.simple_tag
def gridview(
    grid: Gridview,
) -> SafeString:
    """Render a grid.

    Example:
        .. code-block:: html+django

           {% gridview grid %}

    Args:
        grid (djgrid.grids.Gridview):
            The grid to render.

    Returns:
        django.utils.safestring.SafeString:
        The rendered grid.
    """
    return grid.render()


@register.simple_tag(takes_context=True)
def grid_pagination(
    context: Context,
    pagination: Pagination,
    **options,
) -> SafeString:
    """Render the page navigation for a grid.

    Example:
        .. code-block:: html+django

           {% grid_pagination pagination max_button_count=5 %}

    Args:
        context (django.template.Context):
            The current template context.

        pagination (djgrid.pagination.Pagination):
            The pagination to render.

        **options (dict):
            Display options for :py:class:`~djgrid.pagination.PaginationView`.

    Returns:
        django.utils.safestring.SafeString:
        The rendered navigation.
    """
    request = context.get('request') or pagination.request

    return PaginationView(request, pagination, **options).render_page_buttons()


def _parse_date_value(
    value: Any,
) -> Optional[date]:
    if isinstance(value, date):
        return value

    if isinstance(value, (int, float, Decimal)) and \
       not isinstance(value, bool):
        return datetime.fromtimestamp(float(value), tz=pytz.utc)

    if isinstance(value, str):
        value = value.strip()

        try:
            return datetime.fromtimestamp(float(value), tz=pytz.utc)
        except (OverflowError, OSError, ValueError):
            pass

        try:
            return parse_date(value)
        except (OverflowError, ValueError):
            return None

    return None


@register.filter
def grid_date(
    value: Any,
    date_format: Optional[str] = None,
) -> Any:
    """Format a date, timestamp or date string.

    Timestamps are treated as UTC. Aware dates are shown in the current
    timezone. Values that can't be read as dates are returned HTML-escaped.

    Example:
        .. code-block:: html+django

           {{ "2024-05-01T10:00:00Z"|grid_date:"d/m/Y H:i" }}

    Args:
        value (object):
            The value to format.

        date_format (str, optional):
            The date format, using Django's date format syntax.

    Returns:
        str:
        The formatted date.
    """
    parsed = _parse_date_value(value)

    if parsed is None:
        logger.debug('Unable to parse %r as a date', value)

        if value is None:
            return value

        return escape(value)

    if isinstance(parsed, datetime) and timezone.is_aware(parsed):
        parsed = timezone.localtime(parsed)

    return date_filter(parsed, date_format)
