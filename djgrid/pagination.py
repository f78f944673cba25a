"""Pagination state and page navigation rendering for grids."""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple, TYPE_CHECKING

from django.utils.html import format_html
from django.utils.safestring import mark_safe

from djgrid.conf import get_grid_setting
from djgrid.errors import InvalidArgumentError, MissingDependencyError
from djgrid.html import render_attrs
from djgrid.routing import build_url, get_route_name

if TYPE_CHECKING:
    from django.http import HttpRequest
    from django.utils.safestring import SafeString


logger = logging.getLogger(__name__)


def _is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False

    if isinstance(value, int):
        return True

    if isinstance(value, (float, Decimal, str)):
        try:
            return math.isfinite(float(value))
        except ValueError:
            return False

    return False


def _to_int(value: Any) -> int:
    if isinstance(value, int):
        return value

    return int(float(value))


class Pagination:
    """The pagination state of a grid.

    The page number and page size are read from the request's query
    parameters and kept within valid bounds. Page numbers are 0-based,
    while the page query parameter is 1-based.

    Version Added:
        1.0
    """

    def __init__(
        self,
        request: HttpRequest,
        total_count: Any = 0,
        page_param: Optional[str] = None,
        page_size_param: Optional[str] = None,
        default_page_size: Any = None,
        max_page_size: Any = None,
        route: Optional[str] = None,
    ) -> None:
        """Initialize the pagination.

        Args:
            request (django.http.HttpRequest):
                The HTTP request from the client.

            total_count (int, optional):
                The total number of items.

            page_param (str, optional):
                The name of the page query parameter. Defaults to the
                ``DJGRID_PAGE_PARAM`` setting.

            page_size_param (str, optional):
                The name of the page size query parameter. Defaults to the
                ``DJGRID_PAGE_SIZE_PARAM`` setting.

            default_page_size (int, optional):
                The page size used when the request doesn't specify one.
                Defaults to the ``DJGRID_DEFAULT_PAGE_SIZE`` setting.

            max_page_size (int, optional):
                The largest allowed page size. Defaults to the
                ``DJGRID_MAX_PAGE_SIZE`` setting.

            route (str, optional):
                The URL pattern name used for page links. Defaults to the
                pattern that served the request.

        Raises:
            djgrid.errors.InvalidArgumentError:
                One of the arguments had an invalid type.
        """
        self.request = request
        self._route: Optional[str] = None
        self._page_size: Optional[int] = None
        self._requested_page: Optional[int] = None

        self.total_count = total_count
        self.page_param = get_grid_setting('DJGRID_PAGE_PARAM', page_param)
        self.page_size_param = get_grid_setting('DJGRID_PAGE_SIZE_PARAM',
                                                page_size_param)
        self.default_page_size = get_grid_setting('DJGRID_DEFAULT_PAGE_SIZE',
                                                  default_page_size)
        self.max_page_size = get_grid_setting('DJGRID_MAX_PAGE_SIZE',
                                              max_page_size)

        if route is not None:
            self.route = route

    @property
    def total_count(self) -> int:
        """The total number of items.

        Type:
            int
        """
        return self._total_count

    @total_count.setter
    def total_count(
        self,
        total_count: Any,
    ) -> None:
        if not _is_numeric(total_count):
            raise InvalidArgumentError(
                'Pagination total count must be numeric. %s given.'
                % type(total_count).__name__)

        self._total_count = _to_int(total_count)

    @property
    def page_param(self) -> str:
        """The name of the page query parameter.

        Type:
            str
        """
        return self._page_param

    @page_param.setter
    def page_param(
        self,
        page_param: str,
    ) -> None:
        if not isinstance(page_param, str):
            raise InvalidArgumentError(
                'Pagination page parameter must be a string. %s given.'
                % type(page_param).__name__)

        self._page_param = page_param

    @property
    def page_size_param(self) -> str:
        """The name of the page size query parameter.

        Type:
            str
        """
        return self._page_size_param

    @page_size_param.setter
    def page_size_param(
        self,
        page_size_param: str,
    ) -> None:
        if not isinstance(page_size_param, str):
            raise InvalidArgumentError(
                'Pagination page size parameter must be a string. %s given.'
                % type(page_size_param).__name__)

        self._page_size_param = page_size_param

    @property
    def default_page_size(self) -> int:
        """The page size used when the request doesn't specify one.

        Type:
            int
        """
        return self._default_page_size

    @default_page_size.setter
    def default_page_size(
        self,
        default_page_size: Any,
    ) -> None:
        if not _is_numeric(default_page_size):
            raise InvalidArgumentError(
                'Pagination default page size must be numeric. %s given.'
                % type(default_page_size).__name__)

        self._default_page_size = _to_int(default_page_size)

    @property
    def max_page_size(self) -> int:
        """The largest allowed page size.

        Type:
            int
        """
        return self._max_page_size

    @max_page_size.setter
    def max_page_size(
        self,
        max_page_size: Any,
    ) -> None:
        if not _is_numeric(max_page_size):
            raise InvalidArgumentError(
                'Pagination max page size must be numeric. %s given.'
                % type(max_page_size).__name__)

        self._max_page_size = _to_int(max_page_size)

    @property
    def route(self) -> Optional[str]:
        """The URL pattern name used for page links.

        This defaults to the pattern that served the request. If neither is
        available, links are built from the request path.

        Type:
            str
        """
        if self._route is None:
            return get_route_name(self.request)

        return self._route

    @route.setter
    def route(
        self,
        route: str,
    ) -> None:
        if not isinstance(route, str):
            raise InvalidArgumentError(
                'Pagination route must be a string. %s given.'
                % type(route).__name__)

        self._route = route

    @property
    def page_size(self) -> int:
        """The number of items per page.

        ``0`` means all items are shown on a single page.

        Type:
            int
        """
        if self._page_size is None:
            self.set_page_size(self._get_int_param(self.page_size_param,
                                                   self.default_page_size))

        assert self._page_size is not None

        return self._page_size

    def set_page_size(
        self,
        page_size: Any,
        use_limit: bool = True,
    ) -> None:
        """Set the number of items per page.

        Args:
            page_size (int):
                The page size.

            use_limit (bool, optional):
                Whether to keep the page size between 0 and
                :py:attr:`max_page_size`.

        Raises:
            djgrid.errors.InvalidArgumentError:
                The page size was not numeric.
        """
        if not _is_numeric(page_size):
            raise InvalidArgumentError(
                'Pagination page size must be numeric. %s given.'
                % type(page_size).__name__)

        page_size = _to_int(page_size)

        if use_limit:
            page_size = max(0, min(page_size, self.max_page_size))

        self._page_size = page_size

    @property
    def page_count(self) -> int:
        """The number of pages.

        Type:
            int
        """
        total_count = max(self.total_count, 0)
        page_size = self.page_size

        if page_size < 1:
            return 1 if total_count > 0 else 0

        return -(-total_count // page_size)

    @property
    def current_page(self) -> int:
        """The 0-based index of the current page.

        The requested page is read from the request once, and kept within
        the range of available pages on every access.

        Type:
            int
        """
        if self._requested_page is None:
            self._requested_page = \
                self._get_int_param(self.page_param, 1) - 1

        return self._clamp_page(self._requested_page)

    def set_current_page(
        self,
        page: Any,
    ) -> None:
        """Set the 0-based index of the requested page.

        Args:
            page (int):
                The page index.

        Raises:
            djgrid.errors.InvalidArgumentError:
                The page was not numeric.
        """
        if not _is_numeric(page):
            raise InvalidArgumentError(
                'Pagination page must be numeric. %s given.'
                % type(page).__name__)

        self._requested_page = _to_int(page)

    @property
    def offset(self) -> int:
        """The index of the first item on the current page.

        Type:
            int
        """
        page_size = self.page_size

        if page_size < 1:
            return 0

        return self.current_page * page_size

    @property
    def limit(self) -> int:
        """The maximum number of items on the current page.

        ``-1`` means there is no limit.

        Type:
            int
        """
        page_size = self.page_size

        if page_size < 1:
            return -1

        return page_size

    def get_page_count(self) -> int:
        """Return the number of pages.

        Returns:
            int:
            The number of pages.
        """
        return self.page_count

    def get_current_page(self) -> int:
        """Return the 0-based index of the current page.

        Returns:
            int:
            The page index.
        """
        return self.current_page

    def get_page_size(self) -> int:
        """Return the number of items per page.

        Returns:
            int:
            The page size.
        """
        return self.page_size

    def get_offset(self) -> int:
        """Return the index of the first item on the current page.

        Returns:
            int:
            The offset.
        """
        return self.offset

    def get_limit(self) -> int:
        """Return the maximum number of items on the current page.

        Returns:
            int:
            The limit, or ``-1`` for no limit.
        """
        return self.limit

    def _clamp_page(
        self,
        page: int,
    ) -> int:
        if page <= 0:
            return 0

        return max(min(page, self.page_count - 1), 0)

    def _get_int_param(
        self,
        name: str,
        default: int,
    ) -> int:
        value = self.request.GET.get(name)

        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning('Ignoring invalid value %r for the "%s" '
                           'pagination parameter',
                           value, name)
            return default


class PaginationView:
    """Renders navigation buttons for a paginated grid.

    The buttons are rendered as a ``<ul>`` list of ``<li>`` items
    containing links, using Bootstrap's pagination classes by default.

    Display options can be passed as keyword arguments when constructing
    the view, or set as attributes afterward.

    Version Added:
        1.0
    """

    #: The options that can be passed to the constructor.
    DISPLAY_OPTIONS = {
        'max_button_count',
        'show_first_page_link',
        'show_last_page_link',
        'show_prev_page_link',
        'show_next_page_link',
        'first_page_label',
        'last_page_label',
        'prev_page_label',
        'next_page_label',
        'first_page_css_class',
        'last_page_css_class',
        'prev_page_css_class',
        'next_page_css_class',
        'active_page_css_class',
        'disabled_page_css_class',
    }

    #: The options holding HTML attributes, merged over the defaults.
    ATTRIBUTE_OPTIONS = {
        'options',
        'link_options',
        'button_options',
    }

    #: The maximum number of page number buttons.
    max_button_count: int = 10

    #: Whether to show a link to the first page.
    show_first_page_link: bool = False

    #: Whether to show a link to the last page.
    show_last_page_link: bool = False

    #: Whether to show a link to the previous page.
    show_prev_page_link: bool = True

    #: Whether to show a link to the next page.
    show_next_page_link: bool = True

    #: The HTML label for the first page link.
    first_page_label: str = '&laquo;'

    #: The HTML label for the previous page link.
    prev_page_label: str = '&lsaquo;'

    #: The HTML label for the next page link.
    next_page_label: str = '&rsaquo;'

    #: The HTML label for the last page link.
    last_page_label: str = '&raquo;'

    first_page_css_class: str = 'first'
    last_page_css_class: str = 'last'
    prev_page_css_class: str = 'prev'
    next_page_css_class: str = 'next'
    active_page_css_class: str = 'active'
    disabled_page_css_class: str = 'disabled'

    ######################
    # Instance variables #
    ######################

    #: HTML attributes for the ``<ul>`` element.
    #:
    #: Type:
    #:     dict
    options: Dict[str, Any]

    #: HTML attributes for each link.
    #:
    #: Type:
    #:     dict
    link_options: Dict[str, Any]

    #: HTML attributes for each ``<li>`` button.
    #:
    #: Type:
    #:     dict
    button_options: Dict[str, Any]

    #: The pagination being rendered.
    #:
    #: Type:
    #:     Pagination
    pagination: Optional[Pagination]

    def __init__(
        self,
        request: HttpRequest,
        pagination: Optional[Pagination] = None,
        **options,
    ) -> None:
        """Initialize the view.

        Args:
            request (django.http.HttpRequest):
                The HTTP request from the client.

            pagination (Pagination, optional):
                The pagination to render.

            **options (dict):
                Display options. See :py:attr:`DISPLAY_OPTIONS` and
                :py:attr:`ATTRIBUTE_OPTIONS`.

        Raises:
            djgrid.errors.InvalidArgumentError:
                An unknown option was provided.
        """
        self.request = request
        self.pagination = pagination
        self.options = {'class': 'pagination'}
        self.link_options = {'class': 'page-link'}
        self.button_options = {'class': 'page-item'}

        for name, value in options.items():
            if name in self.ATTRIBUTE_OPTIONS:
                getattr(self, name).update(value)
            elif name in self.DISPLAY_OPTIONS:
                setattr(self, name, value)
            else:
                raise InvalidArgumentError(
                    '"%s" is not a valid pagination option.' % name)

    def render_page_buttons(self) -> SafeString:
        """Render the page navigation.

        Returns:
            django.utils.safestring.SafeString:
            The rendered list of buttons, or an empty string if there's
            only a single page.

        Raises:
            djgrid.errors.MissingDependencyError:
                No pagination was set.
        """
        pagination = self.pagination

        if pagination is None:
            raise MissingDependencyError(
                'A Pagination must be set before rendering page buttons.')

        page_count = pagination.page_count

        if page_count < 2:
            return mark_safe('')

        current_page = pagination.current_page
        buttons: List[str] = []

        if self.show_first_page_link:
            buttons.append(self.create_page_button(
                self.first_page_label,
                0,
                self.first_page_css_class,
                disabled=current_page <= 0))

        if self.show_prev_page_link:
            buttons.append(self.create_page_button(
                self.prev_page_label,
                max(current_page - 1, 0),
                self.prev_page_css_class,
                disabled=current_page <= 0))

        begin, end = self.get_page_range()

        for page in range(begin, end + 1):
            buttons.append(self.create_page_button(
                page + 1,
                page,
                active=(page == current_page)))

        if self.show_next_page_link:
            buttons.append(self.create_page_button(
                self.next_page_label,
                min(current_page + 1, page_count - 1),
                self.next_page_css_class,
                disabled=current_page >= page_count - 1))

        if self.show_last_page_link:
            buttons.append(self.create_page_button(
                self.last_page_label,
                page_count - 1,
                self.last_page_css_class,
                disabled=current_page >= page_count - 1))

        return format_html('<ul{}>{}</ul>',
                           render_attrs(self.options),
                           mark_safe(''.join(buttons)))

    def create_page_button(
        self,
        label: Any,
        page: int,
        css_class: Optional[str] = None,
        disabled: bool = False,
        active: bool = False,
    ) -> SafeString:
        """Render a single page button.

        Args:
            label (str or int):
                The HTML label of the button.

            page (int):
                The 0-based page index the button links to.

            css_class (str, optional):
                An extra CSS class for the button.

            disabled (bool, optional):
                Whether the button is disabled.

            active (bool, optional):
                Whether the button is for the current page.

        Returns:
            django.utils.safestring.SafeString:
            The rendered button.
        """
        button_options = dict(self.button_options)
        link_options = dict(self.link_options)

        css_classes = [button_options.get('class'), css_class]

        if active:
            css_classes.append(self.active_page_css_class)
            link_options['data-page'] = page

        if disabled:
            css_classes.append(self.disabled_page_css_class)

        button_options['class'] = [
            name
            for name in css_classes
            if name
        ]

        assert self.pagination is not None

        return format_html(
            '<li{}><a href="{}"{}>{}</a></li>',
            render_attrs(button_options),
            self.create_button_link(page, self.pagination.page_size),
            render_attrs(link_options),
            mark_safe(str(label)))

    def get_page_range(self) -> Tuple[int, int]:
        """Return the range of page numbers to show buttons for.

        The range is centered on the current page where possible, and holds
        at most :py:attr:`max_button_count` pages.

        Returns:
            tuple:
            A 2-tuple of the first and last 0-based page indexes (inclusive).
        """
        assert self.pagination is not None

        page_count = self.pagination.page_count
        max_button_count = self.max_button_count

        begin = max(0, self.pagination.current_page - max_button_count // 2)
        end = begin + max_button_count - 1

        if end >= page_count:
            end = page_count - 1
            begin = max(0, end - max_button_count + 1)

        return begin, end

    def create_button_link(
        self,
        page: int,
        page_size: int,
        absolute: bool = False,
    ) -> str:
        """Return the URL for a page.

        The current query parameters are kept. The page parameter is left
        out for the first page, and the page size parameter is left out when
        it matches the default page size.

        Args:
            page (int):
                The 0-based page index.

            page_size (int):
                The page size.

            absolute (bool, optional):
                Whether to return an absolute URL.

        Returns:
            str:
            The URL.
        """
        pagination = self.pagination
        assert pagination is not None

        params = self.request.GET.copy()

        if page > 0:
            params[pagination.page_param] = str(page + 1)
        else:
            params.pop(pagination.page_param, None)

        if page_size != pagination.default_page_size:
            params[pagination.page_size_param] = str(page_size)
        else:
            params.pop(pagination.page_size_param, None)

        return build_url(self.request,
                         route=pagination.route,
                         params=params,
                         absolute=absolute)
