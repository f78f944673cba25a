"""Sorting state for grids.

A :py:class:`Sort` knows which attributes of a grid can be sorted, which
query clauses each attribute maps to, and which attributes the current
request asked to sort by. It also builds the links used in column headers
to toggle sorting.

The sort order is read from a single query parameter (``sort`` by default),
holding a list of attribute names. A name prefixed with ``-`` sorts in
descending order::

    /items/?sort=-created,name
"""

from __future__ import annotations

import logging
from typing import (Any, Dict, Iterable, List, Mapping, Optional,
                    TYPE_CHECKING, Union)

from django.utils.html import format_html
from typing_extensions import Final, TypeAlias, TypedDict

from djgrid.conf import get_grid_setting
from djgrid.errors import InvalidArgumentError, UnknownAttributeError
from djgrid.html import render_attrs
from djgrid.humanize import humanize_attribute
from djgrid.routing import build_url, get_route_name

if TYPE_CHECKING:
    from django.http import HttpRequest
    from django.utils.safestring import SafeString

    from djgrid.grids import Gridview


logger = logging.getLogger(__name__)


#: A mapping of query fields to sort directions.
SortOrders: TypeAlias = Dict[str, str]


class SortAttribute(TypedDict, total=False):
    """The configuration for a sortable attribute.

    Version Added:
        1.0
    """

    #: The query clauses used when sorting in ascending order.
    #:
    #: Type:
    #:     dict
    asc: Any

    #: The query clauses used when sorting in descending order.
    #:
    #: Type:
    #:     dict
    desc: Any

    #: The direction applied when sorting is first activated.
    #:
    #: Type:
    #:     str
    default: str

    #: The label shown in sort links.
    #:
    #: Type:
    #:     str
    label: str


class Sort:
    """The sorting state of a grid.

    Attributes are registered through :py:meth:`set_attributes`. Each one
    maps an ascending and a descending direction to the query clauses
    (``{field name: direction}``) that implement it, so a single attribute
    can sort on several fields::

        sort = Sort(request, attributes={
            'name': {
                'asc': {'last_name': Sort.ASC, 'first_name': Sort.ASC},
                'desc': {'last_name': Sort.DESC, 'first_name': Sort.DESC},
                'default': Sort.DESC,
                'label': 'Full name',
            },
            'created': None,
        })

    Attributes without a dictionary sort on the field of the same name.

    Version Added:
        1.0
    """

    #: Ascending sort direction.
    ASC: Final[str] = 'asc'

    #: Descending sort direction.
    DESC: Final[str] = 'desc'

    ######################
    # Instance variables #
    ######################

    #: Whether more than one attribute may be sorted on at a time.
    #:
    #: Type:
    #:     bool
    enable_multi_sort: bool

    #: The HTTP request from the client.
    #:
    #: Type:
    #:     django.http.HttpRequest
    request: HttpRequest

    #: The name of the query parameter holding the sort order.
    #:
    #: Type:
    #:     str
    sort_param: str

    #: The separator between attribute names in the sort parameter.
    #:
    #: Type:
    #:     str
    separator: str

    def __init__(
        self,
        request: HttpRequest,
        attributes: Optional[Union[Mapping[str, Any],
                                   Iterable[str]]] = None,
        default_order: Optional[Mapping[str, str]] = None,
        sort_param: Optional[str] = None,
        separator: Optional[str] = None,
        enable_multi_sort: Optional[bool] = None,
    ) -> None:
        """Initialize the sort.

        Args:
            request (django.http.HttpRequest):
                The HTTP request from the client.

            attributes (dict or list, optional):
                The sortable attributes. See :py:meth:`set_attributes`.

            default_order (dict, optional):
                The attribute orders (``{name: direction}``) used when the
                request doesn't ask for any.

            sort_param (str, optional):
                The name of the sort query parameter. Defaults to the
                ``DJGRID_SORT_PARAM`` setting.

            separator (str, optional):
                The separator between attribute names. Defaults to the
                ``DJGRID_SORT_SEPARATOR`` setting.

            enable_multi_sort (bool, optional):
                Whether several attributes may be sorted on at a time.
                Defaults to the ``DJGRID_ENABLE_MULTI_SORT`` setting.
        """
        self.request = request
        self.sort_param = get_grid_setting('DJGRID_SORT_PARAM', sort_param)
        self.separator = get_grid_setting('DJGRID_SORT_SEPARATOR', separator)
        self.enable_multi_sort = bool(
            get_grid_setting('DJGRID_ENABLE_MULTI_SORT', enable_multi_sort))

        self._attributes: Dict[str, SortAttribute] = {}
        self._attribute_orders: Optional[SortOrders] = None
        self._default_order: SortOrders = dict(default_order or {})

        if attributes is not None:
            self.set_attributes(attributes)

    @property
    def attributes(self) -> Dict[str, SortAttribute]:
        """The registered sortable attributes.

        Type:
            dict
        """
        return self._attributes

    @property
    def default_order(self) -> SortOrders:
        """The attribute orders used when the request doesn't ask for any.

        Type:
            dict
        """
        return self._default_order

    @default_order.setter
    def default_order(
        self,
        default_order: Mapping[str, str],
    ) -> None:
        self._default_order = dict(default_order)
        self._attribute_orders = None

    def set_attributes(
        self,
        attributes: Union[Mapping[str, Any], Iterable[str]],
    ) -> None:
        """Set the sortable attributes.

        Any dictionary given for an attribute is merged over the default
        configuration, which sorts on the field named after the attribute.

        Args:
            attributes (dict or list):
                Either a dictionary mapping attribute names to their
                configuration (or ``None``), or a list of attribute names.

        Raises:
            djgrid.errors.InvalidArgumentError:
                The attributes were not provided as a dictionary or list of
                names.
        """
        if isinstance(attributes, Mapping):
            items = list(attributes.items())
        elif isinstance(attributes, (str, bytes)):
            raise InvalidArgumentError(
                'Sort attributes must be a dictionary or a list of names.')
        else:
            items = [(name, None) for name in attributes]

        prepared: Dict[str, SortAttribute] = {}

        for name, attribute in items:
            if not isinstance(name, str):
                raise InvalidArgumentError(
                    'Sort attribute names must be strings. %s given.'
                    % type(name).__name__)

            config: SortAttribute = {
                'asc': {name: self.ASC},
                'desc': {name: self.DESC},
            }

            if isinstance(attribute, Mapping):
                config.update(attribute)  # type: ignore

            prepared[name] = config

        self._attributes = prepared
        self._attribute_orders = None

    def has_attribute(
        self,
        name: Any,
    ) -> bool:
        """Return whether an attribute is sortable.

        Args:
            name (str):
                The attribute name.

        Returns:
            bool:
            ``True`` if the attribute has been registered.
        """
        return isinstance(name, str) and name in self._attributes

    def fetch_attributes_order(self) -> SortOrders:
        """Return the active attribute orders.

        These come from the sort query parameter. Unknown attribute names
        in the parameter are ignored. If multi-sort is disabled, only the
        first recognized attribute is used. If nothing is recognized, the
        default order applies.

        The result is computed once and reused until the attributes or the
        default order change.

        Returns:
            dict:
            A dictionary mapping attribute names to directions, in order of
            precedence.
        """
        if self._attribute_orders is None:
            orders: SortOrders = {}
            value = self.request.GET.get(self.sort_param)

            if value:
                for token in value.split(self.separator):
                    token = token.strip()
                    direction = self.ASC

                    if token.startswith('-'):
                        direction = self.DESC
                        token = token[1:]

                    if token not in self._attributes:
                        logger.debug('Ignoring unknown sort attribute "%s"',
                                     token)
                        continue

                    orders[token] = direction

                    if not self.enable_multi_sort:
                        break

            if not orders:
                orders = {
                    name: direction
                    for name, direction in self._default_order.items()
                    if name in self._attributes
                }

            self._attribute_orders = orders

        return self._attribute_orders

    def set_attribute_orders(
        self,
        orders: Mapping[str, str],
    ) -> None:
        """Explicitly set the active attribute orders.

        Args:
            orders (dict):
                A dictionary mapping attribute names to directions. Unknown
                attributes are ignored.
        """
        attribute_orders: SortOrders = {}

        for name, direction in orders.items():
            if name not in self._attributes:
                continue

            attribute_orders[name] = direction

            if not self.enable_multi_sort:
                break

        self._attribute_orders = attribute_orders

    def fetch_orders(self) -> SortOrders:
        """Return the query field orders for the active attributes.

        Returns:
            dict:
            A dictionary mapping query fields to directions, in the order
            they should be applied.
        """
        orders: SortOrders = {}

        for name, direction in self.fetch_attributes_order().items():
            clause = self._attributes[name].get(direction)

            if isinstance(clause, Mapping):
                orders.update(clause)
            elif clause:
                orders[str(clause)] = direction

        return orders

    def get_attribute_order(
        self,
        name: Any,
    ) -> Optional[str]:
        """Return the active direction of an attribute.

        Args:
            name (str):
                The attribute name.

        Returns:
            str:
            :py:attr:`ASC` or :py:attr:`DESC`, or ``None`` if the grid isn't
            sorted on the attribute.
        """
        if not isinstance(name, str):
            return None

        return self.fetch_attributes_order().get(name)

    def prepare_query_sort_params(
        self,
        name: str,
    ) -> SortOrders:
        """Return the attribute orders resulting from toggling an attribute.

        An active attribute flips direction. An inactive one takes its
        configured default direction (ascending unless specified). With
        multi-sort enabled, the toggled attribute comes first and the other
        active attributes follow.

        Args:
            name (str):
                The attribute to toggle.

        Returns:
            dict:
            The new attribute orders.

        Raises:
            djgrid.errors.UnknownAttributeError:
                The attribute is not sortable.
        """
        if name not in self._attributes:
            raise UnknownAttributeError('Unknown sort attribute name: %s'
                                        % name)

        orders = dict(self.fetch_attributes_order())
        current = orders.pop(name, None)

        if current is None:
            direction = self._attributes[name].get('default', self.ASC)
        elif current == self.DESC:
            direction = self.ASC
        else:
            direction = self.DESC

        toggled = {name: direction}

        if self.enable_multi_sort:
            toggled.update(orders)

        return toggled

    def create_sort_param(
        self,
        name: str,
    ) -> str:
        """Return the sort parameter value that toggles an attribute.

        Args:
            name (str):
                The attribute to toggle.

        Returns:
            str:
            The value for the sort query parameter.

        Raises:
            djgrid.errors.UnknownAttributeError:
                The attribute is not sortable.
        """
        tokens: List[str] = []

        for attr_name, direction in \
                self.prepare_query_sort_params(name).items():
            if direction == self.DESC:
                tokens.append('-%s' % attr_name)
            else:
                tokens.append(attr_name)

        return self.separator.join(tokens)

    def create_url(
        self,
        name: str,
        grid: Optional[Gridview] = None,
        absolute: bool = False,
    ) -> str:
        """Return a URL for the current page with an attribute toggled.

        The current query parameters are kept, except for the page number,
        which is removed so the new order starts from the first page.

        Args:
            name (str):
                The attribute to toggle.

            grid (djgrid.grids.Gridview, optional):
                The grid being sorted. Its pagination provides the name of
                the page parameter.

            absolute (bool, optional):
                Whether to return an absolute URL.

        Returns:
            str:
            The URL.

        Raises:
            djgrid.errors.UnknownAttributeError:
                The attribute is not sortable.
        """
        params = self.request.GET.copy()
        params.pop(self._get_page_param(grid), None)
        params[self.sort_param] = self.create_sort_param(name)

        return build_url(self.request,
                         route=get_route_name(self.request),
                         params=params,
                         absolute=absolute)

    def create_link(
        self,
        name: str,
        grid: Optional[Gridview] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> SafeString:
        """Return a link toggling the sort order of an attribute.

        Args:
            name (str):
                The attribute to toggle.

            grid (djgrid.grids.Gridview, optional):
                The grid being sorted.

            options (dict, optional):
                HTML attributes for the link. A ``label`` key overrides the
                link text.

        Returns:
            django.utils.safestring.SafeString:
            The rendered link.

        Raises:
            djgrid.errors.UnknownAttributeError:
                The attribute is not sortable.
        """
        attrs = dict(options or {})
        label = attrs.pop('label', None)
        direction = self.get_attribute_order(name)

        if direction:
            css_class = attrs.get('class')

            if isinstance(css_class, (list, tuple)):
                attrs['class'] = list(css_class) + [direction]
            elif css_class:
                attrs['class'] = '%s %s' % (css_class, direction)
            else:
                attrs['class'] = direction

        attrs['data-sort'] = self.create_sort_param(name)

        if label is None:
            label = (self._attributes[name].get('label') or
                     humanize_attribute(name))

        return format_html('<a href="{}"{}>{}</a>',
                           self.create_url(name, grid),
                           render_attrs(attrs),
                           label)

    def _get_page_param(
        self,
        grid: Optional[Gridview],
    ) -> str:
        """Return the name of the page query parameter.

        Args:
            grid (djgrid.grids.Gridview):
                The grid being sorted, if any.

        Returns:
            str:
            The parameter name.
        """
        if grid is not None and grid.data_source is not None:
            pagination = grid.data_source.pagination

            if pagination is not None:
                return pagination.page_param

        return get_grid_setting('DJGRID_PAGE_PARAM')
