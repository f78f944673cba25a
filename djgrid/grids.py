"""Grid views for displaying paginated, sortable, filterable tables.

A :py:class:`Gridview` renders an HTML table for the rows of a data source,
one :py:class:`~djgrid.columns.BaseColumn` per table column::

    pagination = Pagination(request)
    sort = Sort(request, default_order={'name': Sort.ASC})
    grid = Gridview(
        request,
        data_source=QueryDataSource(Group.objects.all(),
                                    pagination=pagination,
                                    sort=sort),
        columns=[
            Column(attribute_name='name'),
            ActionColumn(),
        ])

The grid can then be rendered in a template with ``{% gridview grid %}``,
along with its page navigation (``{% grid_pagination pagination %}``).

Rendering happens in two passes. The grid's HTML is built first, and may
contain template expressions for deferred date values and filter fields.
That HTML is then rendered as a Django template.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, TYPE_CHECKING

from django.template import TemplateSyntaxError, engines
from django.utils.html import conditional_escape, format_html
from django.utils.safestring import mark_safe

from djgrid.columns import BaseColumn
from djgrid.conf import get_grid_setting
from djgrid.errors import InvalidArgumentError, MissingDependencyError
from djgrid.filters import FilterFormBuilder
from djgrid.html import render_tag
from djgrid.routing import build_url, get_route_name

if TYPE_CHECKING:
    from django import forms
    from django.http import HttpRequest
    from django.utils.safestring import SafeString

    from djgrid.datasources import QueryDataSource
    from djgrid.sort import Sort


logger = logging.getLogger(__name__)


#: The text shown in place of a grid that failed to render.
RENDER_ERROR_TEXT = 'Render problem'


class Gridview:
    """A table showing rows from a data source.

    Version Added:
        1.0
    """

    ######################
    # Instance variables #
    ######################

    #: The columns shown in the grid.
    #:
    #: Type:
    #:     list of djgrid.columns.BaseColumn
    columns: List[BaseColumn]

    #: HTML attributes for the ``<div>`` wrapping the table.
    #:
    #: Type:
    #:     dict
    container_options: Dict[str, Any]

    #: The data source providing the rows.
    #:
    #: Type:
    #:     djgrid.datasources.QueryDataSource
    data_source: Optional[QueryDataSource]

    #: The HTML shown in cells without content.
    #:
    #: Type:
    #:     str
    empty_cell: str

    #: The object receiving the submitted filter values.
    #:
    #: Filtering is enabled when this is set.
    #:
    #: Type:
    #:     object
    filter_entity: Optional[Any]

    #: The filter form, once set up.
    #:
    #: Type:
    #:     django.forms.Form
    filter_form: Optional[forms.Form]

    #: The builder collecting the columns' filter fields.
    #:
    #: Type:
    #:     djgrid.filters.FilterFormBuilder
    filter_form_builder: Optional[FilterFormBuilder]

    #: HTML attributes for the filter row.
    #:
    #: Type:
    #:     dict
    filter_row_options: Dict[str, Any]

    #: HTML attributes for the header row.
    #:
    #: Type:
    #:     dict
    header_row_options: Dict[str, Any]

    #: The unique ID of the grid on the page.
    #:
    #: Type:
    #:     str
    id: str

    #: The HTTP request from the client.
    #:
    #: Type:
    #:     django.http.HttpRequest
    request: HttpRequest

    #: HTML attributes for each row.
    #:
    #: Type:
    #:     dict
    row_options: Dict[str, Any]

    #: Whether to show the header row.
    #:
    #: Type:
    #:     bool
    show_header: bool

    #: The caption of the table.
    #:
    #: Type:
    #:     str
    table_caption: str

    #: HTML attributes for the ``<table>``.
    #:
    #: Type:
    #:     dict
    table_options: Dict[str, Any]

    def __init__(
        self,
        request: HttpRequest,
        data_source: Optional[QueryDataSource] = None,
        columns: Optional[Sequence[BaseColumn]] = None,
        grid_id: Optional[str] = None,
        container_options: Optional[Dict[str, Any]] = None,
        table_options: Optional[Dict[str, Any]] = None,
        table_caption: str = '',
        show_header: bool = True,
        header_row_options: Optional[Dict[str, Any]] = None,
        row_options: Optional[Dict[str, Any]] = None,
        filter_row_options: Optional[Dict[str, Any]] = None,
        empty_cell: Optional[str] = None,
        filter_entity: Optional[Any] = None,
        filter_url: str = '',
    ) -> None:
        """Initialize the grid.

        Args:
            request (django.http.HttpRequest):
                The HTTP request from the client.

            data_source (djgrid.datasources.QueryDataSource, optional):
                The data source providing the rows.

            columns (list of djgrid.columns.BaseColumn, optional):
                The columns to show.

            grid_id (str, optional):
                The unique ID of the grid. Defaults to ``grid_<n>``, numbered
                in order of creation for the request.

            container_options (dict, optional):
                HTML attributes for the ``<div>`` wrapping the table.

            table_options (dict, optional):
                HTML attributes for the ``<table>``.

            table_caption (str, optional):
                The caption of the table.

            show_header (bool, optional):
                Whether to show the header row.

            header_row_options (dict, optional):
                HTML attributes for the header row.

            row_options (dict, optional):
                HTML attributes for each row.

            filter_row_options (dict, optional):
                HTML attributes for the filter row.

            empty_cell (str, optional):
                The HTML shown in cells without content. Defaults to the
                ``DJGRID_EMPTY_CELL`` setting.

            filter_entity (object, optional):
                The object receiving submitted filter values. Filtering is
                enabled when provided.

            filter_url (str, optional):
                The URL the filter form submits to. Defaults to the current
                page.

        Raises:
            djgrid.errors.InvalidArgumentError:
                One of the arguments had an invalid type.
        """
        if not isinstance(table_caption, str):
            raise InvalidArgumentError(
                'Table caption must be a string. %s given.'
                % type(table_caption).__name__)

        if grid_id is None:
            grid_count = getattr(request, 'djgrid_count', 0)
            request.djgrid_count = grid_count + 1
            grid_id = 'grid_%s' % grid_count

        self.request = request
        self.id = grid_id
        self.data_source = data_source
        self.container_options = {'class': 'grid-view'}
        self.container_options.update(container_options or {})
        self.table_options = {'class': 'table table-bordered table-striped'}
        self.table_options.update(table_options or {})
        self.table_caption = table_caption
        self.show_header = show_header
        self.header_row_options = header_row_options or {}
        self.row_options = row_options or {}
        self.filter_row_options = {'class': 'filters'}
        self.filter_row_options.update(filter_row_options or {})
        self.empty_cell = get_grid_setting('DJGRID_EMPTY_CELL', empty_cell)
        self.filter_entity = filter_entity
        self.filter_url = filter_url
        self.filter_form = None
        self.filter_form_builder = None
        self.columns = []

        for column in columns or []:
            self.add_column(column)

    def add_column(
        self,
        column: BaseColumn,
    ) -> Optional[BaseColumn]:
        """Add a column to the grid.

        Columns that aren't visible are left out.

        Args:
            column (djgrid.columns.BaseColumn):
                The column to add.

        Returns:
            djgrid.columns.BaseColumn:
            The added column, or ``None`` if it wasn't visible.

        Raises:
            djgrid.errors.InvalidArgumentError:
                The column is not a column instance.
        """
        if not isinstance(column, BaseColumn):
            raise InvalidArgumentError(
                'Grid columns must be BaseColumn instances. %s given.'
                % type(column).__name__)

        if not column.visible:
            return None

        column.grid = self
        self.columns.append(column)

        return column

    def get_sort(self) -> Optional[Sort]:
        """Return the sort applied to the grid's rows.

        Returns:
            djgrid.sort.Sort:
            The sort, or ``None`` if there isn't one.
        """
        if self.data_source is None:
            return None

        return self.data_source.sort

    def get_filter_url(self) -> str:
        """Return the URL the filter form submits to.

        Returns:
            str:
            The URL.
        """
        if self.filter_url:
            return self.filter_url

        return build_url(self.request,
                         route=get_route_name(self.request),
                         params=self.request.GET)

    def setup_filters(self) -> Optional[forms.Form]:
        """Set up the filter form.

        Each column registers its filter field. If values were submitted,
        valid ones are copied onto :py:attr:`filter_entity`.

        Returns:
            django.forms.Form:
            The filter form, or ``None`` if the grid isn't filtered.
        """
        filter_entity = self.filter_entity

        if filter_entity is None:
            return None

        if self.data_source is not None and \
           self.data_source.entity_short_name:
            prefix = self.data_source.entity_short_name.lower()
        else:
            prefix = self.id

        builder = FilterFormBuilder(prefix=prefix,
                                    action=self.get_filter_url())
        self.filter_form_builder = builder

        for column in self.columns:
            column.init_column_filter()

        form = builder.get_form(initial={
            name: self._get_filter_value(name)
            for name in builder.fields
        })

        if any(form.add_prefix(name) in self.request.GET
               for name in builder.fields):
            form = builder.get_form(data=self.request.GET)

            if form.is_valid():
                for name, value in form.cleaned_data.items():
                    if form.add_prefix(name) in self.request.GET:
                        self._set_filter_value(name, value)
            else:
                logger.debug('Ignoring invalid filters for grid "%s": %r',
                             self.id, form.errors)

        self.filter_form = form

        return form

    def render_grid(self) -> SafeString:
        """Render the grid's HTML.

        The result may still contain template expressions, evaluated by
        :py:meth:`render`.

        Returns:
            django.utils.safestring.SafeString:
            The HTML.

        Raises:
            djgrid.errors.GridError:
                A component of the grid was misconfigured.
        """
        if self.filter_entity is not None and self.filter_form is None:
            self.setup_filters()

        container_options = dict(self.container_options)
        container_options.setdefault('id', self.id)

        table = self.render_table()

        if self.filter_form is not None:
            table = format_html(
                '<form method="{}" action="{}" id="{}_form">{}</form>',
                self.filter_form.method,
                self.filter_form.action,
                self.id,
                table)

        return render_tag('div', table, container_options)

    def render_table(self) -> SafeString:
        """Render the ``<table>`` element.

        Returns:
            django.utils.safestring.SafeString:
            The HTML.
        """
        return render_tag(
            'table',
            mark_safe(''.join([
                self.render_caption(),
                self.render_table_header(),
                self.render_table_filter(),
                self.render_table_body(),
            ])),
            self.table_options)

    def render_caption(self) -> str:
        """Render the table caption.

        Returns:
            str:
            The ``<caption>`` element, or an empty string.
        """
        if not self.table_caption:
            return ''

        caption = (
            str(conditional_escape(self.table_caption))
            .replace('{', '&#123;')
            .replace('}', '&#125;')
        )

        return format_html('<caption>{}</caption>', mark_safe(caption))

    def render_table_header(self) -> str:
        """Render the header row.

        Returns:
            str:
            The ``<thead>`` element, or an empty string.
        """
        if not self.show_header:
            return ''

        cells = ''.join(
            column.render_header_cell_content()
            for column in self.columns
        )

        return format_html('<thead>{}</thead>',
                           render_tag('tr', cells, self.header_row_options))

    def render_table_filter(self) -> str:
        """Render the filter row.

        Returns:
            str:
            The filter row, or an empty string if the grid isn't filtered.
        """
        if self.filter_entity is None:
            return ''

        filter_row_options = dict(self.filter_row_options)
        filter_row_options.setdefault('id', '%s_filters' % self.id)

        cells = ''.join(
            column.render_filter_cell_content()
            for column in self.columns
        )

        return render_tag('tr', cells, filter_row_options)

    def render_table_body(self) -> str:
        """Render the rows for the current page.

        Returns:
            str:
            The ``<tbody>`` element.

        Raises:
            djgrid.errors.MissingDependencyError:
                The grid has no data source.
        """
        if self.data_source is None:
            raise MissingDependencyError(
                'The grid needs a data source to render rows.')

        rows = ''.join(
            self.render_table_row(row, index)
            for index, row in enumerate(self.data_source.fetch_entities())
        )

        return render_tag('tbody', rows)

    def render_table_row(
        self,
        row: Any,
        index: int,
    ) -> str:
        """Render a row.

        Args:
            row (object):
                The row.

            index (int):
                The index of the row on the page.

        Returns:
            str:
            The ``<tr>`` element.
        """
        cells = ''.join(
            column.render_cell_content(row, index, self.empty_cell)
            for column in self.columns
        )

        return render_tag('tr', cells, self.row_options)

    def render(self) -> SafeString:
        """Render the grid.

        If the grid's HTML can't be rendered as a template, the error is
        logged and a short notice is shown instead.

        Returns:
            django.utils.safestring.SafeString:
            The rendered grid.
        """
        html = self.render_grid()
        context: Dict[str, Any] = {}

        if self.filter_form is not None:
            context[self.id] = self.filter_form

        try:
            template = engines['django'].from_string(
                '{%% load djgrid %%}%s' % html)

            return template.render(context, self.request)
        except TemplateSyntaxError as e:
            logger.exception('Unable to render grid "%s": %s',
                             self.id, e,
                             extra={'request': self.request})

            return mark_safe(RENDER_ERROR_TEXT)

    def _get_filter_value(
        self,
        name: str,
    ) -> Any:
        if isinstance(self.filter_entity, Mapping):
            return self.filter_entity.get(name)

        return getattr(self.filter_entity, name, None)

    def _set_filter_value(
        self,
        name: str,
        value: Any,
    ) -> None:
        if isinstance(self.filter_entity, dict):
            self.filter_entity[name] = value
        else:
            setattr(self.filter_entity, name, value)

    def __str__(self) -> str:
        return self.render()
