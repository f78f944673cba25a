"""Columns and cell value formatting for grids.

Every grid is made up of columns. A column renders its header cell, its
filter cell, and one cell for each row shown in the grid.

* :py:class:`Column` shows the value of an attribute of each row, or the
  result of a callback.
* :py:class:`ActionColumn` shows links for viewing, editing and deleting
  each row.

Cell values are turned into HTML by a :py:class:`ColumnFormat`.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import (Any, Callable, Dict, List, Mapping, Optional, Sequence,
                    TYPE_CHECKING, Tuple, Union)

from django.template.defaultfilters import date as date_filter
from django.template.defaultfilters import time as time_filter
from django.utils import timezone as tz
from django.utils.duration import duration_string
from django.utils.functional import Promise
from django.utils.html import escape, format_html
from django.utils.safestring import mark_safe
from typing_extensions import Final, TypeAlias

from djgrid.accessors import get_row_accessor, has_row_accessor
from djgrid.conf import get_grid_setting
from djgrid.errors import (InvalidArgumentError,
                           MissingDependencyError,
                           MissingLabelError,
                           UnsupportedFormatError)
from djgrid.html import render_tag
from djgrid.humanize import humanize_attribute

if TYPE_CHECKING:
    from datetime import tzinfo

    from django.http import HttpRequest
    from django.utils.safestring import SafeString

    from djgrid.grids import Gridview


logger = logging.getLogger(__name__)


#: A format name, or a single-entry dictionary of a format name and argument.
FormatSpec: TypeAlias = Union[str, Mapping[str, Any]]


_SCALAR_TYPES = (str, int, float, Decimal, Promise)
_DATE_TYPES = (date, time, timedelta)

_INDEXED_SEGMENT_RE = re.compile(r'^\s*(\w+)\s*((?:\[[^\]]*\]\s*)+)$')
_INDEX_KEY_RE = re.compile(r'\[([^\]]*)\]')


class ColumnFormat:
    """Formats cell values as HTML.

    A format is given either as a name, or as a single-entry dictionary of a
    name and an argument (such as ``{'date': 'd/m/Y'}``).

    Dates and times are always formatted as dates, whatever format was
    requested.

    Date values that are still strings or timestamps can't be formatted
    yet. They're written as a ``grid_date`` template expression, which is
    evaluated when the grid is rendered.

    Version Added:
        1.0
    """

    #: HTML-escaped text.
    TEXT_FORMAT: Final[str] = 'html'

    #: The value, as-is.
    RAW_FORMAT: Final[str] = 'raw'

    #: Text shown verbatim by the template engine.
    TEMPLATE_FORMAT: Final[str] = 'template'

    #: A date, formatted with Django's date format syntax.
    DATE_FORMAT: Final[str] = 'date'

    #: The default date format.
    DEFAULT_DATE_FORMAT: Final[str] = 'Y-m-d H:i:s'

    #: The default format for time values.
    DEFAULT_TIME_FORMAT: Final[str] = 'H:i:s'

    def __init__(
        self,
        default_date_format: str = DEFAULT_DATE_FORMAT,
        timezone: Optional[tzinfo] = None,
    ) -> None:
        """Initialize the formatter.

        Args:
            default_date_format (str, optional):
                The date format used for date values.

            timezone (datetime.tzinfo, optional):
                The timezone to show aware datetimes in. Defaults to the
                current timezone.
        """
        self.default_date_format = default_date_format
        self.timezone = timezone
        self._formatters: Dict[str, Callable[[Any, Any], str]] = {
            self.TEXT_FORMAT: self._format_html,
            self.RAW_FORMAT: self._format_raw,
            self.TEMPLATE_FORMAT: self._format_template,
            self.DATE_FORMAT: self._format_date,
        }

    def format(
        self,
        value: Any,
        format_spec: FormatSpec,
    ) -> str:
        """Format a value.

        Args:
            value (object):
                The value to format. This must be a string, number, date,
                time or duration.

            format_spec (str or dict):
                The format name, or a dictionary of the format name and its
                argument.

        Returns:
            str:
            The formatted HTML.

        Raises:
            djgrid.errors.InvalidArgumentError:
                The value or the format had an invalid type.

            djgrid.errors.UnsupportedFormatError:
                The format is unknown.
        """
        if value is None:
            value = ''
        elif not isinstance(value, _SCALAR_TYPES + _DATE_TYPES):
            raise InvalidArgumentError(
                'Formatted value must be a string, number or date. '
                '%s given.'
                % type(value).__name__)

        format_name, format_arg = self._parse_format_spec(format_spec)

        if isinstance(value, _DATE_TYPES):
            if format_name != self.DATE_FORMAT:
                format_name = self.DATE_FORMAT
                format_arg = None

            if not format_arg:
                if isinstance(value, time):
                    format_arg = self.DEFAULT_TIME_FORMAT
                else:
                    format_arg = self.default_date_format
        elif format_name == self.DATE_FORMAT and not format_arg:
            format_arg = self.default_date_format

        try:
            formatter = self._formatters[format_name]
        except KeyError:
            raise UnsupportedFormatError('Unknown column format: %s'
                                         % format_name)

        return formatter(value, format_arg)

    def _parse_format_spec(
        self,
        format_spec: FormatSpec,
    ) -> Tuple[str, Any]:
        if isinstance(format_spec, str):
            return format_spec, None

        if isinstance(format_spec, Mapping) and format_spec:
            format_name, format_arg = next(iter(format_spec.items()))

            if isinstance(format_name, str):
                return format_name, format_arg

        raise InvalidArgumentError(
            'Column format must be a format name or a dictionary of a '
            'format name and argument. %r given.'
            % (format_spec,))

    def _format_html(
        self,
        value: Any,
        format_arg: Any = None,
    ) -> str:
        return (
            str(escape(value))
            .replace('{', '&#123;')
            .replace('}', '&#125;')
        )

    def _format_raw(
        self,
        value: Any,
        format_arg: Any = None,
    ) -> str:
        return str(value)

    def _format_template(
        self,
        value: Any,
        format_arg: Any = None,
    ) -> str:
        return '{%% verbatim %%}%s{%% endverbatim %%}' % value

    def _format_date(
        self,
        value: Any,
        date_format: str,
    ) -> str:
        if isinstance(value, timedelta):
            return duration_string(value)

        if isinstance(value, datetime):
            if tz.is_aware(value):
                value = tz.localtime(value, self.timezone)

            return date_filter(value, date_format)

        if isinstance(value, date):
            return date_filter(datetime.combine(value, time()), date_format)

        if isinstance(value, time):
            return time_filter(value, date_format)

        value = str(value).strip()

        if '{' in value or '}' in value or '%' in value:
            # This can't be a date, and would break the template expression.
            return self._format_html(value)

        return '{{ %s|grid_date:%s }}' % (_to_template_string(value),
                                          _to_template_string(date_format))


def _to_template_string(
    value: Any,
) -> str:
    return '"%s"' % (
        str(value)
        .replace('\\', '\\\\')
        .replace('"', '\\"')
    )


class BaseColumn:
    """Base class for a column in a grid.

    Subclasses must implement :py:meth:`render_cell_content`.

    Version Added:
        1.0
    """

    #: The format used when none is provided.
    default_format: FormatSpec = ColumnFormat.RAW_FORMAT

    #: Whether columns can be sorted when not specified.
    default_sortable: bool = True

    ######################
    # Instance variables #
    ######################

    #: Static content, or a callback returning content for each row.
    #:
    #: Callbacks take the row and its index.
    #:
    #: Type:
    #:     object or callable
    content: Any

    #: HTML attributes for each content cell.
    #:
    #: Type:
    #:     dict or callable
    content_options: Union[Dict[str, Any], Callable[[], Dict[str, Any]]]

    #: Whether the label is HTML-escaped when rendered.
    #:
    #: Type:
    #:     bool
    encode_label: bool

    #: HTML attributes for the filter cell.
    #:
    #: Type:
    #:     dict
    filter_options: Dict[str, Any]

    #: The format applied to cell values.
    #:
    #: Type:
    #:     str or dict
    format: FormatSpec

    #: The grid this column belongs to.
    #:
    #: Type:
    #:     djgrid.grids.Gridview
    grid: Optional[Gridview]

    #: HTML attributes for the header cell.
    #:
    #: Type:
    #:     dict
    header_options: Dict[str, Any]

    #: The label shown in the header.
    #:
    #: Type:
    #:     str
    label: Optional[str]

    #: Whether the column can be sorted.
    #:
    #: Type:
    #:     bool
    sortable: bool

    #: Whether the column is shown.
    #:
    #: Type:
    #:     bool
    visible: bool

    def __init__(
        self,
        label: Optional[str] = None,
        content: Any = None,
        format: Optional[FormatSpec] = None,
        header_options: Optional[Dict[str, Any]] = None,
        content_options: Optional[
            Union[Dict[str, Any], Callable[[], Dict[str, Any]]]] = None,
        filter_options: Optional[Dict[str, Any]] = None,
        visible: Union[bool, Callable[[], bool]] = True,
        sortable: Optional[bool] = None,
        encode_label: bool = False,
        column_format: Optional[ColumnFormat] = None,
        request: Optional[HttpRequest] = None,
    ) -> None:
        """Initialize the column.

        Args:
            label (str, optional):
                The label shown in the header.

            content (object or callable, optional):
                Static content, or a callback taking a row and its index and
                returning the content for its cell.

            format (str or dict, optional):
                The format applied to cell values.

            header_options (dict, optional):
                HTML attributes for the header cell.

            content_options (dict or callable, optional):
                HTML attributes for each content cell, or a function
                returning them.

            filter_options (dict, optional):
                HTML attributes for the filter cell.

            visible (bool or callable, optional):
                Whether the column is shown, or a function returning whether
                it is. The function is called once.

            sortable (bool, optional):
                Whether the column can be sorted.

            encode_label (bool, optional):
                Whether to HTML-escape the label.

            column_format (ColumnFormat, optional):
                The formatter for cell values.

            request (django.http.HttpRequest, optional):
                The HTTP request from the client. Defaults to the grid's
                request.

        Raises:
            djgrid.errors.InvalidArgumentError:
                The content options were not a dictionary or a function.
        """
        if content_options is not None and \
           not isinstance(content_options, dict) and \
           not callable(content_options):
            raise InvalidArgumentError(
                'Column content options must be a dictionary or a '
                'callable. %s given.'
                % type(content_options).__name__)

        if callable(visible):
            visible = visible()

        if sortable is None:
            sortable = self.default_sortable

        self.label = label
        self.content = content
        self.format = format or self.default_format
        self.header_options = header_options or {}
        self.content_options = content_options or {}
        self.filter_options = filter_options or {}
        self.visible = bool(visible)
        self.sortable = sortable
        self.encode_label = encode_label
        self.column_format = column_format or ColumnFormat()
        self.grid = None
        self._request = request

    @property
    def request(self) -> HttpRequest:
        """The HTTP request from the client.

        Type:
            django.http.HttpRequest

        Raises:
            djgrid.errors.MissingDependencyError:
                The column has no request and doesn't belong to a grid.
        """
        if self._request is not None:
            return self._request

        if self.grid is not None:
            return self.grid.request

        raise MissingDependencyError(
            'The column must be added to a grid or given a request.')

    def get_content_options(self) -> Dict[str, Any]:
        """Return the HTML attributes for content cells.

        Returns:
            dict:
            The attributes.

        Raises:
            djgrid.errors.InvalidArgumentError:
                The content options function didn't return a dictionary.
        """
        content_options = self.content_options

        if callable(content_options):
            content_options = content_options()

            if not isinstance(content_options, dict):
                raise InvalidArgumentError(
                    'Column content options functions must return a '
                    'dictionary. %s given.'
                    % type(content_options).__name__)

        return content_options

    def get_empty_cell(
        self,
        empty_cell: Optional[str] = None,
    ) -> str:
        """Return the HTML shown for cells without content.

        Args:
            empty_cell (str, optional):
                An explicit placeholder.

        Returns:
            str:
            The placeholder HTML.
        """
        if empty_cell is not None:
            return empty_cell

        if self.grid is not None:
            return self.grid.empty_cell

        return get_grid_setting('DJGRID_EMPTY_CELL')

    def get_header_cell_content(self) -> str:
        """Return the HTML content of the header cell.

        Returns:
            str:
            The header content.
        """
        return self.label or ''

    def render_header_cell_content(self) -> SafeString:
        """Render the header cell.

        Returns:
            django.utils.safestring.SafeString:
            The ``<th>`` element.

        Raises:
            djgrid.errors.MissingLabelError:
                The column has no label to show.
        """
        content = self.get_header_cell_content()

        if self.encode_label:
            content = self.column_format.format(content,
                                                ColumnFormat.TEXT_FORMAT)

        return render_tag('th', content, self.header_options)

    def init_column_filter(self) -> bool:
        """Register the column's filter field with the grid.

        Returns:
            bool:
            Whether a filter field was registered.
        """
        return False

    def render_filter_cell_content(self) -> SafeString:
        """Render the filter cell.

        Returns:
            django.utils.safestring.SafeString:
            The ``<td>`` element.
        """
        return render_tag('td', self.get_empty_cell(), self.filter_options)

    def render_cell_content(
        self,
        row: Any,
        index: int,
        empty_cell: Optional[str] = None,
    ) -> SafeString:
        """Render the content cell for a row.

        Args:
            row (object):
                The row.

            index (int):
                The index of the row on the page.

            empty_cell (str, optional):
                The HTML shown if there's no content.

        Returns:
            django.utils.safestring.SafeString:
            The ``<td>`` element.
        """
        raise NotImplementedError(
            '%s must implement render_cell_content()' % type(self).__name__)


class Column(BaseColumn):
    """A column showing an attribute of each row.

    The attribute may be a path through related objects
    (``user.city``) and may index into dictionaries and lists
    (``tags[1]``, ``meta["color"]``).

    Version Added:
        1.0
    """

    default_format = ColumnFormat.TEXT_FORMAT

    ######################
    # Instance variables #
    ######################

    #: The attribute shown in the column.
    #:
    #: Type:
    #:     str
    attribute_name: Optional[str]

    #: The form field class used to filter on the column.
    #:
    #: Type:
    #:     type
    filter_type: Optional[type]

    #: Keyword arguments for the filter form field.
    #:
    #: Type:
    #:     dict
    filter_field_options: Dict[str, Any]

    def __init__(
        self,
        attribute_name: Optional[str] = None,
        filter_type: Optional[type] = None,
        filter_field_options: Optional[Dict[str, Any]] = None,
        **kwargs,
    ) -> None:
        """Initialize the column.

        Args:
            attribute_name (str, optional):
                The attribute shown in the column.

            filter_type (type, optional):
                The form field class used to filter on the column.

            filter_field_options (dict, optional):
                Keyword arguments for the filter form field.

            **kwargs (dict):
                Keyword arguments for :py:class:`BaseColumn`.
        """
        super().__init__(**kwargs)

        self.attribute_name = attribute_name
        self.filter_type = filter_type
        self.filter_field_options = filter_field_options or {}
        self._filter_enabled = False

    def get_cell_content(
        self,
        row: Any,
        index: int,
    ) -> Any:
        """Return the value shown in a row's cell.

        Args:
            row (object):
                The row.

            index (int):
                The index of the row on the page.

        Returns:
            object:
            The value.

        Raises:
            djgrid.errors.MissingAccessorError:
                The row doesn't provide the attribute.
        """
        if callable(self.content):
            return self.content(row, index)

        if self.content is not None:
            return self.content

        attribute_name = self.attribute_name or ''

        if '.' in attribute_name:
            value = row

            for segment in attribute_name.split('.'):
                value = self._get_segment_value(value, segment.strip())

            return value

        return self._get_segment_value(row, attribute_name)

    def get_attribute_value(
        self,
        instance: Any,
        name: str,
    ) -> Any:
        """Return the value of an attribute of an object.

        Dictionaries are looked up by key. Other objects provide the value
        through a ``get_<name>()`` or ``is_<name>()`` method, or an
        attribute.

        Args:
            instance (object):
                The object to read from.

            name (str):
                The attribute name.

        Returns:
            object:
            The value. Missing dictionary keys result in an empty string.

        Raises:
            djgrid.errors.MissingAccessorError:
                The object doesn't provide the attribute.
        """
        if isinstance(instance, Mapping):
            return instance.get(name, '')

        if not name:
            return None

        return get_row_accessor(type(instance), name)(instance)

    def get_header_cell_content(self) -> str:
        """Return the HTML content of the header cell.

        Sortable columns link to the sorted grid when the grid's sort knows
        the column's label or attribute.

        Returns:
            str:
            The header content.

        Raises:
            djgrid.errors.MissingLabelError:
                The column has neither a label nor an attribute name.
        """
        if not self.label and not self.attribute_name:
            raise MissingLabelError(
                'The column needs either a label or an attribute name.')

        label = self.label or humanize_attribute(self.attribute_name or '')

        if self.sortable and self.grid is not None:
            sort = self.grid.get_sort()

            if sort is not None:
                if sort.has_attribute(self.label):
                    sort_attribute = self.label
                elif sort.has_attribute(self.attribute_name):
                    sort_attribute = self.attribute_name
                else:
                    sort_attribute = None

                if sort_attribute:
                    return sort.create_link(sort_attribute, self.grid, {
                        'label': label,
                    })

        return label

    def init_column_filter(self) -> bool:
        """Register the column's filter field with the grid.

        Filters are only available for simple attribute names on grids
        with a filter object.

        Returns:
            bool:
            Whether a filter field was registered.
        """
        grid = self.grid
        attribute_name = self.attribute_name

        if (grid is None or
            grid.filter_entity is None or
            grid.filter_form_builder is None or
            not attribute_name):
            return False

        if not attribute_name.isidentifier():
            logger.debug('Not filtering on attribute "%s" of grid "%s"',
                         attribute_name, grid.id)
            return False

        grid.filter_form_builder.add(attribute_name,
                                     self.filter_type,
                                     self.filter_field_options)
        self._filter_enabled = True

        return True

    def render_filter_cell_content(self) -> SafeString:
        """Render the filter cell.

        The filter field is written as a template expression, rendered with
        the grid's filter form.

        Returns:
            django.utils.safestring.SafeString:
            The ``<td>`` element.
        """
        if not self._filter_enabled or self.grid is None:
            return super().render_filter_cell_content()

        return render_tag(
            'td',
            '{{ %s.%s }}' % (self.grid.id, self.attribute_name),
            self.filter_options)

    def render_cell_content(
        self,
        row: Any,
        index: int,
        empty_cell: Optional[str] = None,
    ) -> SafeString:
        """Render the content cell for a row.

        Args:
            row (object):
                The row.

            index (int):
                The index of the row on the page.

            empty_cell (str, optional):
                The HTML shown if there's no content.

        Returns:
            django.utils.safestring.SafeString:
            The ``<td>`` element.

        Raises:
            djgrid.errors.InvalidArgumentError:
                The row is not an object or dictionary.

            djgrid.errors.MissingAccessorError:
                The row doesn't provide the attribute.
        """
        if row is None or isinstance(row, (str, bytes, int, float, Decimal)):
            raise InvalidArgumentError(
                'Grid rows must be objects or dictionaries. %s given.'
                % type(row).__name__)

        content = self.get_cell_content(row, index)

        if content is None:
            html = self.get_empty_cell(empty_cell)
        else:
            html = self.column_format.format(content, self.format)

        return render_tag('td', html, self.get_content_options())

    def _get_segment_value(
        self,
        instance: Any,
        segment: str,
    ) -> Any:
        m = _INDEXED_SEGMENT_RE.match(segment)

        if m is None:
            return self.get_attribute_value(instance, segment)

        value = self.get_attribute_value(instance, m.group(1))

        for key in _INDEX_KEY_RE.findall(m.group(2)):
            value = _get_item(value, key.strip().strip('"\','))

        return value


def _get_item(
    container: Any,
    key: str,
) -> Any:
    if isinstance(container, Mapping):
        if key in container:
            return container[key]

        try:
            return container.get(int(key))
        except ValueError:
            return None

    if isinstance(container, Sequence) and \
       not isinstance(container, (str, bytes)):
        try:
            return container[int(key)]
        except (IndexError, ValueError):
            return None

    return None


class ActionButton:
    """A button shown in an action column.

    A button is configured with one of:

    * A string (:py:attr:`LITERAL`): the button's URL. An empty string uses
      the default URL for the action.
    * A callable (:py:attr:`CALLBACK`): called with the row, the default
      URL and the row index, returning the URL.
    * A dictionary (:py:attr:`STRUCTURED`): a ``url`` (string or callable,
      as above) and a ``content`` (HTML string, or callable taking the row,
      the URL and the row index) replacing the default icon link.

    Version Added:
        1.0
    """

    LITERAL: Final[str] = 'literal'
    CALLBACK: Final[str] = 'callback'
    STRUCTURED: Final[str] = 'structured'

    def __init__(
        self,
        kind: str,
        url: Union[str, Callable[..., str]] = '',
        content: Any = None,
    ) -> None:
        self.kind = kind
        self.url = url
        self.content = content

    @classmethod
    def from_value(
        cls,
        value: Any,
    ) -> ActionButton:
        """Return a button for a configured value.

        Args:
            value (str or callable or dict):
                The button configuration.

        Returns:
            ActionButton:
            The button.

        Raises:
            djgrid.errors.InvalidArgumentError:
                The configuration had an invalid type.
        """
        if isinstance(value, ActionButton):
            return value

        if isinstance(value, Mapping):
            url = value.get('url') or ''

            if not isinstance(url, str) and not callable(url):
                raise InvalidArgumentError(
                    'Action button URLs must be strings or callables. '
                    '%s given.'
                    % type(url).__name__)

            return cls(cls.STRUCTURED,
                       url=url,
                       content=value.get('content'))

        if isinstance(value, str):
            return cls(cls.LITERAL, url=value)

        if callable(value):
            return cls(cls.CALLBACK, url=value)

        raise InvalidArgumentError(
            'Action buttons must be a string, callable or dictionary. '
            '%s given.'
            % type(value).__name__)

    def get_url(
        self,
        row: Any,
        default_url: str,
        index: int,
    ) -> str:
        """Return the button's URL for a row.

        Args:
            row (object):
                The row.

            default_url (str):
                The default URL for the action.

            index (int):
                The index of the row on the page.

        Returns:
            str:
            The URL.
        """
        url = self.url

        if callable(url):
            url = url(row, default_url, index)

        return url or default_url

    def get_content(
        self,
        row: Any,
        url: str,
        index: int,
    ) -> Optional[str]:
        """Return custom HTML for the button.

        Args:
            row (object):
                The row.

            url (str):
                The button's URL.

            index (int):
                The index of the row on the page.

        Returns:
            str:
            The HTML, or ``None`` to use the default icon link.
        """
        content = self.content

        if callable(content):
            content = content(row, url, index)

        return content


class ActionColumn(BaseColumn):
    """A column with links for viewing, editing and deleting each row.

    By default, each link points to ``<current path>/<row id>/<action>``.
    Buttons can be replaced or added through ``buttons``, and hidden
    through ``hidden_buttons``::

        ActionColumn(
            buttons={
                ActionColumn.SHOW: lambda row, url, index: row.get_url(),
            },
            hidden_buttons={
                ActionColumn.DELETE: lambda row, url: row.is_locked,
            })

    Version Added:
        1.0
    """

    #: The action for viewing a row.
    SHOW: Final[str] = 'read'

    #: The action for editing a row.
    EDIT: Final[str] = 'update'

    #: The action for deleting a row.
    DELETE: Final[str] = 'delete'

    #: The Glyphicon names shown for each action.
    button_icons: Dict[str, str] = {
        SHOW: 'eye-open',
        EDIT: 'pencil',
        DELETE: 'cross',
    }

    default_format = ColumnFormat.RAW_FORMAT
    default_sortable = False

    ######################
    # Instance variables #
    ######################

    #: The buttons shown, in order.
    #:
    #: Type:
    #:     dict
    buttons: Dict[str, ActionButton]

    #: Flags or predicates for hiding buttons.
    #:
    #: Predicates take the row and the button's URL.
    #:
    #: Type:
    #:     dict
    hidden_buttons: Dict[str, Union[bool, Callable[[Any, str], bool]]]

    def __init__(
        self,
        buttons: Optional[Mapping[str, Any]] = None,
        hidden_buttons: Optional[
            Mapping[str, Union[bool, Callable[[Any, str], bool]]]] = None,
        label: Optional[str] = 'Actions',
        **kwargs,
    ) -> None:
        """Initialize the column.

        Args:
            buttons (dict, optional):
                Button configurations by action, merged over the default
                buttons. See :py:class:`ActionButton`.

            hidden_buttons (dict, optional):
                Flags or predicates for hiding buttons, by action.

            label (str, optional):
                The label shown in the header.

            **kwargs (dict):
                Keyword arguments for :py:class:`BaseColumn`.

        Raises:
            djgrid.errors.InvalidArgumentError:
                A button configuration had an invalid type.
        """
        super().__init__(label=label, **kwargs)

        merged_buttons: Dict[str, Any] = {
            self.SHOW: '',
            self.EDIT: '',
            self.DELETE: '',
        }
        merged_buttons.update(buttons or {})

        self.buttons = {
            name: ActionButton.from_value(value)
            for name, value in merged_buttons.items()
        }
        self.hidden_buttons = dict(hidden_buttons or {})

    def create_default_button_url(
        self,
        action: str,
        row: Any,
    ) -> str:
        """Return the default URL for an action on a row.

        Args:
            action (str):
                The action name.

            row (object):
                The row.

        Returns:
            str:
            The URL, or an empty string if the row has no ID.
        """
        if not has_row_accessor(row, 'id'):
            return ''

        if isinstance(row, Mapping):
            row_id = row['id']
        else:
            row_id = get_row_accessor(type(row), 'id')(row)

        return '%s/%s/%s' % (self.request.path.rstrip('/'), row_id, action)

    def is_button_hidden(
        self,
        action: str,
        url: str,
        row: Any,
    ) -> bool:
        """Return whether a button is hidden for a row.

        Args:
            action (str):
                The action name.

            url (str):
                The button's URL.

            row (object):
                The row.

        Returns:
            bool:
            ``True`` if the button is hidden.
        """
        hidden = self.hidden_buttons.get(action, False)

        if callable(hidden):
            hidden = hidden(row, url)

        return bool(hidden)

    def render_button(
        self,
        action: str,
        url: str,
    ) -> SafeString:
        """Render the default icon link for an action.

        Args:
            action (str):
                The action name.

            url (str):
                The button's URL.

        Returns:
            django.utils.safestring.SafeString:
            The link.
        """
        return format_html(
            '<a href="{}"><span class="glyphicon glyphicon-{}" '
            'aria-hidden="true">&nbsp;</span></a>',
            url,
            self.button_icons.get(action, action))

    def render_buttons(
        self,
        row: Any,
        index: int,
    ) -> List[str]:
        """Render the visible buttons for a row.

        Args:
            row (object):
                The row.

            index (int):
                The index of the row on the page.

        Returns:
            list of str:
            The HTML for each button.
        """
        rendered: List[str] = []

        for action, button in self.buttons.items():
            url = button.get_url(row,
                                 self.create_default_button_url(action, row),
                                 index)

            if self.is_button_hidden(action, url, row):
                continue

            content = button.get_content(row, url, index)

            if content is None:
                content = self.render_button(action, url)

            rendered.append(str(content))

        return rendered

    def render_cell_content(
        self,
        row: Any,
        index: int,
        empty_cell: Optional[str] = None,
    ) -> SafeString:
        html = ''.join(self.render_buttons(row, index))

        if not html:
            html = self.get_empty_cell(empty_cell)

        return render_tag('td', mark_safe(html), self.get_content_options())
