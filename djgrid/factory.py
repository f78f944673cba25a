"""Building grids from column specifications."""

from __future__ import annotations

from typing import (Any, Iterable, List, Mapping, Optional, TYPE_CHECKING,
                    Type, Union)

from djgrid.columns import ActionColumn, BaseColumn, Column
from djgrid.datasources import QueryDataSource
from djgrid.errors import InvalidArgumentError, MissingDependencyError
from djgrid.grids import Gridview

if TYPE_CHECKING:
    from django.http import HttpRequest
    from typing_extensions import TypeAlias

    #: A column, an attribute name, or a dictionary of column arguments.
    ColumnSpec: TypeAlias = Union[BaseColumn, str, Mapping[str, Any]]


class GridviewFactory:
    """Builds grids for a request.

    Columns can be given as column instances, attribute names, or
    dictionaries of column arguments. A dictionary's ``class`` key picks the
    column class::

        factory = GridviewFactory(request)
        grid = factory.prepare_gridview(data_source, columns=[
            'name',
            {'attribute_name': 'created', 'format': {'date': 'd/m/Y'}},
            {'class': ActionColumn, 'hidden_buttons': {'delete': True}},
        ])

    Version Added:
        1.0
    """

    #: The column class used for attribute names and dictionaries.
    default_column_cls: Type[BaseColumn] = Column

    #: The column class appended to grids built without columns.
    action_column_cls: Type[BaseColumn] = ActionColumn

    def __init__(
        self,
        request: HttpRequest,
    ) -> None:
        self.request = request

    def prepare_gridview(
        self,
        data_source: Optional[QueryDataSource],
        columns: Optional[Iterable[ColumnSpec]] = None,
        exclude_attributes: Optional[Iterable[str]] = None,
        **grid_kwargs,
    ) -> Gridview:
        """Build a grid.

        If no columns are given, the grid shows every field of the data
        source's model, followed by an action column.

        Args:
            data_source (djgrid.datasources.QueryDataSource):
                The data source providing the rows.

            columns (list, optional):
                The column specifications.

            exclude_attributes (list of str, optional):
                Fields left out when building the default columns.

            **grid_kwargs (dict):
                Keyword arguments for :py:class:`~djgrid.grids.Gridview`.

        Returns:
            djgrid.grids.Gridview:
            The grid.

        Raises:
            djgrid.errors.InvalidArgumentError:
                A column specification was invalid.

            djgrid.errors.MissingDependencyError:
                No data source was provided.
        """
        if data_source is None:
            raise MissingDependencyError(
                'A data source is required to build a grid.')

        if not isinstance(data_source, QueryDataSource):
            raise InvalidArgumentError(
                'Grid data sources must be QueryDataSource instances. '
                '%s given.'
                % type(data_source).__name__)

        grid = Gridview(self.request,
                        data_source=data_source,
                        **grid_kwargs)

        for spec in self.prepare_columns(data_source, columns,
                                         exclude_attributes):
            grid.add_column(self.build_column(spec))

        grid.setup_filters()

        return grid

    def prepare_columns(
        self,
        data_source: QueryDataSource,
        columns: Optional[Iterable[ColumnSpec]] = None,
        exclude_attributes: Optional[Iterable[str]] = None,
    ) -> List[ColumnSpec]:
        """Return the column specifications for a grid.

        Args:
            data_source (djgrid.datasources.QueryDataSource):
                The data source providing the rows.

            columns (list, optional):
                Explicit column specifications.

            exclude_attributes (list of str, optional):
                Fields left out of the default columns.

        Returns:
            list:
            The column specifications.
        """
        if columns:
            return list(columns)

        excluded = set(exclude_attributes or [])
        specs: List[ColumnSpec] = [
            {'attribute_name': field_name}
            for field_name in data_source.fetch_entity_fields()
            if field_name not in excluded
        ]
        specs.append({'class': self.action_column_cls})

        return specs

    def build_column(
        self,
        spec: ColumnSpec,
    ) -> BaseColumn:
        """Return the column for a specification.

        Args:
            spec (object):
                A column instance, an attribute name, or a dictionary of
                column arguments.

        Returns:
            djgrid.columns.BaseColumn:
            The column.

        Raises:
            djgrid.errors.InvalidArgumentError:
                The specification was invalid.
        """
        if isinstance(spec, BaseColumn):
            return spec

        if isinstance(spec, str):
            spec = {'attribute_name': spec}
        elif not isinstance(spec, Mapping):
            raise InvalidArgumentError(
                'Column specifications must be columns, attribute names or '
                'dictionaries. %s given.'
                % type(spec).__name__)

        column_kwargs = dict(spec)
        column_cls = column_kwargs.pop('class', self.default_column_cls)

        if not (isinstance(column_cls, type) and
                issubclass(column_cls, BaseColumn)):
            raise InvalidArgumentError('%r is not a column class.'
                                       % (column_cls,))

        try:
            return column_cls(**column_kwargs)
        except TypeError as e:
            raise InvalidArgumentError('Invalid arguments for %s: %s'
                                       % (column_cls.__name__, e))
