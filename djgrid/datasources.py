"""Data sources feeding rows to grids.

A data source wraps a Django queryset, and applies a grid's sorting and
pagination to it when the rows for the current page are fetched.
"""

from __future__ import annotations

import logging
from typing import (Any, Generic, List, Mapping, Optional, TYPE_CHECKING,
                    Type, TypeVar)

from django.db.models import Model
from housekeeping import ClassMovedMixin

from djgrid.deprecation import RemovedInDjgrid20Warning
from djgrid.errors import InvalidArgumentError, MissingDependencyError
from djgrid.sort import Sort

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from djgrid.pagination import Pagination


logger = logging.getLogger(__name__)


_ModelT = TypeVar('_ModelT', bound=Model)


class QueryDataSource(Generic[_ModelT]):
    """A data source for the rows of a queryset.

    If the grid's sort has no attributes, every concrete field of the model
    becomes sortable.

    Version Added:
        1.0
    """

    ######################
    # Instance variables #
    ######################

    #: The pagination applied to the queryset.
    #:
    #: Type:
    #:     djgrid.pagination.Pagination
    pagination: Optional[Pagination]

    #: The queryset providing the rows.
    #:
    #: Type:
    #:     django.db.models.QuerySet
    queryset: QuerySet[_ModelT]

    def __init__(
        self,
        queryset: QuerySet[_ModelT],
        pagination: Optional[Pagination] = None,
        sort: Optional[Sort] = None,
        model: Optional[Type[_ModelT]] = None,
        root_alias: Optional[str] = None,
    ) -> None:
        """Initialize the data source.

        Args:
            queryset (django.db.models.QuerySet):
                The queryset providing the rows.

            pagination (djgrid.pagination.Pagination, optional):
                The pagination applied to the queryset.

            sort (djgrid.sort.Sort, optional):
                The sort applied to the queryset.

            model (type, optional):
                The model of the rows. Defaults to the queryset's model.

            root_alias (str, optional):
                The prefix for the queryset's own fields in sort clauses.
                Defaults to the model name.
        """
        self.queryset = queryset
        self.pagination = pagination
        self._sort = sort
        self._model = model
        self._root_alias: Optional[str] = None

        if root_alias is not None:
            self.root_alias = root_alias

    @property
    def model(self) -> Optional[Type[_ModelT]]:
        """The model of the rows.

        Type:
            type
        """
        if self._model is not None:
            return self._model

        return getattr(self.queryset, 'model', None)

    @property
    def entity_short_name(self) -> Optional[str]:
        """The class name of the model.

        Type:
            str
        """
        model = self.model

        if model is None:
            return None

        return model.__name__

    @property
    def root_alias(self) -> Optional[str]:
        """The prefix for the queryset's own fields in sort clauses.

        Type:
            str
        """
        if self._root_alias is None:
            return self.entity_short_name

        return self._root_alias

    @root_alias.setter
    def root_alias(
        self,
        root_alias: str,
    ) -> None:
        if not isinstance(root_alias, str):
            raise InvalidArgumentError(
                'Root alias must be a string. %s given.'
                % type(root_alias).__name__)

        self._root_alias = root_alias

    @property
    def sort(self) -> Optional[Sort]:
        """The sort applied to the queryset.

        If the sort has no attributes yet, it's given one for each field of
        the model.

        Type:
            djgrid.sort.Sort
        """
        sort = self._sort

        if sort is not None and not sort.attributes:
            root_alias = self.root_alias

            sort.set_attributes({
                field_name: {
                    Sort.ASC: {
                        '%s.%s' % (root_alias, field_name): Sort.ASC,
                    },
                    Sort.DESC: {
                        '%s.%s' % (root_alias, field_name): Sort.DESC,
                    },
                }
                for field_name in self.fetch_entity_fields()
            })

        return sort

    @sort.setter
    def sort(
        self,
        sort: Optional[Sort],
    ) -> None:
        self._sort = sort

    def fetch_entity_fields(self) -> List[str]:
        """Return the names of the model's concrete fields.

        Returns:
            list of str:
            The field names.
        """
        model = self.model

        if model is None:
            return []

        return [
            field.name
            for field in model._meta.concrete_fields
        ]

    def get_total_count(
        self,
        criteria: Optional[Mapping[str, Any]] = None,
    ) -> int:
        """Return the number of rows.

        Args:
            criteria (dict, optional):
                Field lookups to filter the rows by.

        Returns:
            int:
            The number of rows.
        """
        queryset = self.queryset

        if criteria:
            queryset = queryset.filter(**criteria)

        return queryset.count()

    def get_order_field(
        self,
        field_name: str,
        direction: str,
    ) -> str:
        """Return the ``order_by()`` term for a sort clause.

        Args:
            field_name (str):
                The field in the sort clause, such as ``Book.author.name``.

            direction (str):
                The sort direction.

        Returns:
            str:
            The ordering term, such as ``-author__name``.
        """
        root_alias = self.root_alias

        if root_alias and field_name.startswith('%s.' % root_alias):
            field_name = field_name[len(root_alias) + 1:]

        field_name = field_name.replace('.', '__')

        if str(direction).lower() == Sort.DESC:
            return '-%s' % field_name

        return field_name

    def fetch_entities(self) -> List[_ModelT]:
        """Return the rows for the current page.

        This updates the pagination's total count before reading the page.

        Returns:
            list:
            The rows.

        Raises:
            djgrid.errors.MissingDependencyError:
                The data source has no pagination or no sort.
        """
        pagination = self.pagination
        sort = self.sort

        if pagination is None:
            raise MissingDependencyError(
                'The data source needs a Pagination to fetch rows.')

        if sort is None:
            raise MissingDependencyError(
                'The data source needs a Sort to fetch rows.')

        pagination.total_count = self.get_total_count()

        queryset = self.queryset
        order_by = [
            self.get_order_field(field_name, direction)
            for field_name, direction in sort.fetch_orders().items()
        ]

        if order_by:
            # Any explicit ordering on the queryset breaks ties.
            sorted_fields = {
                term.lstrip('-')
                for term in order_by
            }
            order_by += [
                term
                for term in queryset.query.order_by
                if (isinstance(term, str) and
                    term.lstrip('-') not in sorted_fields)
            ]
            queryset = queryset.order_by(*order_by)

        offset = pagination.offset
        limit = pagination.limit

        logger.debug('Fetching %s rows (offset=%s, limit=%s, order_by=%r)',
                     self.entity_short_name, offset, limit, order_by)

        if limit < 0:
            queryset = queryset[offset:]
        else:
            queryset = queryset[offset:offset + limit]

        return list(queryset)


class QueryDataProvider(ClassMovedMixin,
                        QueryDataSource,
                        warning_cls=RemovedInDjgrid20Warning):
    """A data source for the rows of a queryset.

    Deprecated:
        1.0:
        This has been replaced by :py:class:`QueryDataSource`, which
        combines the data provider and data source.
    """
