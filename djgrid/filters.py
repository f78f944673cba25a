"""Filter forms for grids."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Type, Union

from django import forms

from djgrid.errors import InvalidArgumentError


class FilterFormBuilder:
    """Builds the filter form shown above a grid's rows.

    Columns register a form field for each attribute that can be filtered.
    The resulting form is rendered field by field in the grid's filter row.

    Version Added:
        1.0
    """

    ######################
    # Instance variables #
    ######################

    #: The URL the form submits to.
    #:
    #: Type:
    #:     str
    action: str

    #: The form fields, by attribute name.
    #:
    #: Type:
    #:     dict
    fields: Dict[str, forms.Field]

    #: The HTTP method used to submit the form.
    #:
    #: Type:
    #:     str
    method: str

    #: The prefix for the form's field names.
    #:
    #: Type:
    #:     str
    prefix: Optional[str]

    def __init__(
        self,
        prefix: Optional[str] = None,
        action: str = '',
        method: str = 'get',
    ) -> None:
        self.prefix = prefix
        self.action = action
        self.method = method
        self.fields = {}

    def add(
        self,
        name: str,
        field_type: Optional[Union[Type[forms.Field], forms.Field]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> forms.Field:
        """Add a field to the form.

        Fields are optional unless ``options`` says otherwise.

        Args:
            name (str):
                The attribute name the field filters on.

            field_type (type or django.forms.Field, optional):
                The field class, or a field instance. Defaults to
                :py:class:`~django.forms.CharField`.

            options (dict, optional):
                Keyword arguments for the field class.

        Returns:
            django.forms.Field:
            The added field.

        Raises:
            djgrid.errors.InvalidArgumentError:
                The field type was not a form field.
        """
        if isinstance(field_type, forms.Field):
            field = field_type
        else:
            if field_type is None:
                field_type = forms.CharField
            elif not (isinstance(field_type, type) and
                      issubclass(field_type, forms.Field)):
                raise InvalidArgumentError(
                    'Filter field types must be form fields. %r given.'
                    % (field_type,))

            field_kwargs: Dict[str, Any] = {
                'required': False,
            }
            field_kwargs.update(options or {})
            field = field_type(**field_kwargs)

        self.fields[name] = field

        return field

    def get_form(
        self,
        data: Optional[Mapping[str, Any]] = None,
        initial: Optional[Mapping[str, Any]] = None,
    ) -> forms.Form:
        """Return a form with the added fields.

        Args:
            data (dict, optional):
                The submitted data to bind the form to.

            initial (dict, optional):
                Initial values for the fields.

        Returns:
            django.forms.Form:
            The form. It has ``action`` and ``method`` attributes for
            rendering the surrounding ``<form>`` element.
        """
        form_cls = type('GridFilterForm', (forms.Form,), dict(self.fields))
        form = form_cls(data=data, initial=initial, prefix=self.prefix)
        form.action = self.action
        form.method = self.method

        return form
