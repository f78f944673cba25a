"""HTML tag and attribute rendering for grid components.

Grid components describe HTML attributes as plain dictionaries. The helpers
here turn those dictionaries into escaped markup.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional

from django.core.serializers.json import DjangoJSONEncoder
from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe

from djgrid.errors import InvalidArgumentError


#: Attribute names whose dictionary values expand to prefixed attributes.
#:
#: ``{'data': {'id': 1}}`` renders as ``data-id="1"``.
DATA_ATTRIBUTES = ('data', 'data-ng', 'ng')


def _encode_json(value: Any) -> str:
    return json.dumps(value, cls=DjangoJSONEncoder, ensure_ascii=False)


def _render_class_attr(value: Any) -> Optional[str]:
    if isinstance(value, (list, tuple)):
        value = ' '.join(
            str(css_class)
            for css_class in value
            if css_class
        )

    return str(value) if value else None


def _render_style_attr(value: Mapping[str, Any]) -> str:
    styles = []

    for name, style_value in value.items():
        if not isinstance(name, str) or not isinstance(style_value, str):
            raise InvalidArgumentError(
                'Style names and values must be strings. %s given.'
                % type(style_value).__name__)

        styles.append('%s: %s' % (name, style_value))

    return '; '.join(styles)


def render_attrs(
    attrs: Optional[Mapping[str, Any]],
) -> SafeString:
    """Render a dictionary of HTML attributes.

    This works like :py:func:`django.forms.utils.flatatt`, with a few
    additions for the nested values grid options tend to use:

    * ``class`` may be a list of class names. Empty entries are skipped.
    * ``style`` may be a dictionary of CSS properties.
    * ``data`` (and the other :py:data:`DATA_ATTRIBUTES`) may be a
      dictionary, expanding to one prefixed attribute per key.
    * Any other dictionary or list is JSON-encoded.
    * ``True`` renders the bare attribute name. ``False`` and ``None`` are
      left out.

    Args:
        attrs (dict):
            The attributes to render.

    Returns:
        django.utils.safestring.SafeString:
        The rendered attributes, each preceded by a space.

    Raises:
        djgrid.errors.InvalidArgumentError:
            A ``style`` or ``data`` dictionary contained invalid entries.
    """
    if not attrs:
        return mark_safe('')

    parts = []

    for name, value in attrs.items():
        if value is None or value is False:
            continue

        if value is True:
            parts.append(format_html(' {}', name))
        elif name == 'class':
            css_class = _render_class_attr(value)

            if css_class:
                parts.append(format_html(' class="{}"', css_class))
        elif name == 'style' and isinstance(value, Mapping):
            parts.append(format_html(' style="{}"',
                                     _render_style_attr(value)))
        elif name in DATA_ATTRIBUTES and isinstance(value, Mapping):
            for data_name, data_value in value.items():
                if not isinstance(data_name, (str, int)):
                    raise InvalidArgumentError(
                        'Data attribute names must be strings or numbers. '
                        '%s given.'
                        % type(data_name).__name__)

                if not isinstance(data_value, str):
                    data_value = _encode_json(data_value)

                parts.append(format_html(' {}-{}="{}"',
                                         name, data_name, data_value))
        elif isinstance(value, (Mapping, list, tuple)):
            parts.append(format_html(' {}="{}"', name, _encode_json(value)))
        else:
            parts.append(format_html(' {}="{}"', name, value))

    return mark_safe(''.join(parts))


def render_tag(
    tag_name: str,
    content: Any = '',
    attrs: Optional[Mapping[str, Any]] = None,
) -> SafeString:
    """Render an HTML element.

    Args:
        tag_name (str):
            The name of the tag.

        content (str, optional):
            The HTML to place inside the element. This is inserted as-is,
            so it must already be escaped where needed.

        attrs (dict, optional):
            The attributes for the element.

    Returns:
        django.utils.safestring.SafeString:
        The rendered element.
    """
    if content is None:
        content = ''

    return format_html('<{0}{1}>{2}</{0}>',
                       tag_name,
                       render_attrs(attrs),
                       mark_safe(content))
