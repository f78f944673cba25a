"""Functions to humanize values."""

import re


_CAPITAL_RE = re.compile(r'(?<![A-Z])([A-Z])')
_SEPARATOR_RE = re.compile(r'[_\-.]')


def humanize_attribute(value):
    """Turn an attribute name into a human-readable label.

    CamelCase words are split apart, and underscores, dashes and dots become
    spaces. The first letter is capitalized.

      ======================= =====================
      Attribute               Resulting label
      ======================= =====================
      ``"name"``              ``"Name"``
      ``"firstName"``         ``"First Name"``
      ``"created_at"``        ``"Created at"``
      ``"user.city"``         ``"User city"``
      ======================= =====================

    Args:
        value (str):
            The attribute name.

    Returns:
        str:
        The label.
    """
    value = _CAPITAL_RE.sub(r' \1', value)
    value = _SEPARATOR_RE.sub(' ', value).strip()

    return value[:1].upper() + value[1:]
