"""Deprecation warnings for djgrid.

Version-specific warning classes in this module are removed along with the
features they cover.
"""

from __future__ import annotations

from housekeeping import BaseRemovedInWarning


class BaseRemovedInDjgridVersionWarning(BaseRemovedInWarning):
    """Base class for a djgrid deprecation warning.

    All version-specific deprecation warnings inherit from this, allowing
    callers to check for djgrid deprecations without being tied to a specific
    version.
    """

    product = 'djgrid'


class RemovedInDjgrid20Warning(BaseRemovedInDjgridVersionWarning):
    """Deprecations for features scheduled for removal in djgrid 2.0.

    Note that this class will itself be removed in djgrid 2.0. If you need to
    check against djgrid deprecation warnings, please see
    :py:class:`BaseRemovedInDjgridVersionWarning`.
    """

    version = '2.0'


#: An alias for the next release of djgrid where features would be removed.
RemovedInNextDjgridVersionWarning = RemovedInDjgrid20Warning
