"""Server-side data grids for Django.

djgrid renders paginated, sortable and filterable HTML tables from Django
querysets. See :py:class:`djgrid.grids.Gridview` for the entry point.
"""

# The version of djgrid
#
# This is in the format of:
#
#   (Major, Minor, Micro, alpha/beta/rc/final, Release Number, Released)
#
VERSION = (1, 0, 0, 'final', 0, True)


def get_package_version():
    """Return the version of djgrid as a PEP 440 version string.

    Returns:
        str:
        The package version.
    """
    major, minor, micro, tag, release_num, released = VERSION

    version = '%d.%d' % (major, minor)

    if micro:
        version = '%s.%d' % (version, micro)

    if tag != 'final':
        tag = {
            'alpha': 'a',
            'beta': 'b',
        }.get(tag, tag)

        version = '%s%s%s' % (version, tag, release_num)

    return version


def is_release():
    return VERSION[5]


__version_info__ = VERSION[:-1]
__version__ = get_package_version()
