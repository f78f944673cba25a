"""Version information for djgrid dependencies.

This contains constants that other parts of djgrid and its packaging can use
to look up information on its dependencies.
"""

# NOTE: This file may not import other (non-Python) modules! It's used for
#       packaging and may be needed before any dependencies have been
#       installed.

from typing import Dict


#: The minimum supported version of Python 3.x.
PYTHON_3_MIN_VERSION = (3, 8)

#: A string representation of the minimum supported version of Python 3.x.
PYTHON_3_MIN_VERSION_STR = '%s.%s' % PYTHON_3_MIN_VERSION

#: A dependency version range for Python 3.x.
PYTHON_3_RANGE = ">=%s" % PYTHON_3_MIN_VERSION_STR

#: The version range required for Django.
django_version = '~=4.2.17'


#: All dependencies required to install djgrid.
package_dependencies: Dict[str, str] = {
    'Django': django_version,
    'housekeeping': '~=1.1',
    'python-dateutil': '>=2.7',
    'pytz': '',
    'typing_extensions': '>=4.12.2',
}

#: Dependencies required to run the test suite.
test_dependencies: Dict[str, str] = {
    'kgb': '>=7.1.1',
    'pytest': '>=7.0',
    'pytest-django': '>=4.5',
}


def build_dependency_list(deps, version_prefix=''):
    """Build a list of dependency specifiers from a dependency map.

    Args:
        deps (dict):
            A dictionary of dependencies.

        version_prefix (str, optional):
            A prefix to place before each version range.

    Returns:
        list of str:
        A list of dependency specifiers.
    """
    return sorted(
        (
            '%s%s%s' % (dep_name, version_prefix, dep_details)
            for dep_name, dep_details in deps.items()
        ),
        key=lambda s: s.lower())
