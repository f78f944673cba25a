#!/usr/bin/env python

from setuptools import find_packages, setup

from djgrid import get_package_version, VERSION
from djgrid.dependencies import (PYTHON_3_RANGE,
                                 build_dependency_list,
                                 package_dependencies,
                                 test_dependencies)


PACKAGE_NAME = 'djgrid'

setup(
    name=PACKAGE_NAME,
    version=get_package_version(),
    license='MIT',
    description=(
        'Server-side rendered, sortable, paginated and filterable data '
        'grids for Django.'
    ),
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires=PYTHON_3_RANGE,
    install_requires=build_dependency_list(package_dependencies),
    extras_require={
        'test': build_dependency_list(test_dependencies),
    },
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        'Development Status :: %s' % (
            '5 - Production/Stable' if VERSION[5] else '4 - Beta'),
        'Environment :: Web Environment',
        'Framework :: Django',
        'Framework :: Django :: 4.2',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
)
