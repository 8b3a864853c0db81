"""
This file defines the ``extras_require`` argument used in setup.py -- i.e., the
set of optional dependency groups (like minpq[numpy] or minpq[dev]). It's in
its own file so setup.py can load it without importing the package.
"""

from collections import OrderedDict


def combine(*dep_lists):
    """Combines multiple lists into a single sorted list of distinct items."""
    return list(sorted(set(dep for dep_list in dep_lists for dep in dep_list)))


# Construct the mapping from "extra name" to package descriptor.
extras = OrderedDict()

# Priorities can be NumPy scalars; nothing in the package imports NumPy itself.
extras["numpy"] = ["numpy"]

extras["full"] = combine(*extras.values())

extras["dev"] = combine(
    [
        "pytest",
        "black",
        "flake8",
        "flake8-print",
        "flake8-fixme",
        "bumpversion",
    ],
    *extras.values()
)

# This will be imported by setup.py.
extras_require = extras
