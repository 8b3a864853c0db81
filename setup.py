#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

import os
from runpy import run_path

# This appears to be the least annoying Python-version-agnostic way of loading
# an external file.
extras_require = run_path(
    os.path.join(os.path.dirname(__file__), "minpq", "extras.py")
)["extras_require"]

with open("README.md") as readme_file:
    readme = readme_file.read()

requirements = [
    "attrs",
]

setup(
    name="minpq",
    version="0.1.0",
    description=(
        "An indexed d-ary min-priority queue with constant-time membership "
        "checks and logarithmic priority updates"
    ),
    long_description=readme,
    long_description_content_type="text/markdown",
    license="Apache License 2.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=requirements,
    extras_require=extras_require,
    python_requires=">=3.6",
    zip_safe=False,
    keywords="minpq",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.6",
    ],
)
