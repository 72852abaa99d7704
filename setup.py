#!/usr/bin/env python3

# Copyright 2024 Canonical Ltd.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Setup script for charmshow."""

from setuptools import find_packages, setup

with open("README.md", encoding="utf8") as fh:
    long_description = fh.read()

install_requires = [
    "craft-cli>=2.3.0",
    "distro>=1.3.0",
    "platformdirs",
    "pydantic>=2.0,<3.0",
    "pyyaml",
    "requests",
    "tabulate",
    "typing-extensions",
]

lint_requires = [
    "black>=23.10.1",
    "codespell[tomli]>=2.2.6,<3.0.0",
    "ruff",
]

type_requires = [
    "mypy[reports]~=1.5",
    "types-PyYAML",
    "types-requests",
    "types-setuptools",
    "types-tabulate",
]

dev_requires = [
    "coverage",
    "pytest",
    "pytest-cov",
    "pytest-mock",
    "responses",
]
dev_requires += lint_requires + type_requires

extras_require = {
    "dev": dev_requires,
    "lint": lint_requires,
    "type": type_requires,
}


setup(
    name="charmshow",
    version="0.1.0",
    author="Canonical Ltd.",
    description="Show information about charms and bundles published in the charm store.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="Apache-2.0",
    packages=find_packages(include=["charmshow", "charmshow.*"]),
    classifiers=[
        "Environment :: Console",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
    ],
    entry_points={
        "console_scripts": ["charm = charmshow.main:cli"],
    },
    python_requires=">=3.10",
    install_requires=install_requires,
    extras_require=extras_require,
)
