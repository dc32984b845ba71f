#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import re
from pathlib import Path

from setuptools import find_packages, setup

# XXX: importing unijson here would require its dependencies to be installed before they are declared
_version_file = Path(__file__).parent / 'unijson' / 'version.py'
__version__ = re.search(r"^__version__ = '([^']+)'", _version_file.read_text(), re.MULTILINE).group(1)

setup(
    name='unijson',
    version=__version__,
    description='Schema-driven codec between universal values and JSON',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    python_requires='>=3.10',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    packages=find_packages(exclude=('unijson_tests', 'unijson_tests.*')),
    package_data={
        'unijson.conf': ['*.yml'],
    },
    install_requires=[
        'pydantic>=2.0',
        'pyyaml>=6.0',
        'structlog>=22.0',
        'typing_extensions>=4.10',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
)
