# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os
import logging
import re

from setuptools import setup, find_packages

readme_dir = os.path.dirname(__file__)
readme_path = os.path.join(readme_dir, 'README.md')

try:
    with open(readme_path, 'r') as f:
        readme_markdown = f.read()
except OSError:
    logging.warning("Failed to load %s" % readme_path)
    readme_markdown = ""


with open(os.path.join(readme_dir, 'omics_coordinate', '__init__.py'), 'r') as f:
    version = re.search(
        r'^__version__\s*=\s*[\'"]([^\'"]*)[\'"]',
        f.read(),
        re.MULTILINE).group(1)

if not version:
    raise RuntimeError("Cannot find version information")

if __name__ == '__main__':
    setup(
        name='omics-coordinate',
        version=version,
        description="Genomic positions, contigs, strands, coordinates and intervals "
                    "in the base and interbase coordinate systems",
        license="http://www.apache.org/licenses/LICENSE-2.0.html",
        classifiers=[
            'Development Status :: 4 - Beta',
            'Operating System :: OS Independent',
            'Intended Audience :: Science/Research',
            'License :: OSI Approved :: Apache Software License',
            'Programming Language :: Python',
            'Programming Language :: Python :: 3',
            'Topic :: Scientific/Engineering :: Bio-Informatics',
        ],
        python_requires='>=3.7',
        install_requires=[
            'numpy',
            'pandas',
        ],
        extras_require={
            'test': ['pytest'],
        },
        long_description=readme_markdown,
        long_description_content_type='text/markdown',
        packages=find_packages(exclude=['tests', 'tests.*']),
        package_data={'omics_coordinate': ['logging.conf']},
    )
