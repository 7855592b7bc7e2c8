"""RBFInterp is a library for radial basis function interpolation of scattered data."""

import re
from setuptools import setup, find_packages


with open('./rbfinterp/__init__.py', 'r', encoding='utf-8') as f:
    version = re.search(r'^__version__\s*=\s*[\'"]([^\'"]*)[\'"]', f.read(), re.MULTILINE).group(1)

with open('./README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='RBFInterp',
    packages=find_packages(exclude=['benchmark']),
    version=version,
    license='Apache License 2.0',
    description='Radial basis function interpolation of scattered data in arbitrary dimension',
    long_description=long_description,
    long_description_content_type="text/markdown",
    zip_safe=False,
    platforms='any',
    include_package_data=True,
    install_requires=[
        'numpy>=1.20',
        'scipy>=1.7',
        'numba>=0.57',
    ],
    extras_require={
        'test': [
            'pytest>=6.0.1',
        ],
        'benchmark': [
            'pandas>=1.3',
            'tqdm>=4.56.0',
            'matplotlib>=3.5.1',
            'seaborn>=0.11.1',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Topic :: Scientific/Engineering',
    ],
)
