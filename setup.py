# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Tensorlab — Tensor Programming Toolkit                              ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
Tensorlab build configuration.

Pure Python; NumPy is the only runtime dependency.

Build
-----
    pip install -e .                          # editable install
    pip install -e .[dev]                     # plus test tooling
    python -m build --wheel                   # wheel

Environment variables read at import time:
    TENSORLAB_DEFAULT_DTYPE — dtype for factory functions (default float32)
    TENSORLAB_SEED          — integer seed for the random generator
"""
import os

from setuptools import setup

# ── Package metadata ──
_readme = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'README.md')
try:
    with open(_readme, 'r', encoding='utf-8') as fh:
        long_description = fh.read()
except FileNotFoundError:
    long_description = ''

setup(
    name='tensorlab',
    version='0.1.0',
    author='Pictofeed, LLC',
    author_email='engineering@pictofeed.io',
    description=(
        'Tensor programming toolkit on NumPy — depth-axis softmax, '
        'momentum accumulator, broadcast/reshape/convolution helpers'
    ),
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='Proprietary',

    package_dir={
        'tensorlab': '.',
        'tensorlab.nn': 'nn',
        'tensorlab.optim': 'optim',
    },
    packages=[
        'tensorlab',
        'tensorlab.nn',
        'tensorlab.optim',
    ],

    python_requires='>=3.10',
    install_requires=[
        'numpy>=1.24',
    ],
    extras_require={
        'dev': [
            'pytest>=7.0',
            'pytest-benchmark',
        ],
    },

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: Other/Proprietary License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Scientific/Engineering :: Mathematics',
    ],
    zip_safe=False,
)
