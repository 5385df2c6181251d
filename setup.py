#!/usr/bin/env python
"""
# pyresize
Nearest-neighbor and bilinear resizing of 4-D tensors, as done by a reference inference backend

## Features

- `resize`: the resize kernel, over any memory layout (NCHW or NHWC) and any element encoding
- `access`: readers and writers of tensor elements, for float and quantized arrays
- `workload`: `ResizeWorkload`, the resize operator bound to its descriptor
- `utils`: resizing of numpy arrays and Pillow images, side by side plots of the interpolation methods
"""

from setuptools import setup, find_packages

DOCLINES = (__doc__ or '').split("\n")
long_description = "\n".join(DOCLINES[2:])

version = '0.1.0'

setup(
    name='pyresize',
    version=version,
    description='Nearest-neighbor and bilinear resizing of 4-D tensors',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(include=['pyresize', 'pyresize.*']),
    install_requires=[
        'numpy',
        'Pillow',
        'matplotlib'
    ],
    extras_require={
        'torch': ['torch'],
        'test': ['pytest']
    },
    classifiers=[
        'Programming Language :: Python :: 3 :: Only',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
