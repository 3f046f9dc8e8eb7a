from __future__ import annotations

from setuptools import find_namespace_packages, setup

setup(
    name="dense-blas",
    version="0.1.0",
    description="Dense BLAS level-2 kernels (gemv, ger) over abstract matrix/vector capabilities",
    python_requires=">=3.10",
    packages=find_namespace_packages(
        include=[
            "blas",
            "blas.*",
            "core",
            "core.*",
            "matrix",
            "matrix.*",
            "runtime",
            "runtime.*",
            "dense_blas",
            "dense_blas.*",
        ]
    ),
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
