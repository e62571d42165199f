from __future__ import annotations

from setuptools import find_namespace_packages, setup

setup(
    name="polyface",
    version="0.1.0",
    description="Geometry kernel for arbitrary polygonal mesh faces.",
    python_requires=">=3.10",
    packages=find_namespace_packages(
        include=["polyface", "geometry", "core", "core.*", "runtime"]
    ),
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
