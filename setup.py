"""Setup script for graph-trace."""

from setuptools import find_packages, setup

setup(
    name="graph-trace",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "networkx>=3.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
