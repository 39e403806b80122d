"""
Setup script for pysatl-normal.
"""

from setuptools import find_packages, setup

setup(
    name="pysatl-normal",
    version="0.1.0",
    description="Normal distribution engine: AS 241 quantile, moments and conjugate-prior fitting",
    author="Leonid Elkin, Mikhail Mikhailov",
    license="MIT",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy>=1.26",
        "scipy>=1.11",
        "mypy_extensions>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
)
