#!/usr/bin/env python3
"""
Setup script for the ABSCAB numerical core

This script builds the Python package providing compensated summation
and complete elliptic integrals for magnetic-field computations.
"""

from pathlib import Path

from setuptools import setup, find_packages

# Package metadata
PACKAGE_NAME = "abscab-numerics"
VERSION = "1.0.0"
DESCRIPTION = "Compensated summation and complete elliptic integrals for field computations"
AUTHOR = "ABSCAB Contributors"
LICENSE = "MIT"


# Read long description from README
def read_readme():
    readme_path = Path(__file__).parent / "README.md"
    if readme_path.exists():
        with open(readme_path, "r", encoding="utf-8") as f:
            return f.read()
    return DESCRIPTION


# Package requirements
def get_requirements():
    """Get package requirements."""
    base_requirements = [
        "numpy>=1.19.0",
        "torch>=1.9.0",
    ]

    dev_requirements = [
        "pytest>=6.0",
        "pytest-cov>=2.0",
        "scipy>=1.7",
        "black>=21.0",
        "flake8>=3.8",
        "mypy>=0.900",
    ]

    return {
        "base": base_requirements,
        "dev": dev_requirements,
    }


# Setup configuration
def main():
    """Main setup function."""
    requirements = get_requirements()

    setup(
        name=PACKAGE_NAME,
        version=VERSION,
        description=DESCRIPTION,
        long_description=read_readme(),
        long_description_content_type="text/markdown",
        author=AUTHOR,
        license=LICENSE,

        # Package configuration
        packages=find_packages(exclude=["tests", "tests.*", "examples"]),

        # Dependencies
        install_requires=requirements["base"],
        extras_require={
            "dev": requirements["dev"],
            "test": ["pytest>=6.0", "pytest-cov>=2.0", "scipy>=1.7"],
        },
        python_requires=">=3.9",

        classifiers=[
            "Development Status :: 5 - Production/Stable",
            "Intended Audience :: Science/Research",
            "License :: OSI Approved :: MIT License",
            "Programming Language :: Python :: 3",
            "Topic :: Scientific/Engineering :: Mathematics",
            "Topic :: Scientific/Engineering :: Physics",
            "Operating System :: OS Independent",
        ],
        keywords=[
            "numerical", "summation", "kahan", "babuska", "elliptic-integral",
            "bulirsch", "floating-point", "scientific-computing"
        ],
        zip_safe=True,
    )


if __name__ == "__main__":
    main()
