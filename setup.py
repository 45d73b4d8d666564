"""Setup script for link-colors package."""

from setuptools import setup, find_packages

setup(
    name="link-colors",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "matplotlib>=3.5.0",
        "pyyaml>=6.0",
        "click>=8.0",
        "tqdm>=4.60",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "linkcolor-annotate=link_colors.cli.annotate:main",
            "linkcolor-preview=link_colors.cli.preview:main",
        ],
    },
)
