#!/usr/bin/env python3
"""
Setup script for ConfigKeeper package.
"""

from setuptools import setup, find_packages

setup(
    name="configkeeper",
    version="0.1.0",
    description="Runtime configuration registry with vetoable changes and XML persistence",
    author="ConfigKeeper Team",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.9",
        "rich>=13.0",
        "questionary>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "configkeeper=configkeeper.cli.main:app",
        ],
    },
)
