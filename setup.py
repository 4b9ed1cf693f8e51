"""
Setup configuration for Title Marker Checker.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="title-marker-checker",
    version="0.1.0",
    author="Title Marker Checker Team",
    description="Checks the format of version markers such as (TV Size) in beatmap titles",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["title_marker_checker", "title_marker_checker.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
            "black>=22.0.0",
            "flake8>=4.0.0",
            "mypy>=0.950",
        ],
    },
    entry_points={
        "console_scripts": [
            "title-marker-check=title_marker_checker.main:main",
        ],
    },
)
