#!/usr/bin/env python3
"""Setup script for manuscript."""
from setuptools import find_packages, setup

# Read version from package
with open("src/manuscript/__init__.py", "r") as f:
    for line in f:
        if line.startswith("__version__"):
            version = line.split("=")[1].strip().strip('"').strip("'")
            break

# Read long description from README
with open("README.md", "r") as f:
    long_description = f.read()

setup(
    name="manuscript",
    version=version,
    description="Markdown article pipeline and RSS feed generator for the manuscript blog",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Manuel Unterhofer",
    url="https://github.com/manu-unter/manuscript",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"manuscript": ["templates/*.j2"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "Markdown>=3.4",
        "Pygments>=2.15",
        "PyYAML>=6.0",
        "beautifulsoup4>=4.12",
        "Jinja2>=3.1",
        "MarkupSafe>=2.1",
        "python-dateutil>=2.8.2",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "feedparser>=6.0.0",
            "ruff>=0.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "manuscript-build=manuscript.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Internet :: WWW/HTTP :: Site Management",
    ],
)
