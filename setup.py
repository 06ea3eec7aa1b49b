"""Setup script for the Token Launch Analyzer."""

import os
import re
from setuptools import setup, find_packages

# Get description from README
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Get version metadata from package without importing it
about = {}
with open(os.path.join("launch_analyzer", "__init__.py"), "r", encoding="utf-8") as f:
    for key, value in re.findall(r'^(__\w+__) = "([^"]*)"', f.read(), re.MULTILINE):
        about[key] = value

# Get dependencies from requirements.txt
with open("requirements.txt", "r", encoding="utf-8") as f:
    requirements = [
        line.strip() for line in f.readlines()
        if line.strip() and not line.startswith("#")
    ]

setup(
    name="token-launch-analyzer",
    version=about["__version__"],
    description="Heuristic legitimacy, rug pull and success scoring for new token launches",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author=about["__author__"],
    author_email=about["__email__"],
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Office/Business :: Financial :: Investment",
    ],
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "launch-analyzer=launch_analyzer.__main__:main",
        ],
    },
)
