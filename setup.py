"""
Setup script for jp-prefecture.
"""

from setuptools import setup, find_packages

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

# Separate development requirements
dev_requirements = [req for req in requirements if any(dev in req for dev in ["pytest", "black", "flake8", "mypy"])]
install_requirements = [req for req in requirements if req not in dev_requirements]

setup(
    name="jp-prefecture",
    version="1.0.0",
    author="Data Analytics Team",
    description="Lookup utilities for Japanese prefectures",
    long_description="jp-prefecture - Map Japanese prefectures between JIS X 0401 codes and their kanji, kana and english names, and map CSV columns of free-form prefecture values to canonical codes.",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    install_requires=install_requirements,
    extras_require={
        "dev": dev_requirements,
        "test": dev_requirements,
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "jp-prefecture=main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Natural Language :: Japanese",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
