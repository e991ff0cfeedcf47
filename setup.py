"""
Conformance Engine

Runtime interface conformance checks for duck-typed Python objects.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="conformance-engine",
    version="0.1.0",
    author="Conformance Engine Contributors",
    description="Runtime interface conformance checks for duck-typed objects",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Testing",
    ],
    python_requires=">=3.10",
    extras_require={
        "dev": [
            "pytest>=7.0",
        ],
    },
)
