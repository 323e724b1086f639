"""
curryfix: Currying and Anonymous Recursion for Python

Curry/uncurry transformations for fixed arity and fixed-point combinators
based on self-application.
"""

from setuptools import setup, find_packages

setup(
    name="curryfix",
    version="1.0.0",
    description="Curry/uncurry transformations and self-application fixed-point combinators",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="curryfix contributors",
    python_requires=">=3.10",
    packages=find_packages(include=["curryfix", "curryfix.*"]),
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.0",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries",
    ],
)
