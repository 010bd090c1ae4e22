#!/usr/bin/env python

import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="python-harmony-backport",
    version="1.0.0",
    author="Sir Wabbit",
    author_email="wabbit@wabbit.one",
    description="ECMAScript 6 code point and SameValue container primitives for Python",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=["harmony"],
    python_requires=">=3.10",  # code uses match/case
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
