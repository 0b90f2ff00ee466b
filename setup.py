#! /usr/bin/python3

import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="bbb-client",
    version="0.1.0",
    description="Client for the Big Blue Button videoconferencing API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests"]),
    python_requires=">=3.8",
    install_requires=[
        'requests',
        'lxml',
        'pyjavaproperties',
        'python-dotenv',
        'structlog',
    ],
    extras_require={
        'test': ['pytest'],
    },
    scripts=[
        'scripts/bbb-get-meetings',
    ],
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
