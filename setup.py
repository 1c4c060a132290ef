#!/usr/bin/env python

from setuptools import setup, find_packages


with open("README.md", "r") as fh:
    long_description = fh.read()

CLASSIFIERS = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Topic :: Security",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development",
]


setup(
    name="lds-jws2020",
    version="0.1.0",
    description="JsonWebKey2020 key pairs producing and verifying detached JWS for linked-data proofs",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT License",
    platforms=["OS Independent"],
    classifiers=CLASSIFIERS,
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"lds_jws2020": ["schemas/*.json"]},
    include_package_data=True,
    install_requires=[
        "ecdsa>=0.18.0",
        "jsonref>=1.0.0",
        "jsonschema>=3.2.0",
        "pycryptodome>=3.20.0",
    ],
    extras_require={"test": ["pytest>=6.0"]},
    python_requires=">=3.8",
)
