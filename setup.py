""" ecgroup build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecgroup

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecgroup.name,
    version=ecgroup.__version__,
    license=ecgroup.__license__,
    author=ecgroup.__author__,
    author_email=ecgroup.__author_email__,
    description="Elliptic curve group arithmetic over prime fields",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"ecgroup.ec": ["data/*.json"]},
    install_requires=["dataclasses_json"],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "myst_parser", "sphinx_rtd_theme"],
    },
    keywords="elliptic-curves weierstrass finite-fields scalar-multiplication",
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
