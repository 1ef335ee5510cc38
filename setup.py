## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

from pathlib import Path
import setuptools


pkg_vars = {}
with open(f"{Path(__file__).parent}/tablint/_version.py") as fp:
    exec(fp.read(), pkg_vars)

setuptools.setup(
    name="tablint",
    python_requires='>=3.9',
    packages=["tablint", "tablint.rules"],
    install_requires=["globmatch"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["tablint = tablint.cli:main"]},
    version=pkg_vars["__version__"])
