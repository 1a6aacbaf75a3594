from setuptools import setup
from optscan.const import VERSION_STR, DESCRIPTION

setup(
    name="optscan",
    version=VERSION_STR,
    python_requires='>=3.10',
    description=DESCRIPTION,
    packages=["optscan"],
    install_requires=[
        "graphviz"
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "optscan = optscan:main",
        ],
    },
    license="MIT",
    platforms="any",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
