import os

from setuptools import find_packages, setup

setup(
    name="declare-constraints",
    version="0.1.0",
    packages=find_packages(include=["declare_constraints", "declare_constraints.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    author="declare-constraints Contributors",
    description="Declarative validation of data structures with composable constraints",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
