# setup.py
from setuptools import setup, find_packages

setup(
    name="yaft",
    version="0.1.0",
    packages=find_packages(include=["yaft", "yaft.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0",
    ],
    extras_require={
        "test": ["pytest>=7.0", "hypothesis>=6.0"],
    },
    entry_points={
        "console_scripts": ["yaft=yaft.cli:main"],
    },
    zip_safe=False,
)
