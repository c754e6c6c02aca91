# setup.py
from setuptools import setup, find_packages

setup(
    name="yocto-lisp",
    version="0.3.0",
    description="A small Lisp interpreter with quasiquote macros over lexical environments",
    packages=find_packages(include=["yocto", "yocto.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["yocto = yocto.__main__:main"],
    },
    zip_safe=False,
)
