# setup.py
from setuptools import setup, find_packages

setup(
    name="tinylisp",
    version="1.0.0",
    description="A small Lisp: reader, tree-walking evaluator with closures, and a REPL",
    packages=find_packages(include=["tinylisp", "tinylisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["tinylisp=tinylisp.cli:main"],
    },
    zip_safe=False,
)
