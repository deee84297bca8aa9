# setup.py
from setuptools import setup, find_packages

setup(
    name="mlisp",
    version="0.1.0",
    description="A minimal Lisp: homoiconic reader, dynamically scoped evaluator and REPL",
    license="GPL-3.0-or-later",
    python_requires=">=3.10",
    packages=find_packages(include=["mlisp", "mlisp.*"]),
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["mlisp=mlisp.repl:main"],
    },
    zip_safe=False,
)
