# setup.py
from setuptools import setup, find_packages

setup(
    name="toylang",
    version="0.1.0",
    description="A minimal s-expression interpreter: lexer, parser and tree-walking evaluator",
    packages=find_packages(include=["toylang", "toylang.*"]),
    python_requires=">=3.10",
    install_requires=[
        "termcolor",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["toylang=toylang.__main__:main"],
    },
    zip_safe=False,
)
