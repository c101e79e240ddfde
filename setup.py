# setup.py
from setuptools import setup, find_packages

setup(
    name="minischeme",
    version="0.1.0",
    description="A minimal Lisp-like expression evaluator with a line-oriented REPL",
    packages=find_packages(include=["minischeme", "minischeme.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["minischeme=minischeme.__main__:main"],
    },
    zip_safe=False,
)
