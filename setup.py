# setup.py
from setuptools import setup, find_packages

setup(
    name="keel",
    version="0.1.0",
    description="A small Lisp interpreter with a streaming reader and character I/O primitives",
    packages=find_packages(include=["keel", "keel.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["keel = keel.interpreter:main"],
    },
    zip_safe=False,
)
