# setup.py
from setuptools import setup, find_packages

setup(
    name="dial",
    version="0.1.0",
    description="A small Lisp with closures, proper tail calls and an exact numeric tower",
    packages=find_packages(include=["dial", "dial.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["dial=dial.__main__:main"],
    },
    zip_safe=False,
)
