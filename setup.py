# setup.py
from setuptools import setup, find_packages

setup(
    name="yall",
    version="0.3.0",
    description="Yet another little Lisp: reader, evaluator and REPL",
    packages=find_packages(include=["yall", "yall.*"]),
    package_data={"yall": ["prelude/*.yall"]},
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["yall=yall.repl:main"],
    },
    zip_safe=False,
)
