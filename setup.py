# setup.py
from setuptools import setup, find_packages

setup(
    name="formula",
    version="0.1.0",
    description="A minimal Lisp reader and tree-walking evaluator",
    packages=find_packages(include=["formula", "formula.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
