# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="minilisp",
    version="0.1.0",
    description="A tree-walking interpreter for a minimal Lisp with lexical closures",
    packages=find_namespace_packages(include=["minilisp", "minilisp.*"]),
    python_requires=">=3.11",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
