# setup.py
from setuptools import setup, find_packages

setup(
    name="kappa",
    version="0.1.0",
    description="A tree-walking evaluator for a small Scheme-like language",
    packages=find_packages(include=["kappa", "kappa.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["kappa=kappa.main:main"],
    },
    zip_safe=False,
)
