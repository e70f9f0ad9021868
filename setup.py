# setup.py
from setuptools import setup, find_packages

setup(
    name="yu",
    version="0.1.0",
    description="Interactive evaluator for a minimal s-expression language",
    packages=find_packages(include=["yu", "yu.*"]),
    python_requires=">=3.10",
    install_requires=["numpy"],
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["yu = yu.repl:main"]},
    zip_safe=False,
)
