# setup.py
from setuptools import setup, find_packages

setup(
    name="ember",
    version="0.3.0",
    description="A small Lisp with a line-oriented REPL",
    packages=find_packages(include=["ember", "ember.*"]),
    package_data={"ember": ["prelude/*.lisp"]},
    python_requires=">=3.10",
    install_requires=[
        "prompt_toolkit>=3.0",
    ],
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6"],
    },
    entry_points={
        "console_scripts": ["ember=ember.__main__:main"],
    },
    zip_safe=False,
)
