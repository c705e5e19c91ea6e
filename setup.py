# setup.py
from setuptools import setup, find_packages

setup(
    name="minilisp",
    version="0.1.0",
    description="A minimal S-expression reader and evaluator",
    packages=find_packages(include=["minilisp", "minilisp.*", "minilisp_server", "minilisp_server.*"]),
    package_data={"minilisp": ["prelude/*.lisp"]},
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "minilisp=minilisp.__main__:main",
        ],
    },
    zip_safe=False,
)
