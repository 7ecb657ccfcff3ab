# setup.py
from setuptools import setup, find_packages

setup(
    name="lispy",
    version="0.0.2",
    description="A small Lisp with S- and Q-expressions, lexical scoping and partial application",
    packages=find_packages(include=["lispy", "lispy.*"]),
    package_data={"lispy": ["prelude/*.lspy"]},
    python_requires=">=3.10",
    install_requires=["termcolor>=2.1"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["lispy=lispy.repl:main"]},
    zip_safe=False,
)
