# setup.py - Package and console entry point
from setuptools import setup, find_packages

setup(
    name="idem_monoid",
    version="0.1.0",
    description="Free idempotent monoid generation and canonical word reduction",
    packages=find_packages(include=["idem_monoid", "idem_monoid.*"]),
    python_requires=">=3.8",
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["idem-monoid=idem_monoid.cli:main"]},
)
