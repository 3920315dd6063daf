from setuptools import setup, find_packages

setup(
    name="cdo",
    version="1.0.0",
    description="Incremental build-and-run wrapper for single-file C++ programs",
    packages=find_packages(include=["cdo", "cdo.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["cdo=cdo._cli:main"]},
)
