"""
Acetics CLI setup.py — Package configuration and CLI entry point.
"""

from setuptools import find_packages, setup

setup(
    name="acetics-cli",
    version="0.3.0",
    description="Acetics CLI — interactive task entry for the Acetics API",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"acetics_cli": ["config.example.toml"]},
    python_requires=">=3.11",
    entry_points={
        "console_scripts": [
            "acetics=acetics_cli.cli:main",
        ],
    },
    install_requires=[
        "pydantic>=2.5",
        "httpx>=0.27",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
)
