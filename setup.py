from setuptools import find_packages, setup

setup(
    name="ibytes",
    version="0.1.0",
    description="Print byte counts as binary-prefixed sizes (KiB, MiB, ... YiB).",
    packages=find_packages(include=["ibytes", "ibytes.*"]),
    install_requires=[
        "typer>=0.12",
        "rich>=13.0",
        "result>=0.16",
    ],
    extras_require={
        "test": ["pytest>=8.0"],
    },
    entry_points={
        "console_scripts": [
            "ibytes=ibytes.cli.app:cli",
        ],
    },
    python_requires=">=3.10",
)
