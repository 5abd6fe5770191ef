from setuptools import setup, find_packages

setup(
    name="linesift",
    version="1.0.0",
    packages=find_packages(include=["linesift", "linesift.*"]),
    install_requires=[
        "pyyaml>=6.0",
        "click>=8.2.0",
        "rich>=13.0.0",
        "tabulate>=0.9.0",
        "flask>=3.0.0"
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "linesift=linesift.presentation.cli.main:cli",
            "linesift-server=linesift.application.services.search_application_service:main",
        ],
    },
    python_requires=">=3.10",
)
