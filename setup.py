"""Package setup for scm_index."""

from setuptools import setup, find_packages

setup(
    name="scm-index",
    version="1.0.0",
    description="Validation and discovery of SCM repositories exposed through an HTTP directory index",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "beautifulsoup4>=4.12.0",
        "lxml>=5.0.0",
        "urllib3>=2.0.0",
    ],
    extras_require={
        "ui": [
            "colorlog>=6.8.0",
        ],
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "scm-index=scm_index.cli:main",
        ],
    },
)
