# setup.py
from setuptools import setup, find_packages

setup(
    name="site_loader",
    version="0.1.0",
    description="Depth-bounded recursive web loader producing text documents",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "html5lib>=1.1",
        "click>=8.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "site-loader=site_loader.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
