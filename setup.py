# setup.py
from setuptools import setup, find_packages

setup(
    name="site_mapper",
    version="0.1.0",
    description="Concurrent same-domain web crawler that builds a sitemap",
    packages=find_packages(include=["site_mapper", "site_mapper.*"]),
    package_data={"site_mapper": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "click>=8.1",
        "Jinja2>=3.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": ["site_mapper=site_mapper.cli:cli"],
    },
    python_requires=">=3.11",
)
