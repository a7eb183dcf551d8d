"""Packaging for mwquery.

Sources live under ``src/``; the test extra pulls in pytest and pytest-asyncio
for both the blocking and the async iterators.
"""

from setuptools import find_packages, setup

setup(
    name="mwquery",
    version="0.1.0",
    description="Lazy, version-aware iteration over MediaWiki list queries",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "httpx>=0.25",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
)
