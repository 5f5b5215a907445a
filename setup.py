"""Setup script for the project."""

from setuptools import setup, find_packages

setup(
    name="athlete-performance-tracker",
    version="1.0.0",
    description="Athlete performance tracking API: goals, game stats and progress reports",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "fastapi>=0.110",
        "uvicorn[standard]>=0.27",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "motor>=3.3",
        "pymongo>=4.6",
        "PyJWT>=2.8",
        "reportlab>=4.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
            "httpx>=0.26",
        ],
    },
    python_requires=">=3.10",
)
