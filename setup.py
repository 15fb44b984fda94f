"""
Setup script for the job-board project.

Allows development installation with `pip install -e .`
"""

from setuptools import setup, find_packages

setup(
    name="job-board",
    version="1.0.0",
    packages=find_packages(include=["jobboard", "jobboard.*", "board_service", "board_service.*"]),
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110",
        "starlette>=0.36",
        "uvicorn>=0.27",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "pymongo>=4.6",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-mock>=3.12",
            "httpx>=0.26",
        ],
    },
)
