#!/usr/bin/env python3
"""
Setup script for the json-localization package
"""

from setuptools import setup, find_packages

setup(
    name="json-localization",
    version="0.1.0",
    description="String localization from JSON resource files with culture fallback",
    packages=find_packages(include=["json_localization", "json_localization.*"]),
    python_requires=">=3.9",
    install_requires=[
        # 📋 Settings
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "python-dotenv>=1.0.0",

        # 🚀 Web Framework - request culture middleware and DI providers
        "fastapi>=0.104.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "httpx>=0.25.2",
        ],
    },
    package_data={
        "json_localization": ["py.typed"],
    },
)
