from setuptools import find_packages, setup

setup(
    name="apogee-shared",
    version="0.1.0",
    description="Shared models, schemas, security and client utilities for the Apogee insurance services",
    author="Apogee Team",
    author_email="team@apogee-insurance.com",
    packages=find_packages(include=["shared", "shared.*"]),
    install_requires=[
        "fastapi>=0.110.0",
        "httpx>=0.27.0",
        "pydantic>=2.5.0,<3.0.0",
        "python-jose[cryptography]>=3.3.0",
        "sqlalchemy>=2.0.31,<3.0.0",
        "tenacity>=8.2.0",
    ],
)
