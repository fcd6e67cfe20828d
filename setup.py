"""Setup pour Gestion Clinique."""

from setuptools import setup, find_packages

setup(
    name="gestion_clinique",
    version="1.0.0",
    description="Noyau de gestion de clinique : listes d'options, profil entreprise, documents imprimables",
    author="AJ",
    python_requires=">=3.10",
    packages=find_packages(exclude=["tests", "tests.*"]),
    entry_points={
        "console_scripts": [
            "gestion-clinique=gestion_clinique.main:main",
        ],
    },
    install_requires=[
        "fastapi>=0.110.0",
        "uvicorn>=0.29.0",
        "pydantic>=2.0",
        "jinja2>=3.1.0",
        "markupsafe>=2.1.0",
        "python-dateutil>=2.8.0",
    ],
    extras_require={
        "serveur": [
            "gunicorn>=21.2.0",
        ],
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "httpx>=0.27.0",
        ],
    },
)
