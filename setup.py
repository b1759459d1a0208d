from setuptools import setup, find_namespace_packages

__version__ = "1.0.0"

requirements = [
    "fastapi>=0.108",
    "dependency-injector>=4.0,<5.0",
    "pydantic>=2.0,<3.0",
    "jinja2",
    "markupsafe",
    "uvicorn",
]

setup(
    name="vite-assets",
    version=__version__,
    packages=find_namespace_packages(include=["vite_assets", "vite_assets.*"]),
    install_requires=requirements,
    entry_points={
        "console_scripts": ["vite-assets=vite_assets.application:run"],
    },
    extras_require={
        "dev": [
            "black",
            "pylint",
            "mypy",
            "autoflake",
            "coverage",
            "pytest",
            "pytest-mock",
            "httpx",
        ]
    },
)
