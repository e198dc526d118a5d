from setuptools import setup, find_namespace_packages

extras_require = {
    "dev": [
        "black==23.3.0",
        "flake8==6.1.0",
        "Flake8-pyproject==1.2.3",
        "isort==5.12.0",
        "mypy==1.5.1",
        "pytest-asyncio==0.21.0",
        "pytest-cov==4.1.0",
        "pytest-subtests==0.11.0",
        "pytest==7.4.4",
        "httpx>=0.27.0",
        "opentelemetry-sdk",
    ],
    "fastapi": [
        "fastapi>=0.100.0",
        "opentelemetry-instrumentation-fastapi",
        "sentry-sdk[fastapi]",
    ],
}
extras_require["all"] = [item for name, group in extras_require.items() if name != "dev" for item in group]

setup(
    name="jmbg-pythonlib-util",
    packages=find_namespace_packages(where="src"),
    version="0.1.0",
    package_dir={"": "src"},
    package_data={
        "jmbg.util": ["py.typed"],
        "jmbg.service": ["py.typed"],
        "jmbg.cli": ["py.typed"],
    },
    description="JMBG/OIB validation library",
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.0.0,<3.0.0",
        "pydantic-settings>=2.4.0,<3.0.0",
        "sentry-sdk>=1.39.1",
    ],
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "jmbg-validate=jmbg.cli.validate:main",
        ],
    },
    test_suite="tests",
)
