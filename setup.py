from setuptools import setup, find_packages

setup(
    name="toon_client",
    version="0.1.0",
    description="Async Python client and CLI for the Eneco Toon thermostat API",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "aiohttp>=3.8.1",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
            "aioresponses>=0.7.4",
            # aioresponses does not yet support aiohttp 3.14 ClientResponse signature
            "aiohttp<3.14",
        ],
    },
    entry_points={
        "console_scripts": [
            "toon-client=toon_client.cli:main",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Framework :: AsyncIO",
    ],
)
