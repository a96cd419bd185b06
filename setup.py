from setuptools import setup, find_packages

setup(
    name="actiongraph",
    version="0.1.0",
    packages=find_packages(where="src", exclude=["tests", "tests.*"]),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    python_requires=">=3.9",
    # Add metadata for PyPI
    description="minimal graph-based task orchestration runtime with action-keyed routing",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
