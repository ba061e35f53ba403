from setuptools import setup, find_namespace_packages

setup(
    name="ocispec",
    version="0.1.0",
    packages=find_namespace_packages(where="src", include=["ocispec*"]),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "psutil>=5.9",
        ],
    },
)
