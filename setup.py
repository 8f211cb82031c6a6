"""age-header setup."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="age-header",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[],
    extras_require={
        "pydantic": [
            "pydantic>=2.0.0",
        ],
        "test": [
            "pytest>=7.0.0",
            "pydantic>=2.0.0",
            "cryptography>=41.0.0",
        ],
    },
    python_requires=">=3.9",
    author="age-header contributors",
    author_email="",
    description="Encoder and decoder for age encrypted file headers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Security :: Cryptography",
    ],
    keywords="age, encryption, file format, header",
)
