"""Setup script for the Department of Education eligibility pipeline."""

from setuptools import setup, find_packages

# Read long description from README
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="edu-eligibility",
    version="0.1.0",
    author="Institutional Research",
    description=(
        "Reconciles the Department of Education eligibility matrix workbooks "
        "into one dataset of eligible institutions"
    ),
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=[
        "core", "core.*",
        "sources", "sources.*",
        "data_prep", "data_prep.*",
        "reconcile", "reconcile.*",
        "output", "output.*",
        "pipeline", "pipeline.*",
    ]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "Topic :: Scientific/Engineering :: Information Analysis",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=[
        "pandas>=2.0.0",
        "openpyxl>=3.1.0",
        "requests>=2.31.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.3.0",
            "pytest-cov>=4.0.0",
            "black>=23.3.0",
            "flake8>=6.0.0",
            "mypy>=1.3.0",
            "isort>=5.12.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "edu-eligibility=pipeline.runner:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
