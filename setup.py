"""
Setup script for kumon-qa.

Kumon QA generates Kumon-style math worksheet problems and checks them
against the curriculum they were generated for:

1. Generators - one synthesizer per worksheet archetype, Pre-K to electives
2. Validators - math, visual, curriculum, consistency and readability checks
3. Fix Engine - applies suggested source fixes with backup and rollback

The 'kumon-qa' command runs the whole pipeline.
"""

from setuptools import find_packages, setup

setup(
    name="kumon-qa",
    version="1.0.0",
    description="Procedural Kumon-style problem generation with an automated QA pipeline",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(include=["kumon_qa", "kumon_qa.*"]),
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "kumon-qa=kumon_qa.cli.qa_cli:run",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Software Development :: Quality Assurance",
    ],
    keywords="kumon math worksheets problem-generation qa education",
)
