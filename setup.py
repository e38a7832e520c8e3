from setuptools import find_packages, setup

setup(
    name="mdreflink",
    version="0.1.0",
    description="Convert inline Markdown links to shortcut reference links with section-aware definitions",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "marko>=2.2.4",  # Markdown parsing and rendering
        "pydantic>=2.0",  # Configuration and output models
        "typer>=0.12",  # CLI
        "click>=8.2",  # CLI runtime (separate stderr capture in tests)
        "rich",  # Terminal formatting
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
    entry_points={
        "console_scripts": [
            "mdreflink=mdreflink.cli:main",
        ],
    },
)
