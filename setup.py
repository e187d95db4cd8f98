from setuptools import find_packages, setup

setup(
    name="badlinks",
    version="0.1.0",
    description="Find bad local links in markdown documents",
    packages=find_packages(include=["badlinks", "badlinks.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI (0.26+ vendors its own click; code catches click exceptions)
        "click",  # CLI context and exceptions (typer's core)
        "pydantic>=2",  # Config and output schemas
        "rich",  # Terminal formatting
        "jinja2",  # Template rendering for CLI outputs
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting
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
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "badlinks=badlinks.cli:main",
        ],
    },
)
