from setuptools import find_packages, setup

setup(
    name="dotlink",
    version="0.1.0",
    description="dotlink - provision dotfiles with symlinks and GNU stow",
    packages=find_packages(include=["dotlink", "dotlink.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI
        "rich",  # Terminal formatting
        "pydantic>=2",  # Configuration and output schemas
        "PyYAML",  # YAML command output
        "pygments",  # Output highlighting on terminals
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "dotlink=dotlink.cli:main",
        ],
    },
)
