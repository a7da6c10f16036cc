from setuptools import find_packages, setup

setup(
    name="vaultlift",
    version="0.1.0",
    description="Move Obsidian vault attachments to an object store and rewrite their links",
    packages=find_packages(include=["vaultlift", "vaultlift.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output schemas
        "typer<0.26",  # CLI (0.26+ vendors its own click; the CLI relies on the shared click context)
        "click>=8.2",  # CLI exceptions and context
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
        "pygments",  # Highlighted terminal output
        "boto3",  # S3 object store
        "pymongo",  # MongoDB object store
        "mongomock",  # In-memory MongoDB object store
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "vaultlift=vaultlift.cli:main",
        ],
    },
)
