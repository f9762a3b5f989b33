"""Setup configuration for the modmail embed messages plugin."""

from setuptools import setup, find_packages

setup(
    name="modmail-embeds",
    version="1.0.0",
    description="Configurable embed formatters for modmail Discord bots",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "py-cord>=2.4",
        "PyYAML>=6.0",
        "python-dotenv>=1.0",
        "prompt_toolkit>=3.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
    entry_points={
        "console_scripts": [
            "modmail-embeds=modmail_embeds.main:main",
        ],
    },
)
