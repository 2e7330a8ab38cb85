"""Setup script for fossilvc."""

from pathlib import Path

from setuptools import find_packages, setup

readme = Path(__file__).parent / "README.md"

setup(
    name="fossilvc",
    version="0.1.0",
    description="Fossil SCM integration layer: file state, history navigation and checkout info",
    long_description=readme.read_text() if readme.exists() else "",
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    packages=find_packages(include=["fossilvc", "fossilvc.*"]),
    install_requires=[
        "click>=8.1",
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "dependency-injector>=4.41",
        'tomli>=2.0; python_version < "3.11"',
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "fossilvc=fossilvc.__main__:main",
        ],
    },
)
