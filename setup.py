# setup.py
from setuptools import setup, find_packages

setup(
    name="a11y_scout",
    version="0.1.0",
    description="Resumable accessibility scan orchestration A11yScout",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"a11y_scout": ["templates/*.j2"]},
    install_requires=[
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "Jinja2>=3.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    python_requires=">=3.11",
)
