"""Setup script for the project."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="forecast-signal",
    version="1.0.0",
    author="Your Name",
    author_email="your.email@example.com",
    description="Next notable weather change for a wall clock display",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/forecast-signal",
    packages=find_packages(include=["forecast_signal", "forecast_signal.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Scientific/Engineering :: Atmospheric Science",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "test": ["pytest", "httpx"],
    },
    entry_points={
        "console_scripts": [
            "forecast-signal=forecast_signal.presentation.cli.main:main",
        ],
    },
)
