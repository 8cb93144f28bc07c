from setuptools import setup, find_packages

try:
    with open("README.md", "r", encoding="utf-8") as fh:
        long_description = fh.read()
except FileNotFoundError:
    long_description = "Multifractal wavelet model for positive long-range-dependent time series"

setup(
    name="mwm",
    version="0.1.0",
    description="Multifractal wavelet model for positive long-range-dependent time series",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["mwm", "mwm.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "scipy",
        "matplotlib",
        "torch",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
