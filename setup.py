from __future__ import annotations

from setuptools import find_packages, setup


setup(
    name="pyrational",
    version="0.1.0",
    description="Limited order rational interpolation with pole detection (Bulirsch & Stoer)",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=["numpy"],
    # numba only accelerates the tableau kernel; the numpy backend needs nothing extra.
    extras_require={
        "numba": ["numba"],
        "test": ["pytest"],
    },
)
