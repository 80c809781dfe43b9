from setuptools import setup, find_packages

setup(
    name="exactnum",
    version="1.0",
    description="Exact arbitrary-precision integer and rational arithmetic",
    long_description=("Exact arbitrary-precision signed integers with transform-based multiplication and "
                      "schoolbook long division, and canonical rational numbers built on top of them"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["exactnum", "exactnum.*"]),
    install_requires=["numpy"],
    extras_require={"test": ["pytest", "sympy"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["arbitrary precision", "big integer", "rational", "exact arithmetic"],
    zip_safe=False,
)
