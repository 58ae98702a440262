import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="stepsearch",
    version="0.1.0",
    description="Incremental, resumable breadth-first shortest path search.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["stepsearch", "stepsearch.*"]),
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=[
        "frozendict>=2.3.8",
    ],
    extras_require={
        "test": [
            "pytest",
            "parameterized",
            "numpy",
        ],
    },
)
