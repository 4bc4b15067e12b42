from setuptools import setup, find_packages

setup(
    name="rotmatrix",
    version="1.0",
    description="Flat-storage matrix container with rotated views",
    long_description=("Generic two-dimensional container that keeps its elements in a single flat list and "
                      "resolves coordinates through rotation-dependent lookup algorithms instead of moving data"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.7",
    packages=find_packages(include=["rotmatrix", "rotmatrix.*"]),
    install_requires=["numpy", "scipy", "matplotlib"],
    extras_require={"test": ["pytest", "pytest-timeout"]},
    classifiers=[
        "Intended Audience :: Developers", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["matrix", "rotation", "transposition", "view"],
    zip_safe=False,
)
