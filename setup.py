from setuptools import setup, find_packages

setup(
    name="deltag",
    version="1.0.0",
    description="Nearest-neighbor deltaG of polymer DNA sequences",
    long_description="Calculate the Gibbs free energy of DNA duplex formation with SantaLucia nearest-neighbor parameters, corrected for temperature and salt",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
    'click>=8.0',
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "biopython>=1.83",
        ],
    },
    entry_points={
        "console_scripts": [
            "deltag=deltag.cli.main:cli",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    )
