from setuptools import setup, find_packages

version = {}
with open("ripsaw/version.py") as fp:
    exec(fp.read(), version)

setup(
    name="ripsaw",
    version=version["__version__"],
    description="Segment genomes into regions of homogeneous dinucleotide "
                "composition.",
    long_description=open("README.rst").read(),
    license="MIT",
    keywords="DNA genome segmentation dinucleotide entropy RIP",
    packages=find_packages(exclude=["docs", "tests", "examples"]),
    install_requires=[
        "numpy",
        "Biopython",
        "proglog",
    ],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["ripsaw = ripsaw.cli:main"]},
)
