# setup.py

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name='tablemap',
    version='0.1.0',
    description='A sparse columnar table with a semicolon separated text format',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("benchmarks", "benchmarks.*", "examples", "examples.*")),
    install_requires=[
        'numpy',
        'pandas',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'tablemap-ssv=tablemap.tools.ssv_cli:main',
        ],
    },
    zip_safe=False,
    python_requires='>=3.8',
)
