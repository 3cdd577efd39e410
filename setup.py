from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pyColours",
    version="0.0.1",
    author="Mathias Lummefors",
    description="Validation and conversion of hex, rgb and hsl colour strings",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    #
    install_requires=[
        'pyyaml',
    ],
    extras_require={
        'test': ['pytest', 'hypothesis'],
    },
    packages=find_packages(exclude=['tests']),
    include_package_data=True,
    python_requires=">=3.9",
)
