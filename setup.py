from setuptools import setup, find_packages

setup(
    name="scatterseed",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={"scatter_api": ["constants.json"]},
    install_requires=[
        "numpy>=1.22",
        "python-dotenv>=1.1.1",
    ],
    extras_require={
        "dev": ["pytest"],  # for testing
    },
)
