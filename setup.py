from setuptools import setup, find_packages

setup(
    name="pyboxscene",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        'numpy',
        'scipy',
        'open3d',
        'PyYAML',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
