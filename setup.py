from setuptools import setup, find_packages

setup(
    name="pranalyzer",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        'numpy',
        'matplotlib',
        'PyQt5',
        'pyqtgraph'
    ],
    extras_require={
        'test': ['pytest'],
    },
)
