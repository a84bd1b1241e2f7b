# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="runsettings",
    version="0.1.0",
    description="Resolve the adapter section of test run settings files",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["runsettings", "runsettings.*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'runsettings=runsettings.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
