# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="localesweep",
    version="0.1.0",
    description="Find and prune unused translation keys in TypeScript/JavaScript locale files",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["localesweep", "localesweep.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        'console_scripts': [
            'find-unused-i18n=localesweep.interface.cli.app:report_main',
            'prune-i18n=localesweep.interface.cli.app:prune_main',
            'localesweep=localesweep.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
