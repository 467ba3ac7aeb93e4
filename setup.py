# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="setupfs",
    version="0.1.0",
    description="Create directory and file fixtures from an ASCII tree diagram",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["setupfs", "setupfs.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'setupfs=setupfs.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Testing",
    ],
)
