# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="sizescout",
    version="1.0.0",
    description="Find the files and directories that take up the most space in a directory tree",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["sizescout", "sizescout.*"]),
    install_requires=[
        "pathspec>=0.11,<1.0",  # gitignore-style pattern matching for --ignore
    ],
    extras_require={
        "test": [
            "pytest>=7",
        ],
    },
    entry_points={
        'console_scripts': [
            'sizescout=sizescout.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
