# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="mdnav",
    version="0.1.0",
    description="Navigation index builder for Markdown documentation sites",
    packages=find_namespace_packages(where="src", include=["mdnav", "mdnav.*"]),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'mdnav=mdnav.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
