# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="tokenscanner",
    version="1.0.0",
    description="Whitespace token scanner for competitive-programming style input",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["tokenscanner", "tokenscanner.*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'tokenscanner=tokenscanner.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
