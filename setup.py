from setuptools import setup, find_packages

setup(
    name="dircomp",
    version="1.0.0",
    packages=find_packages(include=["dircomp", "dircomp.*"]),
    description="Compare two directory trees by content hash and report differences.",
    author="Max Carlson",
    author_email="carlsonamax@gmail.com",
    url="https://github.com/MaxCarlson/dircomp",
    python_requires=">=3.10",
    install_requires=[
        "rich",
        "tomli; python_version < '3.11'",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "dircomp=dircomp.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
