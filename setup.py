from setuptools import setup, find_packages

setup(
    name="fsutils",
    version="1.0.0",
    description="Filesystem helper library with boolean-style results and a small CLI",
    author="Ashwin Nair",
    packages=find_packages(include=["fsutils", "fsutils.*"]),
    python_requires=">=3.9",
    install_requires=[
        "rich",
        "PyYAML",
        "tqdm",
        "argcomplete",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "fsutils = fsutils.cli:main"
        ],
    },
)
