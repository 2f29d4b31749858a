# setup.py
from setuptools import setup, find_packages

setup(
    name="catlog",
    version="1.0.0",
    description="Per-category console/file logger with colors, timestamps and a remote relay",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["catlog", "catlog.*"]),
    python_requires=">=3.8",
    install_requires=[
        "requests",  # Remote sink HTTP relay
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
