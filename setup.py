# setup.py
from setuptools import setup, find_packages

setup(
    name="budget-tracker",
    version="0.1.0",
    description="An interactive CLI for tracking income, expenses and a budget limit",
    author="Your Name",
    author_email="you@example.com",
    url="https://github.com/yourusername/budget-tracker",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "click>=7.0",
        "pyyaml>=5.3",
        "python-dotenv>=0.15",
    ],
    extras_require={
        "test": ["pytest>=6.0"],
    },
    entry_points={
        "console_scripts": [
            "budget-tracker=budget_tracker.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
