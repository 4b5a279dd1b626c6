import os

from setuptools import setup, find_namespace_packages

HERE = os.path.dirname(os.path.abspath(__file__))

# Read requirements.txt
with open(os.path.join(HERE, 'requirements.txt')) as f:
    requirements = [
        line.strip()
        for line in f
        if line.strip() and not line.startswith('#')
    ]

setup(
    name="laliga_tracker",
    version="0.1.0",
    packages=find_namespace_packages(where="src", include=["laliga_tracker*"]),
    package_dir={"": "src"},
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-mock>=3.10",
            "httpx>=0.24",
        ],
    },
    entry_points={
        "console_scripts": [
            "laliga-tracker=laliga_tracker.main:run",
            "laliga-seed=laliga_tracker.infra.executables.seed_matches:main",
        ],
    },
    python_requires=">=3.9",
)
