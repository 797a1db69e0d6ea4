from setuptools import setup, find_packages

setup(
    name="advance",
    version="1.0.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "advance=advance.__main__:main",
        ],
    },
    author="Advance Engine Team",
    description="Rules engine and lookahead move search for the Advance board game",
)
