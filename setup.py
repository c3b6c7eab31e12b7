from setuptools import find_packages, setup

setup(
    name="cliparser",
    version="0.1.0",
    description="Strict classifier for command-line argument tokens",
    python_requires=">=3.8",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["cliparser=cliparser.cli:main"]},
)
