from setuptools import setup, find_packages

setup(
    name="idforge",
    version="1.0.0",
    description="Short, collision-resistant identifiers from configurable alphabets",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "flask>=3.0.0",
        "tomli>=2.0.1; python_version < '3.11'",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.3",
            "hypothesis>=6.92.1",
        ],
    },
)
