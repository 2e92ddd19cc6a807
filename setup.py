from setuptools import find_packages, setup

setup(
    name="receipt-scanner",
    version="0.1.0",
    packages=find_packages(include=["receipt_scanner", "receipt_scanner.*"]),
    install_requires=[
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "python-dateutil>=2.8.2",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
            "pytest-cov",
        ]
    },
    python_requires=">=3.10",
)
