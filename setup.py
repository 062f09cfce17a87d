from setuptools import setup, find_packages


setup(
    name="seedkit",
    version="0.1",
    packages=find_packages(include=["seedkit", "seedkit.*"]),
    description="Deterministic and secure random generators side by side: reproducible seeding versus OS entropy.",
    python_requires=">=3.10",
    install_requires=[
        "pycryptodomex>=3.23.0",
        "argon2-cffi>=23.1.0",
    ],
    entry_points={
        "console_scripts": [
            "seedkit=seedkit.cli:main",
        ]
    },
)
