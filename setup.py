from setuptools import setup, find_packages

setup(
    name="driver-resolver",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        "driver_resolver": ["bin/*/*"],
    },
    install_requires=[
        "pydantic>=2.5.0",
        "click>=8.1.7",
        "rich>=13.7.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "driver-resolver=driver_resolver.cli:main",
        ],
    },
    python_requires=">=3.10",
    description="Resolve browser driver executables through the bundled selenium-manager helper",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
