from setuptools import setup, find_packages

setup(
    name="schedsim",
    version="0.1.0",
    description="Discrete Event Simulator of a Round-Robin OS Scheduler",
    author="SchedSim Team",
    packages=find_packages(include=["schedsim", "schedsim.*", "configs"]),
    package_data={"configs": ["*.yaml"]},
    install_requires=[
        "numpy>=1.24.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "schedsim=schedsim.main:main",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
