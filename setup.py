from setuptools import setup

setup(
    name="eks-manager",
    version="1.0.0",
    license="GPL-3.0",
    description="Interactive tool to create, delete and inspect an EKS cluster "
    "running a sample application backed by EBS storage",
    packages=["cli", "common", "eks_providers"],
    python_requires=">=3.7",
    install_requires=[
        "click>=7.0",
        "PyYAML>=5.1",
        "toml>=0.10.0",
    ],
    extras_require={
        "test": [
            "pytest",
        ]
    },
    platforms="any",
    entry_points={
        "console_scripts": [
            "eks-manager=cli.eks_manager:cli",
        ]
    },
)
