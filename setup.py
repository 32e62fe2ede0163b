from setuptools import setup, find_packages

setup(
    name="deploy-summary",
    version="0.1.0",
    description="Summarize Diamond and Facet contract deployments from a transaction log",
    packages=find_packages(include=["deploy_summary", "deploy_summary.*"]),
    install_requires=[
        "web3>=6.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "deploy-summary=deploy_summary.main:main",
        ],
    },
)
