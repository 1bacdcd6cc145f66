from setuptools import setup, find_packages

setup(
    name="attrstyle",
    version="0.1.0",
    description="A fluent builder for rich-text attribute mappings",
    packages=find_packages(include=["attrstyle", "attrstyle.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.11",
)
