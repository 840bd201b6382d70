from setuptools import setup, find_packages

# Common dependencies
common_dependencies = [
    "python-dotenv",
]

setup(
    name="cursorscan",
    version="0.1.0",
    packages=find_packages(include=["cursorscan", "cursorscan.*"]),
    include_package_data=True,
    install_requires=common_dependencies,
    extras_require={
        "dev": [
            "pytest",
        ],
    },
    python_requires=">=3.8",
    description="A minimal character-cursor scanner for hand-written text parsing",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
