from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="design-principles",
    version="1.0.0",
    author="Seppo Pakonen",
    author_email="seppo.pakonen@gmail.com",
    description="Principles - runnable correct/violation examples of software design principles",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["principles", "principles.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "principles=principles:main",
        ],
    },
    install_requires=[
        "toml>=0.10.0",
        "pyfiglet>=0.8.0",
        "textual>=0.40.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
