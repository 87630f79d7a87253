from setuptools import find_packages, setup

with open("README.md", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pixelstretch",
    version="0.0.1",
    author="PixelStretch developers",
    description="Directional pixel stretching (melt) effect for RGBA images, accelerated with Taichi",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["pixelstretch", "pixelstretch.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Multimedia :: Graphics",
    ],
    python_requires=">=3.10",
    install_requires=[
        "taichi>=1.4.0",
        "numpy>=1.20.0",
        "matplotlib>=3.3.0",
        "click>=7.0",
        "pillow>=9.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    keywords="image effect pixel stretch gradient taichi",
    entry_points={
        "console_scripts": [
            "pxs-stretch=pixelstretch.cli.stretch_commands:stretch",
        ],
    },
)
