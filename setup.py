#!/usr/bin/env python3

from setuptools import setup, find_packages
import os

directory = os.path.dirname(os.path.realpath(__file__))


if __name__ == "__main__":
    setup(
        name="rigpose",
        packages=find_packages(include=["rigpose", "rigpose.*"]),
        python_requires='>3.10.0',
        version="0.1.0",
        license="MIT",
        description="2D skeletal pose pipeline: forward/inverse kinematics, drivers and keyframe sampling",
        author="rigpose developers",
        long_description=open(os.path.join(
            directory, "README.md"), "r", encoding="utf8").read(),
        long_description_content_type="text/markdown",
        keywords=["animation", "kinematics", "skeleton"],
        classifiers=[],
        install_requires=[
            "numpy",
        ],
        extras_require={
            "test": ["pytest"],
        },
        zip_safe=False,
    )
