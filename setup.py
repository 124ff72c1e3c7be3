# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

from setuptools import find_packages, setup

about = {}
with open("modelinfo/__init__.py") as f:
    for line in f:
        if line.startswith("__version__"):
            about["version"] = line.split("=", 1)[1].strip().strip('"')
            break

setup(
    name="modelinfo",
    version=about["version"],
    description="Inspect the I/O contract of ONNX models and TensorRT engines",
    author="Wahyu Ardiansyah",
    license="Apache-2.0",
    python_requires=">=3.9",
    packages=find_packages(exclude=["tests*"]),
    install_requires=[
        "onnxruntime>=1.16",
    ],
    extras_require={
        "tensorrt": [
            "tensorrt>=8.6",
        ],
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
            "onnx>=1.14",
        ],
    },
    entry_points={
        "console_scripts": [
            "modelinfo=modelinfo.cli:main",
            "onnxinfo=modelinfo.cli:onnxinfo",
            "trtinfo=modelinfo.cli:trtinfo",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
    ],
)
