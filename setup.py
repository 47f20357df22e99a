# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="glslbatch",
    version="0.1.0",
    description="Recursively collect .vert/.frag shaders and compile them with a single glslc -c call",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["glslbatch", "glslbatch.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'glslbatch=glslbatch.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
