# setup.py
from setuptools import setup, find_packages

setup(
    name="simple_math",
    version="1.0.0",
    description="SimpleMath – Vector3f / Matrix3f (float32, NumPy)",
    packages=find_packages(include=["simple_math", "simple_math.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
