# setup.py
from setuptools import setup, find_packages

setup(
    name="lispy",
    version="0.1.0",
    description="A tree-walking evaluator for S-expressions and Q-expressions",
    packages=find_packages(include=["lispy", "lispy.*"]),
    package_data={"lispy": ["prelude/*.lspy"]},
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lispy=lispy.cli:main"],
    },
    zip_safe=False,
)
