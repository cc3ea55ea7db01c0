"""Setup file for the vecprobe package."""

from setuptools import setup, find_packages

setup(
    name="vecprobe",
    version="0.1.0",
    description="Nearest-neighbor and analogy queries over pretrained word vectors, "
                "with a binary cache of the parsed table.",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.21",
        "scipy>=1.7",
        "gensim>=4.0",
        "tqdm>=4.60",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "vecprobe=vecprobe.cli:main",
        ],
    },
)
