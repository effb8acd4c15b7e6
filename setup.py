from setuptools import setup, find_packages

setup(
    name="stacksudoku",
    version="1.0.0",
    description="Sudoku solver using candidate propagation and trial-stack backtracking",
    author="robomotic",
    packages=find_packages(include=["stacksudoku", "stacksudoku.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "matplotlib>=3.5.0",
        "seaborn>=0.13.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "stacksudoku=stacksudoku.cli:main",
        ],
    },
)
