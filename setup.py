from setuptools import setup, find_packages

setup(
    name="wordgame",
    version="0.1.0",
    packages=find_packages(),
    install_requires=[
        "numpy",
        "python-dotenv",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "wordgame=wordgame.runner:main",
        ],
    },
    python_requires=">=3.8",
)
