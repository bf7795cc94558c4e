# setup.py
from setuptools import setup, find_packages

setup(
    name="rotalog",
    version="0.1.0",
    description="Leveled console logger with dated, rotating log files and a typed environment accessor",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "python-dotenv",  # .env file loading for EnvironmentVariables
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'rotalog=rotalog.main:run',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
