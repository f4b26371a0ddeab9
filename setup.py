from setuptools import setup, find_packages

setup(
    name="drawingboard",
    version="0.1.0",
    description="A touch drawing board with a brush toolbar and modal pickers, in PyQt5",
    author="Vous",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "PyQt5>=5.15"
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "gui_scripts": [
            "drawingboard = drawingboard.__main__:main"
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Framework :: PyQt5"
    ],
)
