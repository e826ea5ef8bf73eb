"""
setup.py

Установка Peg Solitaire.

Использование:
    pip install -e .            # игра
    pip install -e .[test]      # игра и тесты
"""

from setuptools import setup

setup(
    name="peg_solitaire",
    version="1.0.0",
    description="Peg Solitaire: board engine, terminal game and web UI",
    python_requires=">=3.8",
    packages=["core", "peg_io", "utils", "web"],
    py_modules=["main"],
    package_data={"web": ["templates/*.html"]},
    install_requires=[
        "flask>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "peg-solitaire=main:main",
        ],
    },
    zip_safe=False,
)
