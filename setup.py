from setuptools import find_packages, setup

with open("requirements.txt") as f:
    requirements = f.read().splitlines()

setup(
    name="txtchapters",
    description="Split plain-text novels into chapters and refine the result interactively",
    license="GPL 3.0",
    version="1.0.0",
    packages=find_packages(include=["txtchapters", "txtchapters.*"]),
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        'test': ['pytest>=7.0', 'pytest-asyncio>=0.21'],
    },
    entry_points={
        'console_scripts': [
            'txtchapters = txtchapters:main',
            'txtchapters-tui = txtchapters:tui_main',
        ]
    },
)
