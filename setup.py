import setuptools

with open("README.md", "rt") as f:
    long_description = f.read()

setuptools.setup(
    name="notate",
    version="0.1.0",
    author="Frey Waid",
    author_email="logophage1@gmail.com",
    description="Notation and glob addressing for nested dicts and lists",
    license="MIT license",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/freywaid/notate",
    packages=setuptools.find_packages(exclude=['tests']),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8',
    install_requires=['pyparsing>=3',],
    extras_require={'test': ['pytest',]},
    entry_points={
        'console_scripts': ['notq=notate.cli.main:main'],
    },
)
