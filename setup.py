from setuptools import setup

setup(
    name="Thesaurus",
    version="0.1",
    packages=["thesaurus"],
    license="",
    author="Sergey Vartanov",
    author_email="me@enzet.ru",
    description="Flat-file synonym dictionary",
    python_requires=">=3.12",
    entry_points={
        "console_scripts": ["thesaurus=thesaurus.__main__:main"],
    },
    install_requires=[
        "coloredlogs",
        "pydantic~=2.0",
        "readchar",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
