"""
Installation setup for mtgmeta
"""
import configparser
import pathlib

import setuptools

# Establish project directory
project_root: pathlib.Path = pathlib.Path(__file__).resolve().parent

# Read config details to determine version-ing
config_file = project_root.joinpath("mtgmeta/resources/mtgmeta.properties")
config = configparser.ConfigParser()
if config_file.is_file():
    config.read(str(config_file))


def read_requirements(file_name: str) -> list:
    """
    Read a requirements file, if able
    :param file_name: Requirements file in the project root
    :return: Requirement lines
    """
    requirements_file = project_root.joinpath(file_name)
    if not requirements_file.is_file():
        return []

    with requirements_file.open(encoding="utf-8") as file:
        return [
            line.strip()
            for line in file.readlines()
            if line.strip() and not line.startswith("#")
        ]


setuptools.setup(
    name="mtgmeta",
    version=config.get("MTGMETA", "version", fallback="26.0.0+fallback"),
    description="MTG Arena card metadata database builder",
    long_description=(
        project_root.joinpath("README.md").open(encoding="utf-8").read()
        if project_root.joinpath("README.md").is_file()
        else ""
    ),
    long_description_content_type="text/markdown",
    license="MIT",
    python_requires=">=3.8",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python",
        "Topic :: Database",
    ],
    keywords=[
        "Card Games",
        "Database",
        "JSON",
        "MTG",
        "MTGA",
        "Scryfall",
        "Magic: The Gathering",
    ],
    include_package_data=True,
    package_data={"mtgmeta": ["resources/*"]},
    packages=setuptools.find_packages(include=["mtgmeta", "mtgmeta.*"]),
    install_requires=read_requirements("requirements.txt"),
    extras_require={"test": read_requirements("requirements_test.txt")},
    entry_points={"console_scripts": ["mtgmeta=mtgmeta.__main__:main"]},
)
