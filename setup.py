"""
Installation setup for scryfall_schema
"""
import configparser
import pathlib

import setuptools

# Establish project directory
project_root: pathlib.Path = pathlib.Path(__file__).resolve().parent

# Read config details to determine version-ing
config_file = project_root.joinpath(
    "scryfall_schema/resources/scryfall_schema.properties"
)
config = configparser.ConfigParser()
if config_file.is_file():
    config.read(str(config_file))

setuptools.setup(
    name="scryfall_schema",
    version=config.get("ScryfallSchema", "version", fallback="1.0.0+fallback"),
    description="Runtime validation schema for Scryfall card documents",
    long_description=project_root.joinpath("README.md").open(encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python",
        "Topic :: Games/Entertainment",
        "Typing :: Typed",
    ],
    keywords=[
        "Card Games",
        "Collectible",
        "JSON",
        "MTG",
        "Pydantic",
        "Scryfall",
        "Trading Cards",
        "Validation",
        "Magic: The Gathering",
    ],
    python_requires=">=3.11",
    include_package_data=True,
    package_data={"scryfall_schema": ["resources/*.properties"]},
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    install_requires=project_root.joinpath("requirements.txt")
    .open(encoding="utf-8")
    .readlines()
    if project_root.joinpath("requirements.txt").is_file()
    else [],  # Use the requirements file, if able
    extras_require={"test": ["pytest>=7.0"]},
)
