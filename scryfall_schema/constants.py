"""
Scryfall Schema constants that cannot be changed and are hardcoded intentionally
"""

import os
import pathlib

TOP_LEVEL_DIR: pathlib.Path = pathlib.Path(__file__).resolve().parent
RESOURCE_PATH: pathlib.Path = TOP_LEVEL_DIR.joinpath("resources")
CONFIG_PATH: pathlib.Path = (
    pathlib.Path(
        os.environ.get(
            "SCRYFALL_SCHEMA_CONFIG_PATH",
            RESOURCE_PATH.joinpath("scryfall_schema.properties"),
        )
    )
    .expanduser()
    .resolve()
)

CONFIG_SECTION: str = "ScryfallSchema"
VALIDATION_SECTION: str = "Validation"

LOG_FORMAT: str = "[%(levelname)s] %(asctime)s: %(message)s"
