from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class LopSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LOP_")

    # separates a namespace from its children in class identifiers, so
    # "Shapes.Point" is a child of "Shapes"
    namespace_separator: str = "."

    # mode used by generated accessors that don't pass an explicit `is`
    default_accessor_mode: Literal["rw", "ro"] = "rw"
