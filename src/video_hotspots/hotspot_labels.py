import pydantic

from typing import Literal


class Hotspot(pydantic.BaseModel):
    # Accept both the player's camelCase keys and python names.
    model_config = pydantic.ConfigDict(populate_by_name=True)

    id: str
    name: str = ""
    # Milliseconds. None or negative means the bound is not resolved.
    start_time: float | None = pydantic.Field(default=None, alias="startTime")
    end_time: float | None = pydantic.Field(default=None, alias="endTime")


class HotspotsFile(pydantic.BaseModel):
    # Hotspots data format.
    format: Literal["v1"] = "v1"
    hotspots: list[Hotspot]

    @classmethod
    def load(cls, hotspots_file: str) -> "HotspotsFile":
        with open(hotspots_file, "r") as f:
            return cls.model_validate_json(f.read())

    def save(self, hotspots_file: str):
        with open(hotspots_file, "w") as f:
            f.write(self.model_dump_json(indent=2, by_alias=True))
