"""
Options for a single cave generation run.

Values are validated on construction; the generation pipeline assumes a
well-formed ``MapConfig`` and never re-checks ranges itself.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class MapConfig(BaseModel):
    """Cave generation options."""

    model_config = ConfigDict(frozen=True)

    # Grid dimensions
    width: int = Field(default=64, gt=0, description="Grid width in cells")
    height: int = Field(default=36, gt=0, description="Grid height in cells")

    # Seeding
    seed: Optional[Union[str, int]] = Field(
        default=None, description="Seed for reproducible generation; numbers hash like their string form"
    )
    use_random_seed: bool = Field(
        default=False, description="Derive the seed from the system clock on every run"
    )

    # Noise and smoothing
    random_fill_percent: int = Field(
        default=45, ge=0, le=100, description="Chance (percent) an interior cell starts blocked"
    )
    smooth_level: int = Field(default=4, ge=0, le=20, description="Number of smoothing passes")

    # Region filtering
    wall_threshold_size: int = Field(
        default=50, ge=0, description="Blocked regions smaller than this are cleared"
    )
    room_threshold_size: int = Field(
        default=50, ge=0, description="Passable regions smaller than this are filled"
    )

    # Passages and export
    passage_width: int = Field(default=4, ge=0, description="Carving radius of passages")
    border_size: int = Field(default=1, ge=0, description="Blocked frame added on export")
