"""Configuration settings for StrokeFont."""

from pathlib import Path

from pydantic import BaseModel, Field, ValidationInfo, field_validator

DEFAULT_FAMILY_NAME = "MyCustomFont"
DEFAULT_STYLE_NAME = "Regular"
DEFAULT_AUTHOR = "Font Maker"
DEFAULT_VERSION = "1.000"


class CanvasConfig(BaseModel):
    """Geometry of the drawing surface the strokes were captured on."""

    width: float = Field(default=600.0, gt=0, description="Drawing surface width")
    height: float = Field(default=600.0, gt=0, description="Drawing surface height")
    baseline_ratio: float = Field(
        default=0.75,
        ge=0.0,
        le=1.0,
        description="Baseline position as a fraction of the surface height",
    )
    left_padding: float = Field(
        default=5.0,
        ge=0.0,
        description="Design units between the origin and the leftmost ink",
    )

    @property
    def baseline_y(self) -> float:
        """Baseline in drawing-surface coordinates."""
        return self.height * self.baseline_ratio


class AutoScaleConfig(BaseModel):
    """Target sizes used when auto-scaling characters by class.

    All values are in font design units at 1000 units per em.
    """

    tall_height: float = Field(default=700.0, gt=0, description="Tall class target height")
    short_height: float = Field(default=500.0, gt=0, description="Short class target height")
    descender_height: float = Field(
        default=750.0, gt=0, description="Descender class target height"
    )
    default_height: float = Field(
        default=600.0, gt=0, description="Target height for unclassified characters"
    )
    descender_top: float = Field(
        default=500.0,
        description="Design y the top of a descender character is anchored to",
    )
    min_extent: float = Field(
        default=10.0,
        gt=0,
        description="Floor applied to the measured width and height",
    )
    max_width: float = Field(
        default=800.0,
        gt=0,
        description="Scaled width never exceeds this value",
    )
    default_scale_cap: float = Field(
        default=1.5,
        gt=0,
        description="Unclassified characters scale at most this factor times manual scale",
    )


class StrokeConfig(BaseModel):
    """Configuration for ribbon construction."""

    normal_width: float = Field(
        default=8.0, gt=0, description="Width of normal strokes that carry none"
    )
    calligraphy_width: float = Field(
        default=15.0, gt=0, description="Width of calligraphy strokes that carry none"
    )
    base_weight: float = Field(
        default=1.6,
        gt=0,
        description="Visual weight factor applied on top of the nominal width",
    )
    nib_angle: float = Field(
        default=-45.0,
        description="Calligraphy nib angle in degrees",
    )
    min_direction_length: float = Field(
        default=0.001,
        gt=0,
        description="Points whose direction vector is shorter than this are skipped",
    )
    bold_multiplier: float = Field(
        default=2.5,
        gt=0,
        description="Weight multiplier used for the bold variant",
    )


class FontConfig(BaseModel):
    """Font-level metrics and mandatory glyphs."""

    units_per_em: int = Field(default=1000, description="Design units per em")
    ascender: int = Field(default=800, description="Typographic ascender")
    descender: int = Field(default=-200, description="Typographic descender")
    notdef_box: tuple[int, int, int, int] = Field(
        default=(100, 0, 500, 700),
        description="The .notdef rectangle as (x_min, y_min, x_max, y_max)",
    )
    notdef_advance: int = Field(default=600, gt=0, description=".notdef advance width")
    space_advance: int = Field(default=250, gt=0, description="space advance width")
    default_advance: int = Field(
        default=600,
        gt=0,
        description="Advance width used when none can be measured",
    )
    side_padding: int = Field(
        default=10,
        ge=0,
        description="Added to the ink width to form the advance width",
    )
    cu2qu_max_error: float = Field(
        default=1.0,
        gt=0,
        description="Max error when converting cubic curves to quadratic",
    )
    build_timestamp: int = Field(
        default=0,
        ge=0,
        description="Unix time written to the head table (fixed for reproducible output)",
    )


class ProcessingConfig(BaseModel):
    """Configuration for the synthesis run."""

    max_workers: int | None = Field(
        default=1,
        description="Worker processes across characters (1 = in-process, None = auto)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class FontMetadata(BaseModel):
    """Caller-supplied naming and generation options for one font."""

    family_name: str = Field(default=DEFAULT_FAMILY_NAME, description="Font family name")
    style_name: str = Field(default=DEFAULT_STYLE_NAME, description="Font style name")
    author: str = Field(default=DEFAULT_AUTHOR, description="Designer name")
    version: str = Field(default=DEFAULT_VERSION, description="Font version string")
    weight_multiplier: float = Field(
        default=1.0,
        gt=0,
        description="Multiplier on every stroke width (bold simulation)",
    )
    auto_scale: bool = Field(
        default=False,
        description="Scale and align every character by its class",
    )

    @field_validator("family_name", "style_name", "author", "version", mode="before")
    @classmethod
    def _blank_to_default(cls, value: object, info: ValidationInfo) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return cls.model_fields[info.field_name].default
        return value

    def bold(self, multiplier: float = 2.5) -> "FontMetadata":
        """Return the metadata of the bold variant of this font."""
        return self.model_copy(update={"style_name": "Bold", "weight_multiplier": multiplier})


class StrokeFontSettings(BaseModel):
    """Main application settings."""

    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    auto_scale: AutoScaleConfig = Field(default_factory=AutoScaleConfig)
    stroke: StrokeConfig = Field(default_factory=StrokeConfig)
    font: FontConfig = Field(default_factory=FontConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
