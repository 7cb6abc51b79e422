"""Configuration settings for Vectrace."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class TurnPolicy(str, Enum):
    """How Potrace resolves ambiguous turns while decomposing paths."""

    BLACK = "black"
    WHITE = "white"
    LEFT = "left"
    RIGHT = "right"
    MINORITY = "minority"
    MAJORITY = "majority"


class TraceSettings(BaseModel):
    """Per-trace configuration supplied by the caller.

    The engine never mutates a settings instance. Field aliases accept the camelCase
    names used by the editor's trace settings panel, so both
    ``TraceSettings(turd_size=1)`` and ``TraceSettings(turdSize=1)`` work.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    threshold: int = Field(
        default=128,
        ge=0,
        le=255,
        description="Luminance cutoff separating foreground from background",
    )
    turd_size: int = Field(
        default=2,
        ge=0,
        alias="turdSize",
        description="Noise floor: walks shorter than turd_size * 3 points are dropped",
    )
    alpha_max: float = Field(
        default=1.0,
        ge=0.0,
        le=1.34,
        alias="alphaMax",
        description="Potrace corner threshold (0 = polygons, 1.34 = no corners)",
    )
    opt_curve: bool = Field(
        default=True,
        alias="optCurve",
        description="Let Potrace join adjacent Bezier segments",
    )
    opt_tolerance: float = Field(
        default=0.2,
        ge=0.0,
        alias="optTolerance",
        description="Curve optimization tolerance, also drives path simplification",
    )
    turn_policy: TurnPolicy = Field(
        default=TurnPolicy.MINORITY,
        alias="turnPolicy",
        description="Potrace turn policy",
    )
    black_on_white: bool = Field(
        default=True,
        alias="blackOnWhite",
        description="Trace dark ink on a light background (False traces light on dark)",
    )
    color: str = Field(
        default="#00d4ff",
        description="Stroke color written to the output path",
    )
    fill_color: str = Field(
        default="transparent",
        alias="fillColor",
        description="Fill color written to the output path",
    )
    stroke_width: float = Field(
        default=1.0,
        ge=0.0,
        alias="strokeWidth",
        description="Stroke width written to the output path",
    )


class SchedulerConfig(BaseModel):
    """Cooperative yielding intervals."""

    binarize_batch_rows: int = Field(
        default=50,
        ge=1,
        le=1000,
        description="Rows binarized between yield points",
    )
    scan_yield_rows: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Rows scanned for contours between yield points",
    )


class EngineConfig(BaseModel):
    """Engine selection."""

    use_primary: bool = Field(
        default=True,
        description="Try Potrace before the contour tracer",
    )
    potrace_executable: str = Field(
        default="potrace",
        description="Potrace command name or path, resolved on PATH",
    )
    potrace_timeout_s: float = Field(
        default=60.0,
        gt=0.0,
        description="Seconds to wait for Potrace before giving up",
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


class VectraceSettings(BaseModel):
    """Main application settings."""

    trace: TraceSettings = Field(default_factory=TraceSettings)
    scheduler: SchedulerConfig = Field(default_factory=SchedulerConfig)
    engine: EngineConfig = Field(default_factory=EngineConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> VectraceSettings:
    """Get default application settings."""
    return VectraceSettings()
