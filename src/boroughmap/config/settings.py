"""Configuration settings for Boroughmap."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class AssemblyConfig(BaseModel):
    """Configuration for boundary assembly and simplification."""

    simplify_stride: int = Field(
        default=10,
        ge=1,
        description="Keep every Nth coordinate of the full ring in the simplified ring",
    )


class ClassifierConfig(BaseModel):
    """Configuration for point classification.

    Thresholds are raw angular distances in degrees, not ground distance.
    At New York's latitude 0.001 is roughly 111 m north-south and 84 m east-west.
    """

    medium_threshold: float = Field(
        default=0.001,
        gt=0.0,
        description="Distances below this are MEDIUM confidence (degrees)",
    )
    low_threshold: float = Field(
        default=0.005,
        gt=0.0,
        description="Distances below this are LOW confidence (degrees)",
    )
    use_simplified: bool = Field(
        default=True,
        description="Test containment against simplified rings",
    )

    @model_validator(mode="after")
    def _check_threshold_order(self) -> "ClassifierConfig":
        if self.medium_threshold >= self.low_threshold:
            raise ValueError("medium_threshold must be smaller than low_threshold")
        return self


class ProcessingConfig(BaseModel):
    """Configuration for batch classification."""

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Max worker processes for batch classification (None = sequential)",
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


class BoroughmapSettings(BaseModel):
    """Main application settings."""

    assembly: AssemblyConfig = Field(default_factory=AssemblyConfig)
    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BoroughmapSettings:
    """Get default application settings."""
    return BoroughmapSettings()
