"""Configuration management for the segmentation pipeline."""

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator


class DictionaryConfig(BaseModel):
    """Configuration for the word list."""

    path: Optional[Path] = Field(
        default=None,
        description="Word list, one word per line (default: packaged list)",
    )
    fallback_to_default: bool = Field(
        default=True,
        description="Use the built-in words if the word list cannot be read",
    )


class SegmentationConfig(BaseModel):
    """Configuration for segmentation engine."""

    engine: Literal["newmm", "tcc"] = "newmm"
    keep_whitespace: bool = True
    max_tokens: Optional[int] = Field(
        default=None, ge=1, description="Fail lines that produce more tokens than this"
    )
    workers: int = Field(default=1, ge=1)


class InputConfig(BaseModel):
    """How records are read from JSONL input."""

    text_fields: list[str] = Field(default_factory=lambda: ["text", "content"])
    id_field: str = "file_id"

    @field_validator("text_fields")
    @classmethod
    def require_text_field(cls, v: list[str]) -> list[str]:
        """Ensure at least one text field is named."""
        if not v:
            raise ValueError("At least one text field is required")
        return v


class OutputConfig(BaseModel):
    """Configuration for output options."""

    output_dir: Path = Path("data/segmented_output")
    save_token_rows: bool = True  # tokens.csv, one row per token
    save_line_rows: bool = True  # lines.csv, one row per input line
    token_separator: str = "|"


class Config(BaseModel):
    """Main configuration for the segmentation pipeline."""

    input_file: Optional[Path] = None
    input: InputConfig = Field(default_factory=InputConfig)
    dictionary: DictionaryConfig = Field(default_factory=DictionaryConfig)
    segmentation: SegmentationConfig = Field(default_factory=SegmentationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("input_file", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)


def load_config(config_path: Optional[str | Path] = None) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, looks for config.yaml in current directory.

    Returns:
        Config object

    Raises:
        FileNotFoundError: If config file not found
    """
    if config_path is None:
        config_path = Path("config.yaml")
    return Config.from_yaml(config_path)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
