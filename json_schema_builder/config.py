"""
Configuration for the schema factory, the validation engine and the CLI output.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields


class _DictConfig:
    """from_dict/to_dict shared by the configuration dataclasses."""

    @classmethod
    def from_dict(cls, d: dict):
        """Create a config from a dictionary, ignoring unknown keys."""
        config = cls()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class BuilderConfig(_DictConfig):
    """Configuration options for SchemaFactory."""

    # Default of the `additional` argument of shape()
    additional_properties: bool = False

    # When set, every schema created by the factory carries this `$schema`
    schema_uri: str | None = None


@dataclass
class EngineConfig(_DictConfig):
    """Configuration options for SchemaValidator."""

    # Check "format" keywords with jsonschema's FormatChecker
    format_checking: bool = True


@dataclass
class OutputConfig(_DictConfig):
    """Configuration options for documents written by the CLI."""

    # Indentation of the JSON output (None = single line)
    indent: int | None = 2

    # Put a `$comment` with the generating command line at the top
    add_generation_comment: bool = False

    # Sort keys in the JSON output
    sort_keys: bool = False


@dataclass
class Config:
    """CLI configuration sections, as read from a JSON config file."""

    engine: EngineConfig = field(default_factory=EngineConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> Config:
        """Create a config from a dictionary with optional engine/output sections."""
        return Config(
            engine=EngineConfig.from_dict(d.get("engine", {})),
            output=OutputConfig.from_dict(d.get("output", {})),
        )

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "engine": self.engine.to_dict(),
            "output": self.output.to_dict(),
        }
