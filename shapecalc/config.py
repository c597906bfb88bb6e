"""
Configuration schema for the shape demo.

Defines which shapes the demo builds and how the report is formatted.
The demo entry point always runs with the defaults; from_yaml() exists for
programmatic use and for the sample file under config/.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

import yaml

from shapecalc.constants import PRECISION
from shapecalc.geometry.shapes import Circle, Rectangle, Shape, Triangle
from shapecalc.logging import LogEvent, create_logger

_logger = create_logger("config")

SHAPE_KINDS = {
    "rectangle": (Rectangle, 2),
    "circle": (Circle, 1),
    "triangle": (Triangle, 3),
}


@dataclass(frozen=True)
class ShapeConfig:
    """
    One shape to build.

    Only kind and arity are checked; geometric values are passed through
    unvalidated.
    """

    kind: str  # "rectangle", "circle" or "triangle"
    params: Tuple[float, ...]

    def __post_init__(self):
        """Validate shape configuration."""
        if self.kind not in SHAPE_KINDS:
            raise ValueError(
                f"Invalid shape kind: {self.kind}. "
                f"Must be one of {sorted(SHAPE_KINDS)}"
            )

        _, arity = SHAPE_KINDS[self.kind]
        if len(self.params) != arity:
            raise ValueError(
                f"Shape '{self.kind}' takes exactly {arity} parameters, "
                f"got {len(self.params)}"
            )

    def build(self) -> Shape:
        """Construct the configured shape."""
        shape_cls, _ = SHAPE_KINDS[self.kind]
        return shape_cls(*(float(p) for p in self.params))


def _default_shapes() -> Tuple[ShapeConfig, ...]:
    return (
        ShapeConfig("rectangle", (5.0, 3.0)),
        ShapeConfig("circle", (4.0,)),
        ShapeConfig("triangle", (3.0, 4.0, 5.0)),
        ShapeConfig("rectangle", (2.5, 6.0)),
        ShapeConfig("circle", (2.5,)),
    )


def _default_standalone_shapes() -> Tuple[ShapeConfig, ...]:
    return (
        ShapeConfig("rectangle", (7.0, 2.0)),
        ShapeConfig("circle", (3.0,)),
    )


@dataclass(frozen=True)
class DemoConfig:
    """
    Main configuration for the shape demo.

    Immutable after construction (frozen dataclass).
    """

    title: str = "=== Polymorphism Demo: Shape Calculator ==="
    precision: int = PRECISION

    # Collection that is described and aggregated
    shapes: Tuple[ShapeConfig, ...] = field(default_factory=_default_shapes)

    # Shapes passed one by one to process_shape()
    standalone_shapes: Tuple[ShapeConfig, ...] = field(
        default_factory=_default_standalone_shapes
    )

    log_level: str = "INFO"

    def __post_init__(self):
        """Validate demo configuration."""
        if not 0 <= self.precision <= 10:
            raise ValueError(
                f"precision must be in [0, 10], got {self.precision}"
            )

        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR"}
        if self.log_level not in valid_levels:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(valid_levels)}"
            )

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    def build_shapes(self) -> List[Shape]:
        return [shape.build() for shape in self.shapes]

    def build_standalone_shapes(self) -> List[Shape]:
        return [shape.build() for shape in self.standalone_shapes]

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "DemoConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            title: "=== Shape Calculator ==="
            precision: 2
            log_level: "INFO"

            shapes:
              - kind: "rectangle"
                params: [5.0, 3.0]
              - kind: "circle"
                params: [4.0]

            standalone_shapes:
              - kind: "triangle"
                params: [3.0, 4.0, 5.0]

        Missing keys fall back to the defaults.
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(yaml_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            _logger.error(
                event=LogEvent.CONFIG_ERROR,
                message="Invalid YAML in demo config",
                metadata={'path': str(yaml_path)},
                exc_info=e,
            )
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

        try:
            config = cls._from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            _logger.error(
                event=LogEvent.CONFIG_ERROR,
                message="Invalid demo config",
                metadata={'path': str(yaml_path)},
                exc_info=e,
            )
            raise ValueError(f"Invalid demo config in {yaml_path}: {e!r}") from e

        _logger.info(
            event=LogEvent.CONFIG_LOADED,
            message="Demo config loaded",
            metadata={
                'path': str(yaml_path),
                'shape_count': len(config.shapes),
                'standalone_count': len(config.standalone_shapes),
            },
        )
        return config

    @classmethod
    def _from_dict(cls, data: dict) -> "DemoConfig":
        """
        Build from parsed YAML.

        Raises:
            KeyError: Shape entry without kind or params
            TypeError: Wrong container types (e.g. scalar params)
            ValueError: Values rejected by ShapeConfig / DemoConfig
        """
        if not isinstance(data, dict):
            raise TypeError(f"top level must be a mapping, got {type(data).__name__}")

        kwargs = {}
        for key in ("title", "precision", "log_level"):
            if key in data:
                kwargs[key] = data[key]

        for key in ("shapes", "standalone_shapes"):
            if key in data:
                kwargs[key] = tuple(
                    ShapeConfig(kind=s["kind"], params=tuple(s["params"]))
                    for s in data[key]
                )

        return cls(**kwargs)
