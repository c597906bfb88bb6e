"""Demo configuration loading and validation."""

import json

import pytest

from shapecalc.config import DemoConfig, ShapeConfig
from shapecalc.geometry.shapes import Circle, Rectangle, Triangle


def test_default_config_reproduces_demo_shapes():
    config = DemoConfig()
    shapes = config.build_shapes()
    assert [s.get_name() for s in shapes] == [
        "Rectangle", "Circle", "Triangle", "Rectangle", "Circle",
    ]
    assert shapes[0] == Rectangle(5.0, 3.0)
    assert shapes[2] == Triangle(3.0, 4.0, 5.0)
    assert config.build_standalone_shapes() == [Rectangle(7.0, 2.0), Circle(3.0)]
    assert config.precision == 2


def test_shape_config_build():
    assert ShapeConfig("circle", (2,)).build() == Circle(2.0)


@pytest.mark.parametrize(
    "kind, params",
    [
        ("hexagon", (1.0,)),
        ("rectangle", (1.0,)),
        ("circle", (1.0, 2.0)),
        ("triangle", (1.0, 2.0)),
    ],
)
def test_shape_config_rejects_bad_kind_or_arity(kind, params):
    with pytest.raises(ValueError):
        ShapeConfig(kind, params)


def test_shape_config_does_not_validate_geometry():
    # Degenerate values are passed through to the shape
    assert ShapeConfig("triangle", (1.0, 2.0, 10.0)).build() == Triangle(1.0, 2.0, 10.0)


def test_demo_config_validation():
    with pytest.raises(ValueError):
        DemoConfig(precision=11)
    with pytest.raises(ValueError):
        DemoConfig(log_level="TRACE")


def test_from_yaml(tmp_path):
    path = tmp_path / "demo.yaml"
    path.write_text(
        "title: Custom\n"
        "precision: 3\n"
        "log_level: WARNING\n"
        "shapes:\n"
        "  - kind: circle\n"
        "    params: [1.5]\n"
        "  - kind: triangle\n"
        "    params: [3, 4, 5]\n"
    )
    config = DemoConfig.from_yaml(path)
    assert config.title == "Custom"
    assert config.precision == 3
    assert config.log_level == "WARNING"
    assert config.build_shapes() == [Circle(1.5), Triangle(3.0, 4.0, 5.0)]
    # Missing keys fall back to defaults
    assert config.standalone_shapes == DemoConfig().standalone_shapes


def test_from_yaml_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert DemoConfig.from_yaml(path) == DemoConfig()


def test_from_yaml_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        DemoConfig.from_yaml(tmp_path / "missing.yaml")


def test_from_yaml_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("shapes: [unclosed\n")
    with pytest.raises(ValueError):
        DemoConfig.from_yaml(path)


@pytest.mark.parametrize(
    "shapes_yaml",
    [
        "  - params: [1.0]\n",               # no kind
        "  - kind: circle\n",                # no params
        "  - kind: circle\n    params: 5\n",  # scalar params
        "  - circle\n",                      # entry is not a mapping
    ],
)
def test_from_yaml_malformed_shape_entry(tmp_path, caplog, shapes_yaml):
    path = tmp_path / "bad_shape.yaml"
    path.write_text("shapes:\n" + shapes_yaml)

    with pytest.raises(ValueError):
        DemoConfig.from_yaml(path)

    events = [json.loads(r.getMessage())['event'] for r in caplog.records if r.name == "shapecalc.config"]
    assert events == ["error.config"]


def test_from_yaml_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- kind: circle\n  params: [1.0]\n")
    with pytest.raises(ValueError):
        DemoConfig.from_yaml(path)


def test_from_yaml_bad_values_raise_value_error(tmp_path):
    path = tmp_path / "bad_values.yaml"
    path.write_text("precision: two\n")
    with pytest.raises(ValueError):
        DemoConfig.from_yaml(path)
