from __future__ import annotations

from typing import Any

from hypershape.model.geometry_primitives import Geometry4D
from hypershape.shapes.base import Shape4D

_REGISTRY: dict[str, type[Shape4D]] = {}

# Parameters each key is built with when the caller supplies none.
DEFAULT_PARAMETERS: dict[str, dict[str, Any]] = {
    "tesseract": {"size": 2.0},
    "hypersphere": {"radius": 1.0, "resolution": 24},
    "3-sphere": {"radius": 1.5, "resolution": 24},
    "calabi-yau": {"size": 1.5, "resolution": 20},
    "hopf-fibration": {"radius": 2.0, "resolution": 20},
    "clifford-torus": {"radius": 1.5, "resolution": 24},
    "hyperplane": {"size": 4.0, "resolution": 20},
    "klein-bottle": {"radius": 1.0, "resolution": 24},
    "pentachoron": {"size": 2.0},
    "16-cell": {"size": 2.0},
    "buckyball4d": {"radius": 1.0},
    "hypertorus": {"major_radius": 1.2, "minor_radius": 0.5, "resolution_1": 32, "resolution_2": 32},
    "24-cell": {"size": 2.0},
    "24-cell-dual": {"size": 2.0},
    "120-cell": {"size": 2.0},
    "600-cell": {"size": 2.0},
    "duoprism": {"m": 3, "n": 4, "size": 2.0},
    "polychoron-prism": {"base": "cube", "size": 2.0, "height": 1.0},
    "polychoron-antiprism": {"base": "tetrahedron", "size": 2.0, "height": 1.0},
    "e4-hyperdiamond": {"size": 1.5, "lattice_range": 2},
    "f4-root-polytope": {"size": 2.0},
    "e8-lattice": {"size": 0.5, "lattice_range": 2},
}


def register_shape(cls: type[Shape4D]) -> type[Shape4D]:
    """Class decorator to register a shape generator by its KEY."""
    key = getattr(cls, "KEY", None)
    if not key:
        raise ValueError(f"{cls.__name__} must define KEY")
    _REGISTRY[key] = cls
    return cls


def get_shape_class(key: str) -> type[Shape4D]:
    cls = _REGISTRY.get(key)
    if not cls:
        raise KeyError(f"No shape registered for key '{key}'")
    return cls


def create_shape(key: str, **params: Any) -> Shape4D:
    """
    Build a generator, filling unspecified parameters from DEFAULT_PARAMETERS.

    Raises:
        KeyError: Unknown shape key.
        TypeError: Parameter not accepted by the generator.
        ValueError: Parameter value rejected by the generator.
    """
    cls = get_shape_class(key)
    merged = {**DEFAULT_PARAMETERS.get(key, {}), **params}
    return cls(**merged)


def create_default(key: str) -> Shape4D:
    return create_shape(key)


def generate(key: str, **params: Any) -> Geometry4D:
    """Single dispatch entry point returning the common geometry contract."""
    return create_shape(key, **params).to_geometry()


def list_keys() -> list[str]:
    return list(_REGISTRY.keys())
