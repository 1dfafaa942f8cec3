"""
Shape generators. Importing this package registers every generator under
its key, so `generate("tesseract")` works without further imports.
"""
from hypershape.shapes import lattices, manifolds, polytopes, prisms, spherical, surfaces  # noqa: F401
from hypershape.shapes.base import Shape4D
from hypershape.shapes.registry import (
    DEFAULT_PARAMETERS,
    create_default,
    create_shape,
    generate,
    get_shape_class,
    list_keys,
    register_shape,
)

__all__ = [
    "DEFAULT_PARAMETERS",
    "Shape4D",
    "create_default",
    "create_shape",
    "generate",
    "get_shape_class",
    "list_keys",
    "register_shape",
]
