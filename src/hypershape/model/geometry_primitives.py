"""
Geometric Primitives for 4D Models.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Sequence, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector3D:
    """A point or direction in 3D space, as produced by a projection."""
    x: float
    y: float
    z: float

    def __add__(self, other: Vector3D) -> Vector3D:
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3D) -> Vector3D:
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3D:
        return Vector3D(self.x * scalar, self.y * scalar, self.z * scalar)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def length(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])


@dataclass(frozen=True)
class Vector4D:
    """
    A vector in 4D space. Immutable; every operation returns a new instance.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def add(self, other: Vector4D) -> Vector4D:
        return Vector4D(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def subtract(self, other: Vector4D) -> Vector4D:
        return Vector4D(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def multiply_scalar(self, scalar: float) -> Vector4D:
        return Vector4D(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def length(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2 + self.w**2)

    def normalize(self) -> Vector4D:
        """Unit vector in the same direction; the zero vector maps to itself."""
        length = self.length()
        if length == 0.0:
            return Vector4D(0.0, 0.0, 0.0, 0.0)
        return self.multiply_scalar(1.0 / length)

    def dot(self, other: Vector4D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def distance_squared_to(self, other: Vector4D) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        dw = self.w - other.w
        return dx*dx + dy*dy + dz*dz + dw*dw

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply_scalar
    __rmul__ = multiply_scalar

    def __neg__(self) -> Vector4D:
        return Vector4D(-self.x, -self.y, -self.z, -self.w)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def to_vector3(self) -> Vector3D:
        """Drops the w-coordinate."""
        return Vector3D(self.x, self.y, self.z)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z, self.w])

    @staticmethod
    def from_vector3(v: Vector3D, w: float = 0.0) -> Vector4D:
        return Vector4D(v.x, v.y, v.z, w)

    @staticmethod
    def from_array(values: Sequence[float]) -> Vector4D:
        if len(values) != 4:
            raise ValueError(f"Expected 4 components, got {len(values)}.")
        return Vector4D(float(values[0]), float(values[1]), float(values[2]), float(values[3]))


def _identity_elements() -> List[float]:
    return [
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ]


def multiply(a: Matrix4D, b: Matrix4D) -> Matrix4D:
    """
    Standard matrix product a · b.

    Summation order is fixed (k = 0..3) so identical inputs always give
    bit-identical results.
    """
    ae = a.elements
    be = b.elements
    te = [0.0] * 16
    for i in range(4):
        for j in range(4):
            total = 0.0
            for k in range(4):
                total += ae[i * 4 + k] * be[k * 4 + j]
            te[i * 4 + j] = total
    return Matrix4D(te)


@dataclass
class Matrix4D:
    """
    A linear map on Vector4D stored as 16 floats in row-major order.

    `multiply` and the `rotate_*` helpers post-multiply in place
    (self = self · other) and return self for chaining.
    """
    elements: List[float] = field(default_factory=_identity_elements)

    def __post_init__(self) -> None:
        if len(self.elements) != 16:
            raise ValueError(f"Matrix4D needs 16 elements, got {len(self.elements)}.")
        self.elements = [float(e) for e in self.elements]

    def identity(self) -> Matrix4D:
        self.elements = _identity_elements()
        return self

    def copy(self) -> Matrix4D:
        return Matrix4D(list(self.elements))

    def get(self, row: int, col: int) -> float:
        return self.elements[row * 4 + col]

    def multiply(self, other: Matrix4D) -> Matrix4D:
        self.elements = multiply(self, other).elements
        return self

    def transform_vector(self, v: Vector4D) -> Vector4D:
        te = self.elements
        x, y, z, w = v.x, v.y, v.z, v.w
        return Vector4D(
            te[0] * x + te[1] * y + te[2] * z + te[3] * w,
            te[4] * x + te[5] * y + te[6] * z + te[7] * w,
            te[8] * x + te[9] * y + te[10] * z + te[11] * w,
            te[12] * x + te[13] * y + te[14] * z + te[15] * w,
        )

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array(self.elements).reshape(4, 4)

    def allclose(self, other: Matrix4D, atol: float = 1e-12) -> bool:
        return bool(np.allclose(self.to_array(), other.to_array(), atol=atol))

    @classmethod
    def rotation(cls, axis_a: int, axis_b: int, angle: float) -> Matrix4D:
        """
        Elementary rotation in the plane spanned by two coordinate axes.

        Identity except M[a][a] = M[b][b] = cos, M[a][b] = sin, M[b][a] = -sin.
        """
        if axis_a == axis_b or not (0 <= axis_a < 4 and 0 <= axis_b < 4):
            raise ValueError(f"Invalid rotation plane axes: ({axis_a}, {axis_b})")
        c = math.cos(angle)
        s = math.sin(angle)
        matrix = cls()
        te = matrix.elements
        te[axis_a * 4 + axis_a] = c
        te[axis_a * 4 + axis_b] = s
        te[axis_b * 4 + axis_a] = -s
        te[axis_b * 4 + axis_b] = c
        return matrix

    def rotate_xy(self, angle: float) -> Matrix4D:
        return self.multiply(Matrix4D.rotation(0, 1, angle))

    def rotate_xz(self, angle: float) -> Matrix4D:
        return self.multiply(Matrix4D.rotation(0, 2, angle))

    def rotate_xw(self, angle: float) -> Matrix4D:
        return self.multiply(Matrix4D.rotation(0, 3, angle))

    def rotate_yz(self, angle: float) -> Matrix4D:
        return self.multiply(Matrix4D.rotation(1, 2, angle))

    def rotate_yw(self, angle: float) -> Matrix4D:
        return self.multiply(Matrix4D.rotation(1, 3, angle))

    def rotate_zw(self, angle: float) -> Matrix4D:
        return self.multiply(Matrix4D.rotation(2, 3, angle))


def _as_index(value: Any) -> int:
    """An edge or face index; integral floats such as 3.0 are accepted, 1.7 is not."""
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"Index {value} is not an integer.")
    return int(value)


@dataclass
class Geometry4D:
    """
    Vertex/edge/face combinatorics of one 4D model.

    Faces hold 3 or more vertex indices and may be non-triangular; renderers
    fan-triangulate them.
    """
    vertices: List[Vector4D] = field(default_factory=list)
    edges: List[tuple[int, int]] = field(default_factory=list)
    faces: List[tuple[int, ...]] = field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    def validate(self) -> None:
        """Raises ValueError on out-of-range indices, self-loops or short faces."""
        n = len(self.vertices)
        for i, j in self.edges:
            if not (0 <= i < n and 0 <= j < n):
                raise ValueError(f"Edge ({i}, {j}) out of range for {n} vertices.")
            if i == j:
                raise ValueError(f"Self-loop edge ({i}, {j}).")
        for face in self.faces:
            if len(face) < 3:
                raise ValueError(f"Face {face} has fewer than 3 vertices.")
            for idx in face:
                if not 0 <= idx < n:
                    raise ValueError(f"Face {face} index {idx} out of range for {n} vertices.")

    def vertex_array(self) -> npt.NDArray[np.float64]:
        if not self.vertices:
            return np.zeros((0, 4))
        return np.array([tuple(v) for v in self.vertices], dtype=np.float64)

    def to_dict(self) -> dict:
        return {
            "vertices": [[v.x, v.y, v.z, v.w] for v in self.vertices],
            "edges": [[i, j] for i, j in self.edges],
            "faces": [list(face) for face in self.faces],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Geometry4D:
        try:
            vertices = [Vector4D.from_array(v) for v in data["vertices"]]
            edges = [(_as_index(e[0]), _as_index(e[1])) for e in data.get("edges", [])]
            faces = [tuple(_as_index(i) for i in face) for face in data.get("faces", [])]
        except (KeyError, TypeError, IndexError) as e:
            raise ValueError(f"Malformed geometry data: {e}") from e
        geometry = cls(vertices=vertices, edges=edges, faces=faces)
        geometry.validate()
        return geometry
