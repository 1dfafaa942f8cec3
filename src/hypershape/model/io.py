"""
Input/Output Manager (JSON / HDF5)
Handles saving and loading generated geometry and projected frames.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
import json
import logging
import os
from typing import Any, Optional

import h5py
import numpy as np

from hypershape.model.geometry_primitives import Geometry4D
from hypershape.model.pipeline import ProjectedFrame

# Get module logger
logger = logging.getLogger(__name__)

try:
    APP_VERSION = version("hypershape")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"

HDF5_EXTENSIONS = (".h5", ".hdf5")


@dataclass
class GeometryDocument:
    """A geometry together with the shape key and parameters it was generated from."""
    geometry: Geometry4D
    shape: Optional[str] = None
    parameters: dict[str, Any] = field(default_factory=dict)
    version: str = APP_VERSION


def _is_hdf5_path(filepath: str) -> bool:
    return os.path.splitext(filepath)[1].lower() in HDF5_EXTENSIONS


class IOManager:

    @staticmethod
    def save_geometry(
        geometry: Geometry4D,
        filepath: str,
        shape: Optional[str] = None,
        parameters: Optional[dict[str, Any]] = None
    ) -> None:
        logger.info(f"Saving geometry to: {filepath}")
        parameters = parameters or {}
        try:
            if _is_hdf5_path(filepath):
                IOManager._save_geometry_hdf5(geometry, filepath, shape, parameters)
            else:
                document = {
                    "version": APP_VERSION,
                    "shape": shape,
                    "parameters": parameters,
                    **geometry.to_dict(),
                }
                with open(filepath, "w", encoding="utf-8") as f:
                    json.dump(document, f)
            logger.info(f"Geometry saved to: {filepath}")

        except Exception as e:
            logger.exception(f"Failed to save geometry: {e}")
            raise e

    @staticmethod
    def load_geometry(filepath: str) -> GeometryDocument:
        """
        Reads a geometry file written by `save_geometry`.

        Raises:
            ValueError: The file is not a valid geometry document.
            OSError: The file cannot be read.
        """
        logger.info(f"Loading geometry from: {filepath}")
        if _is_hdf5_path(filepath) and not h5py.is_hdf5(filepath):
            msg = f"File '{filepath}' is not a valid HDF5 file."
            logger.error(msg)
            raise ValueError(msg)

        try:
            if _is_hdf5_path(filepath):
                document = IOManager._load_geometry_hdf5(filepath)
            else:
                with open(filepath, "r", encoding="utf-8") as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError(f"Expected a JSON object, got {type(data).__name__}.")
                document = GeometryDocument(
                    geometry=Geometry4D.from_dict(data),
                    shape=data.get("shape"),
                    parameters=data.get("parameters") or {},
                    version=data.get("version", APP_VERSION),
                )
            logger.info(
                f"Loaded '{document.shape}' with {document.geometry.vertex_count} vertices "
                f"(file version {document.version})"
            )
            return document

        except Exception as e:
            logger.exception(f"Failed to load geometry: {e}")
            raise e

    @staticmethod
    def save_frame(frame: ProjectedFrame, filepath: str, shape: Optional[str] = None) -> None:
        """Writes a projected frame as JSON: points, segments, triangles and hex colors."""
        logger.info(f"Saving frame to: {filepath}")
        try:
            document = {"version": APP_VERSION, "shape": shape, **frame.to_dict()}
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(document, f)
        except Exception as e:
            logger.exception(f"Failed to save frame: {e}")
            raise e

    @staticmethod
    def _save_geometry_hdf5(
        geometry: Geometry4D,
        filepath: str,
        shape: Optional[str],
        parameters: dict[str, Any]
    ) -> None:
        with h5py.File(filepath, "w") as f:
            f.attrs["version"] = APP_VERSION
            f.attrs["shape"] = shape or ""
            f.attrs["parameters"] = json.dumps(parameters)

            f.create_dataset("vertices", data=geometry.vertex_array())
            f.create_dataset("edges", data=np.array(geometry.edges, dtype=np.int64).reshape(-1, 2))

            # Faces are ragged; store them flat with their sizes
            sizes = [len(face) for face in geometry.faces]
            flat = [i for face in geometry.faces for i in face]
            f.create_dataset("faces", data=np.array(flat, dtype=np.int64))
            f.create_dataset("face_sizes", data=np.array(sizes, dtype=np.int64))

    @staticmethod
    def _load_geometry_hdf5(filepath: str) -> GeometryDocument:
        with h5py.File(filepath, "r") as f:
            if "vertices" not in f:
                raise ValueError(f"File '{filepath}' has no 'vertices' dataset.")
            vertices = np.asarray(f["vertices"][()])
            edges = np.asarray(f["edges"][()]) if "edges" in f else np.zeros((0, 2), dtype=np.int64)
            flat = np.asarray(f["faces"][()]) if "faces" in f else np.zeros(0, dtype=np.int64)
            sizes = np.asarray(f["face_sizes"][()]) if "face_sizes" in f else np.zeros(0, dtype=np.int64)

            shape = str(f.attrs.get("shape", "")) or None
            parameters = json.loads(str(f.attrs.get("parameters", "{}")))
            file_version = str(f.attrs.get("version", APP_VERSION))

        if int(sizes.sum()) != len(flat):
            raise ValueError("Face sizes do not match the stored face indices.")
        faces = []
        start = 0
        for size in sizes:
            faces.append(flat[start:start + int(size)].tolist())
            start += int(size)

        geometry = Geometry4D.from_dict({
            "vertices": vertices.tolist(),
            "edges": edges.tolist(),
            "faces": faces,
        })
        return GeometryDocument(geometry=geometry, shape=shape, parameters=parameters, version=file_version)
