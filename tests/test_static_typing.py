"""Tests for what a type checker sees of the vector types."""
import inspect
from pathlib import Path

import pytest
from mypy import api

import vecmath
from vecmath import Vector, Vector2F, Vector2I, Vector3M, Vector4SB, all_vector_types
from vecmath.conversion import WideTargetMixin, WidenMixin, widen
from vecmath.cross import Cross2Mixin, Cross3Mixin, cross
from vecmath.rounding import FractionalMixin, ceiled, floored, saturated
from vecmath.types import _bases_for


PACKAGE_ROOT = Path(vecmath.__file__).resolve().parent.parent
BUILTIN_TYPES = list(all_vector_types())


def run_mypy(source, tmp_path, monkeypatch):
    # An installed copy is found through py.typed; a source checkout through MYPYPATH
    if "site-packages" not in PACKAGE_ROOT.parts:
        monkeypatch.setenv("MYPYPATH", str(PACKAGE_ROOT))
    stdout, _, status = api.run([
        "--follow-imports=silent",
        "--no-error-summary",
        "--cache-dir", str(tmp_path / "mypy_cache"),
        "-c", source,
    ])
    return stdout, status


class TestDeclaredTypes:
    @pytest.mark.parametrize("cls", [Vector2F, Vector2I, Vector3M, Vector4SB], ids=lambda cls: cls.__name__)
    def test_builtin_types_are_class_statements(self, cls):
        assert f"class {cls.__name__}(" in inspect.getsource(cls)

    @pytest.mark.parametrize("cls", BUILTIN_TYPES, ids=lambda cls: cls.__name__)
    def test_declared_bases_match_capabilities(self, cls):
        assert cls.__bases__ == _bases_for(cls.kind, cls.dimension)

    @pytest.mark.parametrize("func", [
        WidenMixin.widen,
        WideTargetMixin.from_vector,
        Cross2Mixin.cross,
        Cross3Mixin.cross,
        FractionalMixin.length,
        FractionalMixin.distance,
        FractionalMixin.normalized,
        FractionalMixin.lerp,
        Vector.dot,
        Vector.copy,
        Vector.as_dimension,
        Vector.zero,
        widen,
        cross,
        saturated,
        floored,
        ceiled,
    ], ids=lambda func: func.__qualname__)
    def test_public_operations_declare_return_types(self, func):
        assert "return" in func.__annotations__


class TestTypeChecker:
    def test_range_operations_rejected_on_integer_vectors(self, tmp_path, monkeypatch):
        source = "\n".join([
            "from vecmath import Vector2F, Vector2I, Vector3SB, Vector4F",
            "Vector2F(0.5, 2).saturate()",
            "Vector2I(1, 2).saturate()",
            "Vector3SB(1, 2, 3).floor()",
            "Vector2I(1, 2).ceiling()",
            "Vector4F(1, 2, 3, 4).cross(Vector4F(1, 2, 3, 4))",
        ])
        stdout, status = run_mypy(source, tmp_path, monkeypatch)

        assert status == 1
        assert ':3: error: "Vector2I" has no attribute "saturate"' in stdout
        assert ':4: error: "Vector3SB" has no attribute "floor"' in stdout
        assert ':5: error: "Vector2I" has no attribute "ceiling"' in stdout
        assert ':6: error: "Vector4F" has no attribute "cross"' in stdout
        assert ":2:" not in stdout

    def test_supported_operations_type_check(self, tmp_path, monkeypatch):
        source = "\n".join([
            "from vecmath import Vector2B, Vector2F, Vector3D, Vector3M",
            "v = Vector2F(0.5, 2)",
            "v.saturate()",
            "v.floor()",
            "v.normalize()",
            "Vector3M(1, 2, 3).ceiling()",
            "Vector3D(1, 0, 0).cross(Vector3D(0, 1, 0))",
            "Vector2B(7, 3).widen()",
        ])
        stdout, status = run_mypy(source, tmp_path, monkeypatch)

        assert stdout == ""
        assert status == 0
