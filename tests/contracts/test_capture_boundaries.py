"""Architectural contracts for where exceptions may be intercepted.

Only the two capture constructors may turn a raised exception into an
``Err``. Everything else must let exceptions from caller-supplied functions
propagate, so this suite inspects source rather than behavior.
"""

import ast
import inspect

import pytest

import resulta
from resulta import combinators, core, extract

CAPTURE_POINTS = {"of_throwable", "of_promise"}


def _try_blocks(fn) -> list[ast.AST]:
    tree = ast.parse(inspect.getsource(fn))
    return [node for node in ast.walk(tree) if isinstance(node, (ast.Try, ast.TryStar))]


def _public_functions(module) -> list:
    return [
        obj
        for name, obj in vars(module).items()
        if inspect.isfunction(obj)
        and not name.startswith("_")
        and obj.__module__ == module.__name__
    ]


class TestCaptureBoundaries:
    @pytest.mark.unit
    @pytest.mark.contract
    @pytest.mark.parametrize("module", [combinators, extract])
    def test_combinators_and_extractors_never_catch(self, module):
        offenders = [fn.__name__ for fn in _public_functions(module) if _try_blocks(fn)]
        assert offenders == [], f"{module.__name__} intercepts exceptions in {offenders}"

    @pytest.mark.unit
    @pytest.mark.contract
    def test_only_capture_points_catch_in_core_module(self):
        catching = {fn.__name__ for fn in _public_functions(core) if _try_blocks(fn)}
        assert catching == CAPTURE_POINTS

    @pytest.mark.unit
    @pytest.mark.contract
    def test_public_surface_is_complete(self):
        expected = {
            "ok",
            "err",
            "result",
            "is_ok",
            "is_err",
            "of_promise",
            "of_throwable",
            "map",
            "map_err",
            "and_then",
            "value_or",
            "value_exn",
            "combine",
            "match",
        }
        assert expected <= set(resulta.__all__)
        for name in expected:
            assert callable(getattr(resulta, name))

    @pytest.mark.unit
    @pytest.mark.contract
    def test_public_functions_are_documented(self):
        missing = [
            f"{module.__name__}.{fn.__name__}"
            for module in (combinators, core, extract)
            for fn in _public_functions(module)
            if not inspect.getdoc(fn)
        ]
        assert missing == []
