"""Tests for application/registration/declaration.py."""

import pytest

from sigparams.application.registration.declaration import declaration_from
from sigparams.domain.exceptions import DeclarationError, ParseError
from sigparams.domain.model.configuration import ParamsConfig
from sigparams.domain.model.declaration import ExecuteByName, ExecuteCallable


def _body(*args: object) -> None:
    pass


class TestShapes:
    """Each accepted call shape maps to one execute variant."""

    def test_name_only_is_deferred(self) -> None:
        decl = declaration_from("area")
        assert decl.execute == ExecuteByName("_execute_area")
        assert len(decl.signature) == 0
        assert decl.signature.name == "area"
        assert decl.hooks.is_empty

    def test_trailing_callable(self) -> None:
        decl = declaration_from("area", _body)
        assert decl.execute == ExecuteCallable(_body)

    def test_options_and_trailing_callable(self) -> None:
        decl = declaration_from("area", _body, params="w, h")
        assert decl.execute == ExecuteCallable(_body)
        assert decl.signature.names == ("w", "h")

    def test_execute_by_name(self) -> None:
        decl = declaration_from("area", params="w", execute="compute_area")
        assert decl.execute == ExecuteByName("compute_area")

    def test_execute_callable_option(self) -> None:
        decl = declaration_from("area", params="w", execute=_body)
        assert decl.execute == ExecuteCallable(_body)

    def test_options_without_execute(self) -> None:
        decl = declaration_from("area", params="w")
        assert decl.execute == ExecuteByName("_execute_area")
        assert decl.is_deferred

    def test_list_params(self) -> None:
        decl = declaration_from("area", params=["w", {"type": "Int"}, "h"])
        assert decl.signature.names == ("w", "h")

    def test_custom_execute_prefix(self) -> None:
        decl = declaration_from("area", config=ParamsConfig(execute_prefix="do_"))
        assert decl.execute == ExecuteByName("do_area")


class TestHooks:
    """Hook options."""

    def test_true_derives_names(self) -> None:
        decl = declaration_from("area", build_args=True, check_args=True)
        assert decl.hooks.build_args == "_buildargs_area"
        assert decl.hooks.check_args == "_checkargs_area"

    def test_false_and_none_mean_no_hook(self) -> None:
        decl = declaration_from("area", build_args=False, check_args=None)
        assert decl.hooks.is_empty

    def test_name_and_callable(self) -> None:
        decl = declaration_from("area", build_args="normalize", check_args=_body)
        assert decl.hooks.build_args == "normalize"
        assert decl.hooks.check_args is _body

    @pytest.mark.parametrize("value", ["not valid", 5])
    def test_invalid(self, value: object) -> None:
        with pytest.raises(DeclarationError, match="check_args"):
            declaration_from("area", check_args=value)


class TestRejected:
    """Invalid declaration requests."""

    def test_execute_and_trailing_callable(self) -> None:
        with pytest.raises(DeclarationError, match="both an 'execute' option and a trailing callable"):
            declaration_from("area", _body, execute=_body)

    def test_invalid_execute(self) -> None:
        with pytest.raises(DeclarationError, match="callable or a name"):
            declaration_from("area", execute=5)

    def test_execute_name_not_identifier(self) -> None:
        with pytest.raises(DeclarationError, match="identifier"):
            declaration_from("area", execute="not valid")

    def test_trailing_not_callable(self) -> None:
        with pytest.raises(DeclarationError, match="must be callable"):
            declaration_from("area", "w, h")

    def test_too_many_arguments(self) -> None:
        with pytest.raises(DeclarationError, match="at most one"):
            declaration_from("area", _body, _body)

    def test_unknown_option(self) -> None:
        with pytest.raises(DeclarationError, match="unknown option"):
            declaration_from("area", param="w")

    def test_invalid_params(self) -> None:
        with pytest.raises(DeclarationError, match="'params'"):
            declaration_from("area", params=5)

    def test_invalid_name(self) -> None:
        with pytest.raises(DeclarationError, match="identifier"):
            declaration_from("not valid")

    def test_parse_error_surfaces(self) -> None:
        with pytest.raises(ParseError):
            declaration_from("area", params="x! = 1")
