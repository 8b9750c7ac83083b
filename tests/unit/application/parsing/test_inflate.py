"""Tests for application/parsing/inflate.py."""

import pytest

from sigparams.application.parsing.inflate import inflate_parameters
from sigparams.domain.exceptions import DeclarationError


class TestInflateParameters:
    """Tests for list-form parameters."""

    def test_names_only(self) -> None:
        sig = inflate_parameters(["a", "b"], name="m")
        assert sig.names == ("a", "b")
        assert [p.index for p in sig] == [0, 1]
        assert all(p.required for p in sig)
        assert sig.name == "m"

    def test_options(self) -> None:
        sig = inflate_parameters(
            ["a", {"type": "Int", "coerce": True, "default": 5}, "b", {"builder": "make_b"}]
        )
        a, b = sig.parameters
        assert a.type_name == "Int"
        assert a.coerce
        assert a.default == 5
        assert not a.required
        assert b.builder == "make_b"

    def test_builder_true_auto_names(self) -> None:
        param = inflate_parameters(["size", {"builder": True}]).parameters[0]
        assert param.builder == "build_param_size"

    def test_slurpy(self) -> None:
        param = inflate_parameters(["a", "rest", {"slurpy": True}]).parameters[1]
        assert param.slurpy
        assert not param.required

    def test_explicit_optional(self) -> None:
        param = inflate_parameters(["a", {"required": False}]).parameters[0]
        assert not param.required


class TestInflateErrors:
    """Tests for rejected list forms."""

    def test_unknown_option(self) -> None:
        with pytest.raises(DeclarationError, match="unknown option 'isa'"):
            inflate_parameters(["a", {"isa": "Int"}])

    @pytest.mark.parametrize(
        "options",
        [{"required": "yes"}, {"default": True}, {"default": 1.5}, {"type": 3}],
    )
    def test_invalid_value(self, options: dict[str, object]) -> None:
        with pytest.raises(DeclarationError, match="invalid value"):
            inflate_parameters(["a", options])

    def test_string_instead_of_list(self) -> None:
        with pytest.raises(DeclarationError, match="must not be a string"):
            inflate_parameters("a, b")

    def test_non_name_entry(self) -> None:
        with pytest.raises(DeclarationError, match="expected parameter name"):
            inflate_parameters([1])

    def test_required_with_default(self) -> None:
        with pytest.raises(DeclarationError, match="cannot have a default"):
            inflate_parameters(["a", {"required": True, "default": 1}])

    def test_duplicate_name(self) -> None:
        with pytest.raises(DeclarationError, match="duplicate"):
            inflate_parameters(["a", "a"])
