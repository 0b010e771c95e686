from __future__ import annotations

import pytest

from geouri.domain.exceptions import MalformedPairInput
from geouri.domain.models import GeoParams


def test_empty_params_convert_to_an_empty_string() -> None:
    assert str(GeoParams("")) == ""
    assert str(GeoParams()) == ""


def test_params_string_is_kept_as_is() -> None:
    params = GeoParams("hello=world;yes;year=2025")
    assert str(params) == "hello=world;yes;year=2025"


def test_params_from_a_mapping() -> None:
    params = GeoParams({"foo": "bar", "u": "12"})
    assert str(params) == "u=12;foo=bar"


def test_params_from_pairs_follow_the_ordering_rule() -> None:
    params = GeoParams([("u", "5"), ("crs", "abc"), ("flag", "")])
    assert str(params) == "crs=abc;u=5;flag"


@pytest.mark.parametrize("pair", [("a",), ("a", "b", "c"), ()])
def test_params_reject_malformed_pairs(pair: tuple[str, ...]) -> None:
    with pytest.raises(MalformedPairInput):
        GeoParams([("ok", "1"), pair])


@pytest.mark.parametrize(
    ("text", "size"),
    [("", 0), ("one", 1), ("one;two=2", 2)],
)
def test_size_counts_params(text: str, size: int) -> None:
    params = GeoParams(text)
    assert params.size == size
    assert len(params) == size


def test_get_returns_none_for_a_missing_param() -> None:
    assert GeoParams("").get("foo") is None
    assert GeoParams("foo=42").get("bar") is None


def test_get_returns_the_value() -> None:
    assert GeoParams("foo=42").get("foo") == "42"


def test_get_keeps_ampersands_inside_a_value() -> None:
    # Only ';' separates geo parameters.
    params = GeoParams("foo=bar&baz&zab&rab")
    assert params.get("foo") == "bar&baz&zab&rab"
    assert params.get("baz") is None
    assert params.get("rab") is None


def test_get_preserves_the_value_case() -> None:
    assert GeoParams("foo=BaR").get("foo") == "BaR"
    assert GeoParams("crs=WGS84").get("crs") == "WGS84"


@pytest.mark.parametrize("name", ["foo", "FOO", "fOo"])
def test_get_ignores_the_name_case(name: str) -> None:
    assert GeoParams("FoO=bar").get(name) == "bar"


def test_get_returns_an_empty_string_for_a_flag() -> None:
    assert GeoParams("flag").get("flag") == ""


def test_get_decodes_the_value() -> None:
    params = GeoParams("plus=+;decode=%31%32%33")
    assert params.get("plus") == "+"
    assert params.get("decode") == "123"


def test_set_updates_an_existing_param() -> None:
    params = GeoParams("foo=old")
    params.set("foo", "new")
    assert str(params) == "foo=new"
    assert params.size == 1


def test_set_updates_an_existing_param_to_a_flag() -> None:
    params = GeoParams("foo=old")
    params.set("foo", "")
    assert str(params) == "foo"
    assert params.get("foo") == ""


def test_set_updates_the_case_of_an_existing_name() -> None:
    params = GeoParams("FoO=value")
    params.set("fOo", "value")
    assert str(params) == "fOo=value"
    assert params.size == 1


def test_set_does_not_move_an_updated_param() -> None:
    params = GeoParams("foo=1;u=2")
    params.set("U", "3")
    assert str(params) == "foo=1;U=3"


def test_set_appends_a_new_param() -> None:
    params = GeoParams("foo=qwe")
    params.set("hello", "world")
    assert str(params) == "foo=qwe;hello=world"
    assert params.size == 2


@pytest.mark.parametrize(
    ("initial", "name", "expected"),
    [
        ("", "crs", "crs=DEF34"),
        ("foo=bar", "crs", "crs=DEF34;foo=bar"),
        ("foo=bar", "cRS", "cRS=DEF34;foo=bar"),
        ("u=5", "crs", "crs=DEF34;u=5"),
        ("crs=ABC12", "crs", "crs=DEF34"),
    ],
)
def test_set_puts_crs_first(initial: str, name: str, expected: str) -> None:
    params = GeoParams(initial)
    params.set(name, "DEF34")
    assert str(params) == expected
    assert params.get("crs") == "DEF34"


@pytest.mark.parametrize(
    ("initial", "name", "expected"),
    [
        ("", "u", "u=15.16"),
        ("foo=bar", "u", "u=15.16;foo=bar"),
        ("foo=bar", "U", "U=15.16;foo=bar"),
        ("crs=ABC12", "u", "crs=ABC12;u=15.16"),
        ("crs=ABC12;fizz=buzz", "u", "crs=ABC12;u=15.16;fizz=buzz"),
    ],
)
def test_set_puts_u_first_or_after_crs(initial: str, name: str, expected: str) -> None:
    params = GeoParams(initial)
    params.set(name, "15.16")
    assert str(params) == expected
    assert params.get("u") == "15.16"


def test_crs_precedes_u_regardless_of_insertion_order() -> None:
    params = GeoParams()
    params.set("u", "10")
    params.set("crs", "abc")
    assert str(params) == "crs=abc;u=10"

    params.set("foo", "bar")
    assert str(params) == "crs=abc;u=10;foo=bar"


@pytest.mark.parametrize(
    ("initial", "args", "expected"),
    [
        ("", ("hello",), ""),
        ("goodbye=world", ("hello",), "goodbye=world"),
        ("foo=42", ("foo",), ""),
        ("foo=42;bar=23", ("foo",), "bar=23"),
        ("foo=42;bar=23", ("bar",), "foo=42"),
        ("foo=42;bar=23;baz=12", ("bar",), "foo=42;baz=12"),
        ("foo=42", ("FoO",), ""),
        ("foo=42", ("foo", "42"), ""),
        ("foo=42", ("foo", "43"), "foo=42"),
        ("flag", ("flag", ""), ""),
        ("foo=42", ("foo", ""), "foo=42"),
    ],
)
def test_delete(initial: str, args: tuple[str, ...], expected: str) -> None:
    params = GeoParams(initial)
    params.delete(*args)
    assert str(params) == expected


@pytest.mark.parametrize(
    ("initial", "args", "expected"),
    [
        ("", ("foo",), False),
        ("foo=42", ("bar",), False),
        ("foo=42", ("foo",), True),
        ("FoO=42", ("fOo",), True),
        ("foo=42", ("foo", "43"), False),
        ("foo=42", ("foo", "42"), True),
        ("foo=42", ("foo", ""), False),
        ("", ("foo", ""), False),
        ("foo", ("foo", ""), True),
    ],
)
def test_has(initial: str, args: tuple[str, ...], expected: bool) -> None:
    assert GeoParams(initial).has(*args) is expected


def test_contains_checks_names() -> None:
    params = GeoParams("Flag;u=1")
    assert "flag" in params
    assert "crs" not in params


def test_iteration() -> None:
    params = GeoParams("crs=abc;u=1;flag")
    assert list(params) == [("crs", "abc"), ("u", "1"), ("flag", "")]
    assert list(params.entries()) == [("crs", "abc"), ("u", "1"), ("flag", "")]
    assert list(params.keys()) == ["crs", "u", "flag"]
    assert list(params.values()) == ["abc", "1", ""]


def test_set_encodes_the_value() -> None:
    params = GeoParams("foo=old")
    params.set("foo", ' "#%,/;<=>?@\\^`{|}')
    assert str(params) == "foo=%20%22%23%25%2C%2F%3B%3C%3D%3E%3F%40%5C%5E%60%7B%7C%7D"
    assert params.get("foo") == ' "#%,/;<=>?@\\^`{|}'


def test_set_leaves_allowed_chars() -> None:
    params = GeoParams("foo=old")
    params.set("foo", "[]:&+$-_.!~*'()")
    assert str(params) == "foo=[]:&+$-_.!~*'()"
    assert params.get("foo") == "[]:&+$-_.!~*'()"


def test_set_round_trips_non_latin_values() -> None:
    params = GeoParams("foo=old")
    params.set("foo", "проверка")
    assert str(params) == "foo=%D0%BF%D1%80%D0%BE%D0%B2%D0%B5%D1%80%D0%BA%D0%B0"
    assert params.get("foo") == "проверка"


def test_literal_ampersand_survives_a_write_but_reads_back_ambiguously() -> None:
    # '&' is p-unreserved, so it is written as is. Other RFC 5870 readers may
    # not agree on where the value ends.
    params = GeoParams()
    params.set("foo", "bar&baz=1")
    assert str(params) == "foo=bar&baz%3D1"
    assert params.get("foo") == "bar&baz=1"
    assert params.get("baz") is None


def test_bound_params_read_and_write_through_callbacks() -> None:
    state = {"pathname": "1,2;a=b"}

    def write(value: str) -> None:
        state["pathname"] = value

    params = GeoParams._bind(lambda: state["pathname"], write)
    assert params.get("a") == "b"

    params.set("u", "3")
    assert state["pathname"] == "1,2;u=3;a=b"
    assert str(params) == "u=3;a=b"

    state["pathname"] = "5,6;x"
    assert list(params) == [("x", "")]

    params.delete("x")
    assert state["pathname"] == "5,6"
    assert str(params) == ""


def test_bound_params_run_the_before_set_hook_first() -> None:
    state = {"pathname": "1,2"}

    def write(value: str) -> None:
        state["pathname"] = value

    def veto(name: str, value: str) -> None:
        if name == "nope":
            raise ValueError("vetoed")

    params = GeoParams._bind(lambda: state["pathname"], write, before_set=veto)
    with pytest.raises(ValueError):
        params.set("nope", "1")
    assert state["pathname"] == "1,2"

    params.set("yes", "1")
    assert state["pathname"] == "1,2;yes=1"
