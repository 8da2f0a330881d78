#!/usr/bin/env python3
import pytest
from pydantic import ValidationError

from pcgen.core.capi.config import CApiConfig, LibraryCApiConfig
from pcgen.core.formatting import _dotted, format_validation_errors


@pytest.mark.parametrize("loc,expected", [
    (("version",), "version"),
    (("header", "name"), "header.name"),
    ((), "<root>"),
])
def test_dotted(loc, expected):
    assert _dotted(loc) == expected


def test_format_real_validation_error():
    with pytest.raises(ValidationError) as info:
        LibraryCApiConfig(name="foo", version="0.1")
    msgs = format_validation_errors(info.value)
    assert len(msgs) == 1
    assert msgs[0].startswith("version: ")
    assert "Invalid library version" in msgs[0]


def test_format_nested_section_error():
    with pytest.raises(ValidationError) as info:
        CApiConfig.model_validate({
            "header": {"name": "foo"},
            "pkg_config": {"name": "foo", "version": "0.1"},
            "library": {"name": "foo", "version": "nope"},
        })
    msgs = format_validation_errors(info.value)
    assert len(msgs) == 1
    assert msgs[0].startswith("library.version: ")


def test_other_exceptions_use_first_line():
    exc = ValueError("Boom!\nDetails that should be ignored")
    assert format_validation_errors(exc) == ["Boom!"]


def test_empty_message_falls_back_to_type_name():
    assert format_validation_errors(KeyError()) == ["KeyError"]
