"""JSON and XML re-serialisation."""

from __future__ import annotations

import pytest

from lib_pretty_log.application.pretty import render_json, render_xml
from lib_pretty_log.domain.errors import PayloadParseError


@pytest.mark.parametrize("blank", [None, "", "   ", "\n\t"])
def test_blank_payloads_render_nothing(blank: str | None) -> None:
    assert render_json(blank) is None
    assert render_xml(blank) is None


def test_json_object_uses_four_space_indent() -> None:
    assert render_json('{"a":1,"b":{"c":[true,null]}}') == (
        "{\n"
        '    "a": 1,\n'
        '    "b": {\n'
        '        "c": [\n'
        "            true,\n"
        "            null\n"
        "        ]\n"
        "    }\n"
        "}"
    )


def test_json_array_and_surrounding_whitespace() -> None:
    assert render_json('  [1, "é"]\n') == '[\n    1,\n    "é"\n]'


def test_json_keeps_key_order() -> None:
    assert render_json('{"z": 1, "a": 2}').splitlines()[1] == '    "z": 1,'


@pytest.mark.parametrize("payload", ["{bad", '{"a": }', "[1, 2", '{"a": 1} trailing'])
def test_malformed_json_raises_with_raw_payload(payload: str) -> None:
    with pytest.raises(PayloadParseError) as excinfo:
        render_json(payload)
    assert excinfo.value.payload == payload
    assert excinfo.value.cause
    assert excinfo.value.describe().endswith("\n" + payload)


@pytest.mark.parametrize("payload", ["plain text", "42", '"quoted"'])
def test_json_needs_object_or_array(payload: str) -> None:
    with pytest.raises(PayloadParseError, match="must start with"):
        render_json(payload)


def test_xml_indents_two_spaces_and_breaks_after_declaration() -> None:
    rendered = render_xml("<catalog><book id='1'><title>Dune</title></book></catalog>")
    assert rendered == (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        "<catalog>\n"
        '  <book id="1">\n'
        "    <title>Dune</title>\n"
        "  </book>\n"
        "</catalog>"
    )


def test_xml_replaces_existing_declaration() -> None:
    rendered = render_xml('<?xml version="1.0"?><a><b/></a>')
    assert rendered is not None
    assert rendered.splitlines() == ['<?xml version="1.0" encoding="UTF-8"?>', "<a>", "  <b/>", "</a>"]


def test_xml_keeps_default_namespace() -> None:
    rendered = render_xml('<feed xmlns="http://www.w3.org/2005/Atom"><title>x</title></feed>')
    assert rendered is not None
    assert rendered.splitlines()[1:] == ['<feed xmlns="http://www.w3.org/2005/Atom">', "  <title>x</title>", "</feed>"]


def test_xml_keeps_namespace_prefixes() -> None:
    rendered = render_xml(
        '<soap:Envelope xmlns:soap="urn:soap"><soap:Body><m:ping xmlns:m="urn:m"/></soap:Body></soap:Envelope>'
    )
    assert rendered is not None
    assert rendered.splitlines()[1:] == [
        '<soap:Envelope xmlns:soap="urn:soap">',
        "  <soap:Body>",
        '    <m:ping xmlns:m="urn:m"/>',
        "  </soap:Body>",
        "</soap:Envelope>",
    ]


def test_xml_keeps_comments_and_processing_instructions() -> None:
    rendered = render_xml('<?xml-stylesheet href="feed.xsl"?><a><!-- keep me --><b/></a>')
    assert rendered is not None
    assert rendered.splitlines() == [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<?xml-stylesheet href="feed.xsl"?>',
        "<a>",
        "  <!-- keep me -->",
        "  <b/>",
        "</a>",
    ]


def test_xml_existing_indentation_is_not_doubled() -> None:
    rendered = render_xml("<a>\n    <b>x</b>\n\n</a>\n")
    assert rendered is not None
    assert rendered.splitlines()[1:] == ["<a>", "  <b>x</b>", "</a>"]


@pytest.mark.parametrize("payload", ["<a><b></a>", "<unclosed", "not xml at all"])
def test_malformed_xml_raises_with_raw_payload(payload: str) -> None:
    with pytest.raises(PayloadParseError) as excinfo:
        render_xml(payload)
    assert excinfo.value.payload == payload
