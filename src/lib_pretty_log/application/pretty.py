"""JSON and XML pretty-printing for payload logging.

Purpose
-------
Re-serialise structured payloads with indentation so they read well in a log
viewer. Parsing is advisory: failures are reported as
:class:`~lib_pretty_log.domain.errors.PayloadParseError` and the printer logs
the raw payload instead of raising.

Contents
    - ``render_json``: objects and arrays with four-space indentation.
    - ``render_xml``: documents with two-space indentation and a declaration.
    - ``EMPTY_JSON_MESSAGE`` / ``EMPTY_XML_MESSAGE``: logged for blank input.
"""

from __future__ import annotations

import json
from typing import Final
from xml.dom import minidom
from xml.parsers.expat import ExpatError

from ..domain.errors import PayloadParseError

JSON_INDENT: Final[int] = 4
XML_INDENT: Final[str] = "  "
XML_DECLARATION: Final[str] = '<?xml version="1.0" encoding="UTF-8"?>'

EMPTY_JSON_MESSAGE: Final[str] = "Empty/Null json content"
EMPTY_XML_MESSAGE: Final[str] = "Empty/Null xml content"


def render_json(text: str | None) -> str | None:
    """Return *text* re-indented, or ``None`` when it is blank.

    Raises
    ------
    PayloadParseError
        When the payload is malformed or starts with something other than
        ``{`` or ``[``.

    Examples
    --------
    >>> print(render_json('{"a": [1, 2]}'))
    {
        "a": [
            1,
            2
        ]
    }
    >>> render_json("   ") is None
    True
    """

    if text is None or not text.strip():
        return None
    stripped = text.strip()
    if stripped[0] not in "{[":
        raise PayloadParseError("JSON payload must start with '{' or '['", text)
    try:
        document = json.loads(stripped)
    except json.JSONDecodeError as exc:
        raise PayloadParseError(str(exc), text) from exc
    return json.dumps(document, indent=JSON_INDENT, ensure_ascii=False)


def render_xml(text: str | None) -> str | None:
    """Return *text* as an indented XML document, or ``None`` when blank.

    Why
    ----
    The logged document must read like the one that was sent or received, so
    the markup is re-indented only: namespace prefixes, default namespaces,
    comments and processing instructions come out as written.

    What
    ----
    Whitespace-only text nodes are dropped, every top-level node is
    re-indented with two spaces, and the declaration is placed on its own
    line in front of the document.

    Raises
    ------
    PayloadParseError
        When the payload is not well-formed XML.

    Examples
    --------
    >>> print(render_xml("<root><!-- one --><item id='1'/></root>"))
    <?xml version="1.0" encoding="UTF-8"?>
    <root>
      <!-- one -->
      <item id="1"/>
    </root>
    """

    if text is None or not text.strip():
        return None
    try:
        document = minidom.parseString(text.strip())
    except ExpatError as exc:
        raise PayloadParseError(str(exc), text) from exc
    try:
        _drop_blank_text(document)
        body = "".join(node.toprettyxml(indent=XML_INDENT) for node in document.childNodes)
    finally:
        document.unlink()
    return XML_DECLARATION + "\n" + body.rstrip("\n")


def _drop_blank_text(node: minidom.Node) -> None:
    """Remove whitespace-only text nodes below *node* so indentation is not doubled."""

    for child in list(node.childNodes):
        if child.nodeType == minidom.Node.TEXT_NODE and not child.data.strip():
            node.removeChild(child)
            child.unlink()
        elif child.hasChildNodes():
            _drop_blank_text(child)
