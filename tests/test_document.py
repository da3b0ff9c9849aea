from __future__ import annotations

import pytest
from lxml import etree

from feedcanon.services.document import build_document


def test_build_document_lowercases_and_groups_repeated_tags():
    xml = """
    <?xml version="1.0" encoding="UTF-8"?>
    <RSS Version="2.0">
      <Channel>
        <Title>Feed</Title>
        <item><title>One</title></item>
        <item><title>Two</title></item>
      </Channel>
    </RSS>
    """

    document = build_document(xml)

    assert document["rss"]["@version"] == "2.0"
    channel = document["rss"]["channel"]
    assert channel["title"] == {"#text": "Feed"}
    assert [item["title"]["#text"] for item in channel["item"]] == ["One", "Two"]
    assert "#text" not in channel


def test_build_document_keeps_namespace_prefixes():
    xml = """
    <rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
             xmlns:dc="http://purl.org/dc/elements/1.1/"
             xmlns="http://purl.org/rss/1.0/">
      <channel rdf:about="https://example.com/">
        <title>RDF</title>
        <dc:creator>Jane</dc:creator>
      </channel>
    </rdf:RDF>
    """

    document = build_document(xml)

    channel = document["rdf:rdf"]["channel"]
    assert channel["@rdf:about"] == "https://example.com/"
    assert channel["dc:creator"] == {"#text": "Jane"}


def test_build_document_cdata_and_comments():
    xml = "<item><!-- note --><description><![CDATA[<p>Hello</p>]]></description></item>"

    document = build_document(xml)

    assert document == {"item": {"description": {"#text": "<p>Hello</p>"}}}


def test_build_document_accepts_bytes_with_declaration():
    xml = b'<?xml version="1.0" encoding="UTF-8"?>\n<feed><title>Bytes</title></feed>'

    assert build_document(xml)["feed"]["title"]["#text"] == "Bytes"


def test_build_document_strips_byte_order_mark():
    assert build_document("\ufeff<feed><id>1</id></feed>")["feed"]["id"]["#text"] == "1"


def test_build_document_without_root_element():
    with pytest.raises(etree.XMLSyntaxError):
        build_document("<!-- <rss><channel></channel></rss> -->")


def test_build_document_recovers_undeclared_entities():
    xml = "<rss><channel><title>Caf&eacute; news</title><link>https://example.com/</link></channel></rss>"

    channel = build_document(xml)["rss"]["channel"]

    assert channel["link"] == {"#text": "https://example.com/"}
    assert channel["title"]["#text"].startswith("Caf")
