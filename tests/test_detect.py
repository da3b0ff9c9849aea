from __future__ import annotations

import pytest

from feedcanon.services.detect import detect_atom, detect_format, detect_json_feed, detect_rdf, detect_rss

ATOM = """
<?xml version="1.0"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Feed</title>
</feed>
"""

ATOM_UPPERCASE = """
<?xml version="1.0" encoding="utf-8"?>
<FEED xmlns="http://www.w3.org/2005/Atom">
  <title>Example Feed</title>
</FEED>
"""

ATOM_WITHOUT_NAMESPACE = """
<?xml version="1.0"?>
<feed>
  <title>Feed</title>
</feed>
"""

ATOM_PREFIXED = """
<?xml version="1.0" encoding="utf-8"?>
<atom:feed xmlns:atom="http://www.w3.org/2005/Atom">
  <atom:title>Example Feed</atom:title>
</atom:feed>
"""

RSS = """
<?xml version="1.0" encoding="UTF-8" ?>
<rss version="2.0">
  <channel>
    <title>RSS Title</title>
  </channel>
</rss>
"""

RDF = """
<?xml version="1.0" encoding="UTF-8"?>
<rdf:RDF
  xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
  xmlns="http://purl.org/rss/1.0/">
  <channel>
    <title>RDF Example</title>
  </channel>
</rdf:RDF>
"""

JSON_FEED = """
{
  "version": "https://jsonfeed.org/version/1.1",
  "title": "Example Feed",
}
"""

HTML = """
<!DOCTYPE html>
<html>
  <head>
    <title>Example Page</title>
  </head>
  <body>
    <h1>Hello World</h1>
    <p>This is not a feed.</p>
  </body>
</html>
"""


@pytest.mark.parametrize("text", [ATOM, ATOM_UPPERCASE, ATOM_WITHOUT_NAMESPACE, ATOM_PREFIXED])
def test_detect_atom_accepts_atom_documents(text):
    assert detect_atom(text) is True


@pytest.mark.parametrize("text", [RSS, RDF, JSON_FEED, HTML, ""])
def test_detect_atom_rejects_other_documents(text):
    assert detect_atom(text) is False


@pytest.mark.parametrize("value", [None, 42, b"<feed>", ["<feed>"]])
def test_detectors_reject_non_strings(value):
    assert detect_atom(value) is False
    assert detect_rss(value) is False
    assert detect_rdf(value) is False
    assert detect_json_feed(value) is False


def test_detect_rss_and_rdf():
    assert detect_rss(RSS) is True
    assert detect_rss(ATOM) is False
    assert detect_rdf(RDF) is True
    assert detect_rdf(RSS) is False


def test_detect_json_feed():
    assert detect_json_feed(JSON_FEED) is True
    assert detect_json_feed('{"version": "1.1"}') is False


def test_rss_embedding_atom_link_is_not_atom():
    text = """
    <rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom">
      <channel>
        <atom:link href="https://example.com/rss" rel="self"/>
        <title>RSS</title>
      </channel>
    </rss>
    """
    assert detect_format(text) == "rss"


@pytest.mark.parametrize(
    "text, expected",
    [
        (ATOM, "atom"),
        (ATOM_PREFIXED, "atom"),
        (RSS, "rss"),
        (RDF, "rdf"),
        (JSON_FEED, "json"),
        (HTML, "unknown"),
        ("", "unknown"),
    ],
)
def test_detect_format(text, expected):
    assert detect_format(text) == expected
