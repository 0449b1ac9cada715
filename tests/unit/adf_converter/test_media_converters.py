"""Unit tests for media converters and media URL resolution."""

from adf2obsidian.adf_converter import AdfToMarkdownConverter, ConversionOptions, build_options
from tests.fixtures.adf_fixtures import (
    create_adf_doc,
    create_media,
    create_media_single,
    create_paragraph,
)


def convert(*nodes, options=None):
    return AdfToMarkdownConverter(options).convert(create_adf_doc(list(nodes)))


class TestMediaSingle:
    def test_file_media_default_resolver(self):
        assert convert(create_media_single(create_media("abc"))) == "![image](attachment://abc)"

    def test_explicit_url_wins(self):
        media = create_media("abc", "external", url="https://cdn.example.com/a.png")
        assert convert(create_media_single(media)) == "![image](https://cdn.example.com/a.png)"

    def test_alt_text(self):
        media = create_media("abc", alt="Diagram")
        assert convert(create_media_single(media)) == "![Diagram](attachment://abc)"

    def test_link_kind_renders_plain_link(self):
        media = create_media("abc", "link")
        assert convert(create_media_single(media)) == "[image](attachment://abc)"

    def test_missing_id(self):
        assert convert(create_media_single(create_media(None))) == "![image](attachment://unknown)"

    def test_non_media_children_are_skipped(self):
        node = create_media_single(create_media("abc"), create_paragraph("caption"))
        assert convert(node) == "![image](attachment://abc)"

    def test_followed_by_paragraph(self):
        result = convert(create_media_single(create_media("abc")), create_paragraph("after"))
        assert result == "![image](attachment://abc)\n\nafter"


class TestMediaGroup:
    def test_one_line_per_item(self):
        group = {"type": "mediaGroup", "content": [create_media("a"), create_media("b")]}
        assert convert(group) == "![image](attachment://a)\n![image](attachment://b)"


class TestMediaResolvers:
    def test_custom_resolver(self):
        options = ConversionOptions(media_url_resolver=lambda node: f"assets/{node.attrs['id']}.png")
        assert convert(create_media_single(create_media("abc")), options=options) == "![image](assets/abc.png)"

    def test_url_template(self):
        options = build_options(media_url_template="https://wiki/download/{collection}/{id}")
        media = create_media("abc", collection="space-1")
        assert convert(create_media_single(media), options=options) == "![image](https://wiki/download/space-1/abc)"

    def test_url_template_keeps_explicit_url(self):
        options = build_options(media_url_template="https://wiki/download/{id}")
        media = create_media("abc", url="https://elsewhere/x.png")
        assert convert(create_media_single(media), options=options) == "![image](https://elsewhere/x.png)"

    def test_standalone_media_node(self):
        assert convert(create_media("abc")) == "![image](attachment://abc)"
