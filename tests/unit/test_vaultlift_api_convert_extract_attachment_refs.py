"""Unit tests for vaultlift.api.convert.extract_attachment_refs."""

import pytest

from vaultlift.api.convert.extract_attachment_refs import extract_attachment_refs

pytestmark = pytest.mark.convert


def test_finds_all_four_kinds_in_offset_order():
    content = "See ![[img.png]] and [[doc.pdf|Doc]] and ![alt](pics/a b.png) and [x](file.pdf#page=2)."

    refs = extract_attachment_refs(content)

    assert [ref.kind for ref in refs] == ["obsidian-embed", "obsidian-link", "md-embed", "md-link"]
    assert [ref.target for ref in refs] == ["img.png", "doc.pdf", "pics/a b.png", "file.pdf"]
    assert [ref.start for ref in refs] == sorted(ref.start for ref in refs)


def test_spans_slice_back_to_raw_text():
    content = "a ![[x.png]] b [[y.pdf]] c ![](z.gif) d [w](v.mp3)\n"

    for ref in extract_attachment_refs(content):
        assert content[ref.start : ref.end] == ref.raw


def test_destination_runs_to_first_unescaped_paren():
    content = r"![a](img\).png) and [b](doc\(2\).pdf) then (text)"

    refs = extract_attachment_refs(content)

    assert [ref.raw for ref in refs] == [r"![a](img\).png)", r"[b](doc\(2\).pdf)"]
    assert [ref.target for ref in refs] == ["img).png", "doc(2).pdf"]


def test_embed_is_not_reported_as_link():
    refs = extract_attachment_refs("![[photo.png]] ![p](photo.png)")

    assert {ref.kind for ref in refs} == {"obsidian-embed", "md-embed"}


def test_wikilink_alias_and_size():
    refs = extract_attachment_refs("[[doc.pdf|My Doc]] ![[photo.png|100x100]]")

    assert refs[0].target == "doc.pdf"
    assert refs[0].label == "My Doc"
    assert refs[1].target == "photo.png"
    assert refs[1].label == "100x100"


def test_wikilink_heading_is_dropped():
    refs = extract_attachment_refs("[[guide.pdf#Intro]]")

    assert refs[0].target == "guide.pdf"
    assert refs[0].raw == "[[guide.pdf#Intro]]"


def test_markdown_title_angle_brackets_and_suffix():
    content = '[a](file.pdf "Title") ![](<my file.png>) [b](doc.pdf?x=1)'

    refs = extract_attachment_refs(content)

    assert [(ref.target, ref.suffix) for ref in refs] == [
        ("file.pdf", None),
        ("my file.png", None),
        ("doc.pdf", "?x=1"),
    ]


def test_markdown_link_wrapping_embed_yields_inner_embed_only():
    refs = extract_attachment_refs("[![alt](a.png)](b.pdf)")

    assert len(refs) == 1
    assert refs[0].kind == "md-embed"
    assert refs[0].target == "a.png"
    assert refs[0].label == "alt"


def test_empty_wikilink_is_ignored():
    assert extract_attachment_refs("![[]] and []()") == []


def test_scan_is_deterministic():
    content = "![[a.png]] [[b.pdf]] ![c](d.png) [e](f.pdf)"

    assert extract_attachment_refs(content) == extract_attachment_refs(content)


def test_text_without_references():
    assert extract_attachment_refs("plain text, no [links] here") == []
