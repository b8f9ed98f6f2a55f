import pytest

from rfdoc.markdown import RfdMarkdown

OLD_LINK = "https://example.com/org/repo/pulls/1"
NEW_LINK = "https://example.com/org/repo/pulls/2019"
TITLE = "Identity and Access Management (IAM)"


def _doc(line):
    return f"sdfsdf\nsdfsdf\n{line}\ndsfsdf\nsdf\nauthors: nope"


@pytest.mark.parametrize(
    ("line", "method", "expected"),
    [
        ("authors: things, joe", "get_authors", "things, joe"),
        ("state: discussion", "get_state", "discussion"),
        (f"discussion: {OLD_LINK}", "get_discussion", OLD_LINK),
    ],
)
def test_get_markdown_attribute(line, method, expected):
    assert getattr(RfdMarkdown(_doc(line)), method)() == expected


def test_markdown_ignores_asciidoc_authors():
    content = "sdfsdf\n= sdfgsdfgsdfg\nthings, joe\ndsfsdf\nsdf\n:authors: nope"
    assert RfdMarkdown(content).get_authors() is None


def test_set_nonexistent_attribute():
    content = f"sdfsdf\n# sdfgsdfgsdfg\ndiscussion: {OLD_LINK}\ndsfsdf\nsdf\ndiscussion: nope"
    rfd = RfdMarkdown(content)
    rfd.set_attr("xrefstyle", "short")
    assert rfd.attr("xrefstyle") == "short"
    assert rfd.get_discussion() == OLD_LINK


def test_set_attribute_without_title_leaves_content():
    content = "no title here\nat all\n"
    rfd = RfdMarkdown(content)
    rfd.set_attr("state", "discussion")
    assert rfd.raw() == content
    assert rfd.get_state() is None


@pytest.mark.parametrize(
    ("attr", "old_value", "new_value"),
    [
        ("discussion", OLD_LINK, NEW_LINK),
        ("state", "sdfsdfsdf", "discussion"),
    ],
)
def test_update_existing_markdown_attribute(attr, old_value, new_value):
    rfd = RfdMarkdown(_doc(f"{attr}:   {old_value}"))
    getattr(rfd, f"update_{attr}")(new_value)
    assert rfd.raw() == _doc(f"{attr}: {new_value}")


def test_update_labels_round_trip():
    rfd = RfdMarkdown("intro\n# Title\nlabels: a, b\nbody\n")
    assert rfd.get_labels() == "a, b"
    rfd.update_labels("c")
    assert rfd.get_labels() == "c"


@pytest.mark.parametrize("prefix", ["RFD 43 ", "RFD 43: "])
def test_get_markdown_title(prefix):
    content = f"things\n# {prefix}{TITLE}\nsdfsdf\ntitle: {OLD_LINK}\ndsfsdf\nsdf\nauthors: nope"
    assert RfdMarkdown(content).get_title() == TITLE


def test_header_and_body_split_at_title():
    rfd = RfdMarkdown("intro\n\n# Title\nbody text")
    assert rfd.header() == "intro"
    assert rfd.body() == "body text"


def test_body_is_none_without_title():
    rfd = RfdMarkdown("just text\n")
    assert rfd.body() is None
    assert rfd.header() == "just text"


def test_update_body_replaces_from_title_on():
    rfd = RfdMarkdown("intro\n# Title\nold body")
    rfd.update_body("new")
    assert rfd.raw() == "intro\nnew"


def test_set_raw_replaces_content():
    rfd = RfdMarkdown("old")
    rfd.set_raw("state: ideation\n")
    assert rfd.raw() == "state: ideation\n"
    assert rfd.get_state() == "ideation"