import pytest

from mdrepair.protect import PlaceholderProtector
from mdrepair.repair import MarkdownRepair, convert, identity_parser, load_parser


class Tagging(MarkdownRepair):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def protect(self, text):
        self.log.append(f"protect:{self.name}")
        return text

    def restore(self, text):
        self.log.append(f"restore:{self.name}")
        return text


def fake_parser(text):
    return f"<p>{text}</p>"


def test_default_repair_is_noop():
    r = MarkdownRepair()
    assert r.before_markdown_parser("a@b") == "a@b"
    assert r.after_markdown_parser("a@b") == "a@b"


def test_convert_runs_repairs_in_onion_order():
    log = []
    convert("x", identity_parser, [Tagging("a", log), Tagging("b", log)])
    assert log == ["protect:a", "protect:b", "restore:b", "restore:a"]


def test_convert_hides_at_from_parser():
    seen = []

    def parser(text):
        seen.append(text)
        return fake_parser(text)

    out = convert("ping @team", parser, [PlaceholderProtector()])
    assert seen == ["ping {-at-}team"]
    assert out == "<p>ping &#64;team</p>"


def test_load_parser_resolves_dotted_attr():
    fn = load_parser("mdrepair.repair:identity_parser")
    assert fn is identity_parser
    assert load_parser("os.path:basename")("a/b") == "b"


@pytest.mark.parametrize("path", ["", "mdrepair.repair", ":identity_parser", "mdrepair.repair:"])
def test_load_parser_rejects_malformed_path(path):
    with pytest.raises(ValueError):
        load_parser(path)


def test_load_parser_rejects_non_callable():
    with pytest.raises(TypeError):
        load_parser("mdrepair.protect:MARKER")


def test_load_parser_missing_attr():
    with pytest.raises(AttributeError):
        load_parser("mdrepair.repair:nope")
