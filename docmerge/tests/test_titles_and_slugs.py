from docmerge.core.slugs import AnchorRegistry, slugify
from docmerge.core.titles import extract_title, fallback_title


def test_extract_title_first_level_one_heading():
    assert extract_title("# Hello World\nbody text") == "Hello World"


def test_extract_title_trims_and_skips_preamble():
    content = "intro line\n\n#   Spaced Title   \n\n# Second\n"
    assert extract_title(content) == "Spaced Title"


def test_extract_title_ignores_deeper_headings():
    assert extract_title("## Only a subheading\n### deeper\n") is None


def test_extract_title_uses_first_match_only():
    content = "## Sub\n# First\n# Second\n"
    assert extract_title(content) == "First"


def test_extract_title_requires_text_on_same_line():
    assert extract_title("#\nnot a title\n") is None
    assert extract_title("#NoSpace\n") is None


def test_extract_title_skips_blank_heading_lines():
    assert extract_title("#   \n# Real Title\nbody") == "Real Title"
    assert extract_title("#\t\r\n# After CRLF blank\r\n") == "After CRLF blank"
    assert extract_title("#   \n") is None


def test_extract_title_handles_crlf():
    assert extract_title("# Windows\r\nbody\r\n") == "Windows"


def test_fallback_title_strips_extension():
    assert fallback_title("foo.md") == "foo"
    assert fallback_title("A-glossary.md") == "A-glossary"
    assert fallback_title("notes") == "notes"
    assert fallback_title("sub/dir/page.md") == "sub/dir/page"


def test_slugify_lowercases_and_hyphenates():
    assert slugify("A Title") == "a-title"
    assert slugify("Many   spaces\there") == "many-spaces-here"


def test_slugify_strips_punctuation_keeps_unicode():
    assert slugify("AURA: Part I (draft)!") == "aura-part-i-draft"
    assert slugify("Часть I: Основы") == "часть-i-основы"


def test_slugify_empty_result():
    assert slugify("???") == "section"


def test_anchor_registry_disambiguates_duplicates():
    reg = AnchorRegistry()
    assert reg.anchor("Intro") == "intro"
    assert reg.anchor("Intro") == "intro-1"
    assert reg.anchor("intro!") == "intro-2"
    assert reg.anchor("Other") == "other"


def test_anchor_registry_skips_taken_suffix():
    reg = AnchorRegistry()
    assert reg.anchor("a-1") == "a-1"
    assert reg.anchor("a") == "a"
    assert reg.anchor("a") == "a-2"
