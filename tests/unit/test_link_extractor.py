"""
Tests for atsfit.ml.nlp.link_extractor — profile link extraction.
"""

from atsfit.ml.nlp.link_extractor import extract_links, find_links_block, is_link_line


class TestExtractLinks:
    def test_bare_and_scheme_urls(self):
        text = "See https://www.linkedin.com/in/jane-doe and github.com/janedoe for more."
        assert extract_links(text) == ["https://www.linkedin.com/in/jane-doe", "github.com/janedoe"]

    def test_text_order_is_kept(self):
        text = "github.com/janedoe\nlinkedin.com/in/janedoe"
        assert extract_links(text) == ["github.com/janedoe", "linkedin.com/in/janedoe"]

    def test_trailing_punctuation_dropped(self):
        assert extract_links("(gitlab.com/jane).") == ["gitlab.com/jane"]

    def test_dedupe_ignores_case_and_trailing_slash(self):
        text = "github.com/JaneDoe/ and GITHUB.com/janedoe"
        assert extract_links(text) == ["github.com/JaneDoe/"]

    def test_explicit_list_appended_after_text_links(self):
        links = extract_links("linkedin.com/in/jane", ["https://jane.dev", "linkedin.com/in/jane/"])
        assert links == ["linkedin.com/in/jane", "https://jane.dev"]

    def test_nothing_found(self):
        assert extract_links("no profiles here") == []

    def test_none_text(self):
        assert extract_links(None, ["jane.dev"]) == ["jane.dev"]


class TestLinksBlock:
    def test_reads_until_blank_line(self):
        text = "[LINKS]\nhttps://jane.dev\n- github.com/jane\n\nnot-a-link.example"
        assert find_links_block(text) == ["https://jane.dev", "github.com/jane"]

    def test_stops_at_next_tag(self):
        text = "[LINKS]\njane.dev\n[SKILLS]\nother.dev"
        assert find_links_block(text) == ["jane.dev"]

    def test_skips_prose_lines(self):
        assert find_links_block("[LINKS]\nmy portfolio is great\njane.dev") == ["jane.dev"]

    def test_no_block(self):
        assert find_links_block("github.com/jane") == []


class TestIsLinkLine:
    def test_url(self):
        assert is_link_line("https://github.com/jane")

    def test_bullet_url(self):
        assert is_link_line("• jane.dev")

    def test_sentence(self):
        assert not is_link_line("Visit jane.dev today")

    def test_empty(self):
        assert not is_link_line("   ")
