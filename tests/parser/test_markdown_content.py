"""
Tests for the markdown stanza parser
"""

from hymnal.parser import ChorusDetector, parse_markdown_content
from hymnal.parser.markdown_content import split_blocks


class TestSplitBlocks:

    def test_blank_line_separation(self):
        assert split_blocks("a\nb\n\nc") == ["a\nb", "c"]

    def test_multiple_and_whitespace_blank_lines(self):
        assert split_blocks("a\n\n \n\t\nb\n\n\n") == ["a", "b"]

    def test_windows_line_endings(self):
        assert split_blocks("a\r\n\r\nb") == ["a", "b"]


class TestParseMarkdownContent:
    """Tests for parse_markdown_content()"""

    def test_empty_input(self):
        assert parse_markdown_content("") == []
        assert parse_markdown_content(None) == []

    def test_verse_and_chorus(self):
        markdown = "**1** First line\n\n**Chorus**\nRefrain line"
        stanzas = [s.to_dict() for s in parse_markdown_content(markdown)]
        assert stanzas == [
            {'type': 'verse', 'number': 1, 'lines': ['First line']},
            {'type': 'chorus', 'lines': ['Refrain line']},
        ]

    def test_full_hymn(self, sample_markdown_hymn):
        stanzas = parse_markdown_content(sample_markdown_hymn)
        assert [(s.type, s.number) for s in stanzas] == [
            ('verse', 1), ('chorus', None), ('verse', 2),
        ]
        assert stanzas[1].lines == ['Piga tarumbeta mlinzi,']
        assert stanzas[2].lines == ['Ipige vichakani,', 'Dunia isikie.']

    def test_numbering_uses_counter_not_markers(self):
        stanzas = parse_markdown_content("**4** Four\n\n**9** Nine")
        assert [s.number for s in stanzas] == [1, 2]

    def test_italic_chorus_label(self):
        stanzas = parse_markdown_content("_Nnyeso_\nTuyimbe")
        assert stanzas[0].is_chorus
        assert stanzas[0].lines == ['Tuyimbe']

    def test_label_outside_emphasis_is_verse(self):
        stanzas = parse_markdown_content("Chorus of the redeemed")
        assert stanzas[0].type == 'verse'
        assert stanzas[0].lines == ['Chorus of the redeemed']

    def test_emphasis_delimiters_stripped(self):
        stanzas = parse_markdown_content("Holy, *holy*, __holy__\n**Lord** God")
        assert stanzas[0].lines == ['Holy, holy, holy', 'Lord God']

    def test_label_only_block_dropped(self):
        stanzas = parse_markdown_content("**KWAYA**\n\nVerse text")
        assert len(stanzas) == 1
        assert stanzas[0].number == 1

    def test_one_block_one_stanza(self):
        stanzas = parse_markdown_content("**1** One\n**2** Two")
        assert len(stanzas) == 1
        assert stanzas[0].lines == ['One', 'Two']

    def test_plain_lines_round_trip(self):
        stanzas = parse_markdown_content("  Rock of ages \nCleft for me")
        assert stanzas[0].lines == ['Rock of ages', 'Cleft for me']

    def test_custom_chorus_labels(self):
        detector = ChorusDetector(['Refrain'])
        stanzas = parse_markdown_content("**Refrain**\nSing on", chorus_detector=detector)
        assert stanzas[0].is_chorus
        assert stanzas[0].lines == ['Sing on']
