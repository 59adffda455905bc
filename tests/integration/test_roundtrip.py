#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_roundtrip.py
"""Property-based round-trip tests for plain text.

Hypothesis generates paragraphs made of letters, digits and every
character the exporter escapes. Exporting such a tree and importing the
result must give back the same visible text.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from xeditor_md import export_markdown, import_markdown
from xeditor_md.constants import MARKDOWN_SPECIAL_CHARS
from xeditor_md.tree import build_tree, heading, paragraph

WORD_ALPHABET = st.sampled_from("abcXYZ019" + MARKDOWN_SPECIAL_CHARS)
words = st.lists(st.text(alphabet=WORD_ALPHABET, min_size=1, max_size=8), min_size=1, max_size=12)


def normalize(text: str) -> str:
    return " ".join(text.split())


@pytest.mark.integration
class TestPlainTextRoundTrip:
    """Text-only trees survive export followed by import."""

    @given(words)
    def test_paragraph_text_preserved(self, paragraph_words):
        text = " ".join(paragraph_words)
        tree = build_tree(paragraph(text))

        restored = import_markdown(export_markdown(tree))

        assert normalize(restored.text_content()) == normalize(text)

    @given(words, st.integers(min_value=1, max_value=6))
    def test_heading_text_preserved(self, heading_words, level):
        text = " ".join(heading_words)
        tree = build_tree(heading(level, text))

        restored = import_markdown(export_markdown(tree))

        assert normalize(restored.text_content()) == normalize(text)
        assert [restored.tag(child) for child in restored.children(restored.root)] == [f"h{level}"]

    @given(st.lists(words, min_size=1, max_size=4))
    def test_multiple_paragraphs_preserved(self, paragraphs):
        texts = [" ".join(paragraph_words) for paragraph_words in paragraphs]
        tree = build_tree(*(paragraph(text) for text in texts))

        restored = import_markdown(export_markdown(tree))

        restored_texts = [restored.text_content(child) for child in restored.children(restored.root)]
        assert [normalize(t) for t in restored_texts] == [normalize(t) for t in texts]
