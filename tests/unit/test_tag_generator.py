"""
Unit tests for keyword tag generation.
"""
from src.tag_generator import STOPWORDS, generate_tags, tokenize


class TestTokenize:
    """Test suite for tokenize."""

    def test_lowercases_and_splits_on_word_boundaries(self):
        """Test that punctuation separates words and case is folded."""
        assert tokenize("Hello, World! It's fine.") == ["hello", "world", "it", "s", "fine"]

    def test_keeps_digits_and_underscores(self):
        """Test that ASCII word characters include digits and underscores."""
        assert tokenize("python_3 2024") == ["python_3", "2024"]

    def test_non_ascii_letters_split_words(self):
        """Test that tokenization is ASCII only."""
        assert tokenize("café") == ["caf"]


class TestGenerateTags:
    """Test suite for generate_tags."""

    def test_most_frequent_word_ranks_first(self):
        """Test ranking on a sentence with a repeated word."""
        tags = generate_tags("The quick brown fox jumps over the lazy dog and the fox runs")
        assert tags[0] == "fox"
        assert len(tags) <= 3
        for tag in tags:
            assert len(tag) > 2
            assert tag not in STOPWORDS
        assert "the" not in tags
        assert "and" not in tags

    def test_ties_keep_first_seen_order(self):
        """Test that words with equal frequency are ordered by first appearance."""
        tags = generate_tags("The quick brown fox jumps over the lazy dog and the fox runs")
        assert tags == ["fox", "quick", "brown"]

    def test_frequency_beats_position(self):
        """Test that a later but more frequent word ranks higher."""
        assert generate_tags("alpha beta alpha gamma alpha") == ["alpha", "beta", "gamma"]
        assert generate_tags("delta delta epsilon") == ["delta", "epsilon"]

    def test_case_insensitive_counting(self):
        """Test that differently cased words are counted together."""
        assert generate_tags("Python python PYTHON code") == ["python", "code"]

    def test_only_stopwords_and_short_words(self):
        """Test that text without qualifying words yields no tags."""
        assert generate_tags("the and a of it is to be at on an in as") == []
        assert generate_tags("go to my pc ok") == []

    def test_empty_content(self):
        """Test that empty content yields no tags."""
        assert generate_tags("") == []

    def test_at_most_three_tags(self):
        """Test that the number of tags is capped at three."""
        tags = generate_tags("one two three four five six seven eight")
        assert tags == ["one", "two", "three"]

    def test_custom_limit(self):
        """Test that the limit can be changed."""
        assert generate_tags("alpha beta gamma", limit=1) == ["alpha"]

    def test_three_letter_words_are_kept(self):
        """Test that the length cut-off only drops words of two letters or fewer."""
        assert generate_tags("cat ox") == ["cat"]
