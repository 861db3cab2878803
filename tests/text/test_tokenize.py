"""Tests for textprep.text.tokenize."""

import unicodedata

import pytest

from textprep.text.options import TextOptions
from textprep.text.stopwords import EMPTY_TABLE, build_table
from textprep.text.tokenize import Normalizer, tokenize

NO_STOP_WORDS = TextOptions(stop_words=EMPTY_TABLE)


class TestTokenize:
    def test_removes_english_stop_words(self):
        result = tokenize("the quick the fox")
        assert "the" not in result.split()
        assert result == "fox quick"

    def test_merges_fields_sorted_and_deduplicated(self):
        result = tokenize("Café au Lait", "A Recipe For Café", options=NO_STOP_WORDS)
        assert result == "a au café for lait recipe"

    def test_same_fields_with_english_stop_words(self):
        assert tokenize("Café au Lait", "A Recipe For Café") == "au café lait recipe"

    def test_strips_markup_and_entities(self):
        result = tokenize("<h1>Big News</h1>", "<p>news &amp; views</p>", options=NO_STOP_WORDS)
        assert result == "big news views"

    def test_punctuation_splits_words(self):
        assert tokenize("Hello, World! Hello-World", options=NO_STOP_WORDS) == "hello world"

    def test_numbers_sort_before_letters(self):
        assert tokenize("Room 101, Floor 2", options=NO_STOP_WORDS) == "101 2 floor room"

    def test_stop_word_inside_longer_token_is_kept(self):
        options = TextOptions(stop_words=build_table({"en": ["the"]}))
        assert tokenize("theater the other", options=options) == "other theater"

    def test_only_stop_words(self):
        assert tokenize("to be or not to be") == ""

    def test_other_language(self):
        options = TextOptions(language="de", stop_words=build_table({"de": ["der", "und"]}))
        assert tokenize("Der Hund und die Katze", options=options) == "die hund katze"

    def test_unregistered_language_keeps_everything(self):
        assert tokenize("the fox", options=TextOptions(language="zz")) == "fox the"

    def test_empty(self):
        assert tokenize() == ""
        assert tokenize("", "<br/>") == ""

    def test_decomposed_accents_match_composed(self):
        decomposed = unicodedata.normalize("NFD", "Café")
        assert tokenize(decomposed, "café", options=NO_STOP_WORDS) == "café"

    def test_indic_words_stay_whole(self):
        assert tokenize("हिन्दी भाषा") == "भाषा हिन्दी"

    def test_legacy_purify_leaves_punctuation_duplicates(self):
        # Punctuation survives the first purification, so "hello," and
        # "hello" only merge after symbols are blanked out.
        options = TextOptions(stop_words=EMPTY_TABLE, legacy_purify=True)
        assert tokenize("Hello, World! Hello-World", options=options) == "hello hello world world"


@pytest.mark.parametrize(
    "fields",
    [
        ("The Quick Brown Fox", "jumps over the lazy dog"),
        ("<ul><li>Zebra</li><li>apple</li></ul>", "Mango, apple; zebra!"),
        ("Ünïcode Straße", "straße ÜNÏCODE 42"),
        ("a_b c-d e.f", "&quot;quoted&quot; &#039;single&#039;"),
    ],
)
def test_output_is_sorted_unique_and_deterministic(fields):
    result = tokenize(*fields)
    tokens = result.split(" ") if result else []
    assert tokens == sorted(set(tokens))
    assert all(tokens)
    assert tokenize(*fields) == result


class TestNormalizer:
    def test_binds_options(self):
        normalizer = Normalizer(TextOptions(purify_replacer="_", stop_words=EMPTY_TABLE))
        assert normalizer.purify("A B") == "a_b"
        assert normalizer.purify("A B", "+") == "a+b"
        assert normalizer.tokenize("the fox") == "fox the"

    def test_defaults(self):
        normalizer = Normalizer()
        assert normalizer.tokenize("the fox") == "fox"
        assert normalizer.dedupe([2, 2, 1]) == [2, 1]
        assert normalizer.shorten("one two three", 1, use_words=True, add_ellipsis=True) == "one..."
