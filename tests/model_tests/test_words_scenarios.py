# test/model_tests/test_words_scenarios.py


from itertools import islice

from model.words import append_each, append_each_up_to
from transiter import TransIter


class TestWordsScenarios:
    """Word extension recursion functions."""

    def test_01_append_each_extends_in_alphabet_order(self):
        assert append_each("xyz")("ab") == ["abx", "aby", "abz"]

    def test_02_shortlex_enumeration(self):
        words = list(islice(TransIter("", append_each("abc")), 10))
        assert words == ["", "a", "b", "c", "aa", "ab", "ac", "ba", "bb", "bc"]

    def test_03_bounded_extension_stops_at_max_length(self):
        extend = append_each_up_to("ab", 2)
        assert extend("a") == ["aa", "ab"]
        assert extend("ab") == []
        assert len(list(TransIter("", extend))) == 1 + 2 + 4

    def test_04_empty_alphabet_has_only_the_seed(self):
        assert list(TransIter("", append_each(""))) == [""]
