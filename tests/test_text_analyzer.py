from app.services.text_analyzer import find_top_words


def test_most_frequent_words_first():
    top = find_top_words("the cat sat on the mat the cat ran", [])
    assert top[0] == "the"
    assert top[1] == "cat"
    assert top[2] in {"sat", "on", "mat", "ran"}
    assert len(top) == 3


def test_ties_keep_first_seen_order():
    assert find_top_words("delta alpha charlie bravo", []) == ["delta", "alpha", "charlie"]


def test_punctuation_and_case_are_ignored():
    assert find_top_words("Hello, hello! World.", []) == ["hello", "world"]


def test_banned_words_are_skipped():
    top = find_top_words("the cat sat on the mat the cat ran", ["the", "cat"])
    assert "the" not in top
    assert "cat" not in top
    assert top == ["sat", "on", "mat"]


def test_banned_words_match_case_sensitively():
    # Text is lower-cased, banned words are not
    top = find_top_words("The the THE dog", ["The"])
    assert top[0] == "the"


def test_empty_and_whitespace_text():
    assert find_top_words("", []) == []
    assert find_top_words("   \n\t ", []) == []


def test_leading_whitespace_does_not_count_as_a_word():
    assert find_top_words("   a a b  ", []) == ["a", "b"]


def test_never_more_than_three_words():
    text = "one two three four five six seven"
    assert len(find_top_words(text, [])) == 3
