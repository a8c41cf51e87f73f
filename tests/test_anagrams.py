import pytest

from l2utils.anagrams import find_anagrams


@pytest.mark.parametrize(
    ("words", "expected"),
    [
        pytest.param(
            ["пятак", "листок", "тяпка", "пятка", "слиток", "столик"],
            {
                "листок": ["листок", "слиток", "столик"],
                "пятак": ["пятак", "пятка", "тяпка"],
            },
            id="common_test",
        ),
        pytest.param(
            ["Дурка", "дУрак", "Рудак", "коСти", "исток"],
            {"дурка": ["дурак", "дурка", "рудак"], "кости": ["исток", "кости"]},
            id="capitalized_test",
        ),
        pytest.param(
            ["go", "is", "a", "good", "compiled", "language"], {}, id="all_unique_test"
        ),
        pytest.param([], {}, id="empty_test"),
    ],
)
def test_find_anagrams(words, expected):
    assert find_anagrams(words) == expected


def test_words_appear_once():
    assert find_anagrams(["пятак", "Пятак", "тяпка"]) == {"пятак": ["пятак", "тяпка"]}


def test_key_is_first_word_met():
    result = find_anagrams(["тяпка", "пятак"])
    assert list(result) == ["тяпка"]


def test_duplicate_only_set_dropped():
    assert find_anagrams(["слово", "СЛОВО"]) == {}