from katas.strings import reverse, acronym

def test_reverse_none():
    assert reverse(None) is None

def test_reverse_empty():
    assert reverse("") == ""

def test_reverse_words():
    assert reverse("robot") == "tobor"
    assert reverse("Ramen") == "nemaR"
    assert reverse("racecar") == "racecar"

def test_reverse_keeps_punctuation():
    assert reverse("I'm hungry!") == "!yrgnuh m'I"

def test_reverse_twice_is_identity():
    for s in ["", "a", "ab c", "I'm hungry!", "naïve café"]:
        assert reverse(reverse(s)) == s

def test_acronym_none():
    assert acronym(None) is None

def test_acronym_basic():
    assert acronym("Portable Network Graphics") == "PNG"

def test_acronym_punctuation():
    assert acronym("First In, First Out") == "FIFO"

def test_acronym_all_caps_word():
    assert acronym("GNU Image Manipulation Program") == "GIMP"

def test_acronym_hyphenated():
    assert acronym("Complementary metal-oxide semiconductor") == "CMOS"

def test_acronym_skips_words_without_letters():
    assert acronym("Ruby on Rails & 2 more") == "RORM"
    assert acronym(" , - ... ") == ""
    assert acronym("") == ""

def test_acronym_lowercase_and_leading_punctuation():
    assert acronym("'twas the night") == "TTN"
    assert acronym("as  soon\tas\npossible") == "ASAP"
