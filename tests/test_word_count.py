from katas.word_count import word_count

def test_one_word():
    assert word_count("word") == {"word": 1}

def test_one_of_each():
    assert word_count("one of each") == {"one": 1, "of": 1, "each": 1}

def test_multiple_occurrences():
    out = word_count("one fish two fish red fish blue fish")
    assert out == {"one": 1, "fish": 4, "two": 1, "red": 1, "blue": 1}

def test_cramped_list():
    assert word_count("one,two,three") == {"one": 1, "two": 1, "three": 1}

def test_expanded_list():
    assert word_count("one,\ntwo,\nthree") == word_count("one,two,three")

def test_case_sensitive():
    assert word_count("Fish fish FISH fish") == {"Fish": 1, "fish": 2, "FISH": 1}

def test_leading_and_trailing_separators():
    assert word_count("  ,go, go ,\n") == {"go": 2}

def test_empty():
    assert word_count("") == {}
    assert word_count(" ,\n\t") == {}
