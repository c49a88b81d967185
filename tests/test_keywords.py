from lexscan.keywords import DEFAULT_KEYWORDS, find_keywords


def texts(toks):
    return [t.text for t in toks]


def test_defaults():
    assert DEFAULT_KEYWORDS == ("int", "float", "double", "char")
    assert texts(find_keywords("int x = 5; float y; double z; char c;")) == ["int", "float", "double", "char"]


def test_whole_words_only():
    found = find_keywords("integer intx int")
    assert texts(found) == ["int"]
    assert found[0].start == 13


def test_word_glued_to_number_is_not_a_keyword():
    found = find_keywords("9int int")
    assert texts(found) == ["int"]
    assert found[0].start == 5
    assert texts(find_keywords("9 int")) == ["int"]


def test_punctuation_delimits_keywords():
    assert texts(find_keywords("(char*)p;int[3]")) == ["char", "int"]


def test_custom_keywords():
    assert texts(find_keywords("if x then y else z", ["if", "else"])) == ["if", "else"]


def test_no_keywords():
    assert find_keywords("hello world") == []
    assert find_keywords("") == []


def test_bytes_input():
    assert texts(find_keywords(b"char\xffint")) == ["char", "int"]


def test_single_keyword_string():
    assert texts(find_keywords("i n t int", "int")) == ["int"]


def test_non_ascii_neighbour_is_not_part_of_the_word():
    assert texts(find_keywords("int\xe9 \xe9char")) == ["int", "char"]
