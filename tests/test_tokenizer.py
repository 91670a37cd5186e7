from src.tokenizer import term_set, tokenize


def test_empty_and_missing_input():
    assert tokenize("") == []
    assert tokenize(None) == []


def test_non_string_input_is_treated_as_empty():
    assert tokenize(42) == []
    assert tokenize(b"python developer") == []
    assert tokenize(["python"]) == []


def test_lowercases_and_strips_punctuation():
    assert tokenize("Hello, World!") == ["hello", "world"]


def test_drops_single_character_terms():
    assert tokenize("a bb ccc") == ["bb", "ccc"]


def test_keeps_duplicates_and_order():
    assert tokenize("Python java PYTHON") == ["python", "java", "python"]


def test_punctuation_is_removed_not_replaced_by_space():
    # '-' and '.' vanish, joining the pieces
    assert tokenize("front-end node.js") == ["frontend", "nodejs"]
    assert tokenize("C# (senior) {lead}") == ["senior", "lead"]


def test_characters_outside_the_punctuation_set_survive():
    assert tokenize("C++ José 2024 dev@mail 'quoted'") == ["c++", "josé", "2024", "dev@mail", "'quoted'"]


def test_whitespace_runs_and_edges():
    assert tokenize("  python \n\n\t sql  ") == ["python", "sql"]


def test_only_punctuation_yields_nothing():
    assert tokenize("... --- !!!") == []


def test_term_set_is_stable_across_calls():
    text = "Senior Java engineer, Java and Spring; spring boot."
    first = term_set(text)
    assert first == term_set(text)
    assert first == {"senior", "java", "engineer", "and", "spring", "boot"}
