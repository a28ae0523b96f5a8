from plagcheck.matcher import detect_variable_renaming, find_matching_segments
from plagcheck.models import Token
from plagcheck.tokenizer import tokenize


def _tokens(*texts):
    return [Token(t, t) for t in texts]


def test_renaming_detected_for_relabelled_code():
    t1 = tokenize("function add(a,b){return a+b;}", "javascript")
    t2 = tokenize("function add(x,y){return x+y;}", "javascript")
    assert detect_variable_renaming(t1, t2)


def test_identical_code_is_not_renamed():
    t1 = tokenize("function add(a,b){return a+b;}", "javascript")
    assert not detect_variable_renaming(t1, t1)


def test_renaming_needs_identifier_pairs():
    t1 = tokenize("1 + 2;", "javascript")
    t2 = tokenize("3 + 4;", "javascript")
    assert not detect_variable_renaming(t1, t2)
    assert not detect_variable_renaming([], [])


def test_keyword_differences_are_not_renaming():
    t1 = tokenize("if (x) { return; }", "javascript")
    t2 = tokenize("while (x) { break; }", "javascript")
    assert not detect_variable_renaming(t1, t2)


def test_renaming_ratio_threshold():
    # 1 of 4 identifier pairs differ: 0.25 is not above 0.3
    t1 = tokenize("a = b + c + d", "python")
    t2 = tokenize("a = b + c + e", "python")
    assert not detect_variable_renaming(t1, t2)
    # 2 of 4 differ
    t2 = tokenize("a = b + f + e", "python")
    assert detect_variable_renaming(t1, t2)


def test_single_segment_for_identical_streams():
    tokens = tokenize("function add(a,b){return a+b;}", "javascript")
    matches = find_matching_segments(tokens, tokens)
    assert len(matches) == 1
    segment = matches[0]
    assert segment.id == 1
    assert segment.code1_lines == "1-2"
    assert segment.code2_lines == "1-2"
    assert segment.code1_content == " ".join(t.text for t in tokens)
    assert segment.code1_content == segment.code2_content
    assert segment.variable_changes == ()


def test_runs_shorter_than_three_are_ignored():
    t1 = _tokens("a", "b", "x", "c")
    t2 = _tokens("a", "b", "y", "c")
    assert find_matching_segments(t1, t2) == []


def test_segments_are_numbered_in_order():
    t1 = _tokens("a", "b", "c", "X", "d", "e", "f")
    t2 = _tokens("a", "b", "c", "Y", "d", "e", "f")
    matches = find_matching_segments(t1, t2)
    assert [m.id for m in matches] == [1, 2]
    assert matches[0].code1_content == "a b c"
    assert matches[1].code1_content == "d e f"
    assert matches[1].code1_lines == "1-1"


def test_line_ranges_use_token_index_proxy():
    shared = [f"t{i}" for i in range(25)]
    t1 = _tokens("p", *shared)
    t2 = _tokens("q", *shared)
    matches = find_matching_segments(t1, t2)
    assert len(matches) == 1
    # Run covers indexes 1..25, end cursor 26
    assert matches[0].code1_lines == "1-3"


def test_matching_is_lockstep_only():
    t1 = _tokens("Z", "a", "b", "c")
    t2 = _tokens("a", "b", "c")
    assert find_matching_segments(t1, t2) == []
