import pytest

from plagcheck.analyzer import WinnowingAnalyzer, analyze, create_analyzer
from plagcheck.fingerprint import fingerprint, kgrams
from plagcheck.models import AnalysisResult, Sensitivity, WinnowingOptions
from plagcheck.tokenizer import tokenize


def test_renamed_copy_scores_high(total_js, total_js_renamed):
    result = analyze(total_js, total_js_renamed, "javascript")
    assert result.similarity_percentage >= 80
    assert result.variable_renaming is True
    assert result.matching_segments >= 1


def test_unrelated_snippets_score_low(sort_py):
    result = analyze("print('hello')", sort_py, "python")
    assert result.similarity_percentage <= 20
    assert result.variable_renaming is False
    assert result.matching_segments == len(result.matches)


def test_too_short_for_kgrams_scores_zero():
    options = WinnowingOptions.from_sensitivity("high")
    tokens = tokenize("a;", "javascript")
    assert kgrams(tokens, options.k_gram_length) == []
    assert fingerprint(tokens, options) == set()

    result = analyze("a;", "b = c + d;", "javascript", sensitivity="high")
    assert result.similarity_percentage == 0


@pytest.mark.parametrize("sensitivity", ["low", "medium", "high"])
def test_identical_input_is_fully_similar(total_js, sensitivity):
    result = analyze(total_js, total_js, "javascript", sensitivity=sensitivity)
    assert result.similarity_percentage == 100
    assert result.structural_similarity == 100
    assert result.control_flow == 100
    assert result.logic_patterns == 100
    assert result.variable_renaming is False


def test_scores_are_symmetric(total_js, sort_py):
    pairs = [
        (total_js, total_js.replace("subtotal", "s").replace("if (tax < 0)", "while (tax > 1)")),
        (sort_py, sort_py.split("def merge(")[0]),
    ]
    for a, b in pairs:
        for language in ("javascript", "python"):
            ab = analyze(a, b, language)
            ba = analyze(b, a, language)
            assert ab.similarity_percentage == ba.similarity_percentage
            assert ab.structural_similarity == ba.structural_similarity
            assert ab.control_flow == ba.control_flow
            assert ab.logic_patterns == ba.logic_patterns


def test_analysis_is_deterministic(total_js, total_js_renamed):
    first = analyze(total_js, total_js_renamed, "javascript")
    second = analyze(total_js, total_js_renamed, "javascript")
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_token_count_and_segments():
    result = analyze(
        "function add(a,b){return a+b;}",
        "function add(x,y){return x+y;}",
        "javascript",
    )
    assert result.tokens_analyzed == 28
    assert result.similarity_percentage == 100
    assert result.matching_segments == 1
    assert result.matches[0].code1_lines == "1-2"


def test_empty_samples_use_fallbacks():
    result = analyze("", "", "python")
    assert result.similarity_percentage == 0
    assert result.structural_similarity == 100
    assert result.control_flow == 100
    assert result.logic_patterns == 100
    assert result.variable_renaming is False
    assert result.tokens_analyzed == 0
    assert result.matches == ()


def test_unknown_language_does_not_fail(total_js):
    result = analyze(total_js, total_js, "fortran")
    assert result.similarity_percentage == 100


def test_create_analyzer_presets():
    assert create_analyzer("low").options == WinnowingOptions(5, 6, Sensitivity.LOW)
    assert create_analyzer().options == WinnowingOptions(4, 5, Sensitivity.MEDIUM)
    assert create_analyzer("HIGH").options == WinnowingOptions(3, 4, Sensitivity.HIGH)
    assert create_analyzer(Sensitivity.HIGH).options.guarantee_length == 6


def test_create_analyzer_rejects_unknown_sensitivity():
    with pytest.raises(ValueError):
        create_analyzer("extreme")


def test_options_must_be_positive():
    with pytest.raises(ValueError):
        WinnowingOptions(0, 5)
    with pytest.raises(ValueError):
        WinnowingOptions(4, 0)


def test_custom_options(total_js, total_js_renamed):
    analyzer = WinnowingAnalyzer(WinnowingOptions(2, 2))
    result = analyzer.analyze(total_js, total_js_renamed, "javascript")
    assert result.similarity_percentage == 100


def test_result_round_trips_through_dict(total_js, total_js_renamed):
    result = analyze(total_js, total_js_renamed, "javascript")
    data = result.to_dict()
    assert set(data) == {
        "similarityPercentage", "structuralSimilarity", "controlFlow",
        "logicPatterns", "variableRenaming", "tokensAnalyzed",
        "matchingSegments", "matches",
    }
    assert set(data["matches"][0]) == {
        "id", "code1Lines", "code2Lines", "code1Content", "code2Content",
        "variableChanges",
    }
    assert AnalysisResult.from_dict(data) == result


@pytest.mark.parametrize("percentage,level", [
    (100, "high"), (80, "high"), (79, "moderate"), (60, "moderate"),
    (59, "low"), (40, "low"), (39, "minimal"), (0, "minimal"),
])
def test_severity_level(percentage, level):
    result = AnalysisResult(percentage, 0, 0, 0, False, 0, 0)
    assert result.level == level
