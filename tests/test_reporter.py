import json

import pytest

from plagcheck.analyzer import analyze
from plagcheck.reporter import OutputFormat, report_result


def _report(result, fmt):
    return report_result(result, "a.js", "b.js", "javascript", "medium", fmt)


def test_text_report(total_js, total_js_renamed):
    result = analyze(total_js, total_js_renamed, "javascript")
    text = _report(result, OutputFormat.TEXT)
    assert "High Plagiarism Detected: 100% similar" in text
    assert "a.js ↔ b.js" in text
    assert "Language: JavaScript" in text
    assert "Variable renaming:     yes" in text
    assert "#1  lines" in text


def test_markdown_report(total_js, total_js_renamed):
    result = analyze(total_js, total_js_renamed, "javascript")
    md = _report(result, OutputFormat.MARKDOWN)
    assert md.startswith("# Code Similarity Report")
    assert "| Similarity | 100% |" in md
    assert "## Matching Segments" in md


def test_json_report_embeds_result_record(total_js, total_js_renamed):
    result = analyze(total_js, total_js_renamed, "javascript")
    data = json.loads(_report(result, OutputFormat.JSON))
    assert data["meta"] == {
        "file1": "a.js",
        "file2": "b.js",
        "language": "javascript",
        "sensitivity": "medium",
        "level": "high",
    }
    assert data["result"] == result.to_dict()


def test_minimal_similarity_without_segments():
    result = analyze("x;", "while (true) { }", "javascript")
    text = _report(result, OutputFormat.TEXT)
    assert "Minimal Similarity" in text
    assert "Matching Segments:" not in text


def test_unknown_format_raises(total_js):
    result = analyze(total_js, total_js, "javascript")
    with pytest.raises(ValueError):
        report_result(result, "a", "b", "javascript", "medium", "xml")
