"""
Tests for LLM output parsing: JSON extraction, generated question checks,
SVG extraction and search query lists.
"""

import json

import pytest

from physics_tutor.tutor.parsing import (
    LLMOutputError, strip_fences, extract_json_object, extract_json_array,
    match_choice, parse_generated_question, extract_svg, parse_search_queries,
)

MCQ = {
    "questionText": "A block of mass $m$ slides down a frictionless incline. What is its acceleration?",
    "explanation": "Along the incline only $mg\\sin\\theta$ acts, so $a = g\\sin\\theta$.",
    "choices": ["A) $g$", "B) $g\\sin\\theta$", "C) $g\\cos\\theta$", "D) $0$"],
    "correctChoice": "B) $g\\sin\\theta$",
}


# ─── JSON Extraction ─────────────────────────────────────────────────────────

class TestExtractJson:
    def test_plain_object(self):
        assert extract_json_object('{"a": 1}') == {"a": 1}

    def test_fenced_object(self):
        assert extract_json_object('```json\n{"a": 1}\n```') == {"a": 1}

    def test_object_inside_chatter(self):
        text = 'Sure! Here is your question:\n{"a": {"b": 2}}\nGood luck.'
        assert extract_json_object(text) == {"a": {"b": 2}}

    def test_no_object(self):
        with pytest.raises(LLMOutputError):
            extract_json_object("I cannot help with that.")

    def test_array_is_not_an_object(self):
        with pytest.raises(LLMOutputError):
            extract_json_object("[1, 2]")

    def test_array(self):
        assert extract_json_array('Queries: ["gauss law", "flux"]') == ["gauss law", "flux"]

    def test_strip_fences_without_fence(self):
        assert strip_fences("  plain  ") == "plain"


# ─── Choice Matching ─────────────────────────────────────────────────────────

class TestMatchChoice:
    choices = ["A) 2 m/s", "B) 4 m/s", "C) 8 m/s"]

    def test_verbatim(self):
        assert match_choice("B) 4 m/s", self.choices) == "B) 4 m/s"

    def test_case_insensitive(self):
        assert match_choice("b) 4 M/S", self.choices) == "B) 4 m/s"

    @pytest.mark.parametrize("label", ["B", "b", "B)", "(B)", "B."])
    def test_letter_label(self, label):
        assert match_choice(label, self.choices) == "B) 4 m/s"

    def test_unlabelled_choices_by_position(self):
        assert match_choice("C", ["2 m/s", "4 m/s", "8 m/s"]) == "8 m/s"

    def test_no_match(self):
        assert match_choice("16 m/s", self.choices) is None
        assert match_choice("D", self.choices) is None


# ─── Generated Questions ─────────────────────────────────────────────────────

class TestParseGeneratedQuestion:
    def test_valid_mcq(self):
        q = parse_generated_question(json.dumps(MCQ), "MCQ")
        assert q.correctChoice == MCQ["correctChoice"]
        assert len(q.choices) == 4

    def test_mcq_letter_answer_is_resolved(self):
        data = dict(MCQ, correctChoice="B")
        q = parse_generated_question(json.dumps(data), "MCQ")
        assert q.correctChoice == "B) $g\\sin\\theta$"

    def test_mcq_needs_two_choices(self):
        data = dict(MCQ, choices=["A) $g$"], correctChoice="A) $g$")
        with pytest.raises(LLMOutputError):
            parse_generated_question(json.dumps(data), "MCQ")

    def test_mcq_correct_choice_must_exist(self):
        data = dict(MCQ, correctChoice="E) $2g$")
        with pytest.raises(LLMOutputError):
            parse_generated_question(json.dumps(data), "MCQ")

    def test_missing_explanation(self):
        data = {k: v for k, v in MCQ.items() if k != "explanation"}
        with pytest.raises(LLMOutputError):
            parse_generated_question(json.dumps(data), "MCQ")

    def test_frq_drops_choices(self):
        data = {
            "questionText": "A capacitor is charged through a resistor. (a) ... (b) ...",
            "explanation": "Use $q(t) = C\\varepsilon(1 - e^{-t/RC})$.",
            "answer": "(a) $RC$ (b) $C\\varepsilon$",
            "choices": ["ignored"],
        }
        q = parse_generated_question(f"```json\n{json.dumps(data)}\n```", "FRQ")
        assert q.answer.startswith("(a)")
        assert q.choices is None
        assert q.correctChoice is None


# ─── SVG ─────────────────────────────────────────────────────────────────────

class TestExtractSvg:
    def test_svg_in_fence(self):
        text = '```svg\n<svg viewBox="0 0 10 10">\n  <line x1="0" y1="0" x2="10" y2="10"/>\n</svg>\n```'
        svg = extract_svg(text)
        assert svg.startswith("<svg")
        assert svg.endswith("</svg>")
        assert "\n" not in svg

    def test_first_svg_wins(self):
        svg = extract_svg("<svg id='a'></svg> and <svg id='b'></svg>")
        assert "id='a'" in svg

    def test_no_svg(self):
        with pytest.raises(LLMOutputError):
            extract_svg("Sorry, I cannot draw this.")


# ─── Search Queries ──────────────────────────────────────────────────────────

class TestParseSearchQueries:
    def test_dedup_and_limit(self):
        text = '["Gauss\'s Law", "electric flux", "Gauss\'s Law", "  ", "symmetry"]'
        assert parse_search_queries(text, 2) == ["Gauss's Law", "electric flux"]

    def test_non_strings_skipped(self):
        assert parse_search_queries('["torque", 3, null]', 3) == ["torque"]

    def test_garbage_means_no_queries(self):
        assert parse_search_queries("no idea", 3) == []

    def test_object_means_no_queries(self):
        assert parse_search_queries('{"q": "torque"}', 3) == []
