import tempfile
import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.core.config.scoring import (  # noqa: E402
    ScoringConfig,
    SectionWeights,
    get_scoring_config,
    get_scoring_value,
    load_scoring_config,
)
from resume_ats.normalize.text import DEFAULT_STOP_WORDS  # noqa: E402
from resume_ats.services.ats_analysis import ATSEngine  # noqa: E402


class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("weights.keywords"), 0.3)
        self.assertEqual(get_scoring_value("feedback.readability.good_score"), 70)
        self.assertIsNone(get_scoring_value("weights.missing"))
        self.assertEqual(get_scoring_value("", default="fallback"), "fallback")

    def test_yaml_matches_code_defaults(self):
        config = load_scoring_config()
        self.assertEqual(config, ScoringConfig())
        self.assertEqual(config.stop_words, DEFAULT_STOP_WORDS)

    def test_weights_must_sum_to_one(self):
        with self.assertRaises(RuntimeError):
            ScoringConfig.from_mapping({"weights": {"keywords": 0.9}})
        with self.assertRaises(RuntimeError):
            ScoringConfig(weights=SectionWeights(summary=-0.1, keywords=0.5))

    def test_wrong_value_types_are_rejected(self):
        with self.assertRaises(RuntimeError):
            ScoringConfig.from_mapping({"weights": [0.1, 0.2]})
        with self.assertRaises(RuntimeError):
            ScoringConfig.from_mapping({"similarity": {"containment_ratio": "high"}})
        with self.assertRaises(RuntimeError):
            ScoringConfig.from_mapping({"keywords": {"stop_words": "the and"}})

    def test_non_string_stop_words_are_rejected(self):
        for entry in (True, False, 1, None):
            with self.assertRaises(RuntimeError):
                ScoringConfig.from_mapping({"keywords": {"stop_words": ["the", entry]}})

    def test_unquoted_yaml_boolean_stop_word_is_rejected(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "scoring.yaml"
            path.write_text("keywords:\n  stop_words:\n    - the\n    - on\n", encoding="utf-8")
            with self.assertRaises(RuntimeError):
                load_scoring_config(path)

    def test_shipped_stop_words_keep_on_and_not_true(self):
        stop_words = load_scoring_config().stop_words
        self.assertIn("on", stop_words)
        self.assertNotIn("true", stop_words)
        result = ATSEngine(load_scoring_config()).analyze({}, "true python")
        self.assertEqual(result.keyword_match.missing_keywords, ["python", "true"])

    def test_feedback_cap_is_bounded(self):
        with self.assertRaises(RuntimeError):
            ScoringConfig.from_mapping({"feedback": {"max_items": 5}})

    def test_partial_mapping_keeps_defaults(self):
        config = ScoringConfig.from_mapping({"keywords": {"stop_words": ["Python", " "]}})
        self.assertEqual(config.stop_words, frozenset({"python"}))
        self.assertEqual(config.weights, SectionWeights())

    def test_explicit_path_and_invalid_yaml(self):
        with tempfile.TemporaryDirectory() as tmp:
            good = Path(tmp) / "scoring.yaml"
            good.write_text("summary:\n  min_length: 80\n", encoding="utf-8")
            self.assertEqual(load_scoring_config(good).summary_min_length, 80)

            bad = Path(tmp) / "broken.yaml"
            bad.write_text("weights: [unclosed\n", encoding="utf-8")
            with self.assertRaises(RuntimeError):
                load_scoring_config(bad)

            with self.assertRaises(RuntimeError):
                load_scoring_config(Path(tmp) / "missing.yaml")


if __name__ == "__main__":
    unittest.main()
