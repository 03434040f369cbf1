import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
TESTS_DIR = Path(__file__).resolve().parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from resume_ats.core.config.scoring import FeedbackRules, ScoringConfig  # noqa: E402
from resume_ats.schemas.analysis import (  # noqa: E402
    AnalysisResult,
    FeatureFlags,
    KeywordMatchResult,
    ScoreBreakdown,
)
from resume_ats.services.ats_analysis import ATSEngine  # noqa: E402
from resume_ats.services.feedback import (  # noqa: E402
    ACTION_VERBS,
    FALLBACK_IMPROVEMENT,
    FALLBACK_STRENGTH,
    IMPROVEMENT_RULES,
    READABILITY_GOOD,
    READABILITY_STRONG,
    READABILITY_WEAK,
    STRENGTH_RULES,
    build_experience_suggestions,
    build_readability_comment,
    build_summary_suggestion,
    generate_ats_summary,
    generate_feedback,
    infer_target_title,
)
from sample_resumes import FULL_JD, FULL_RESUME  # noqa: E402


def _analysis(
    *,
    score: int = 50,
    flags: FeatureFlags | None = None,
    formatting: int = 20,
    match_percentage: int = 0,
) -> AnalysisResult:
    return AnalysisResult(
        score=score,
        score_breakdown=ScoreBreakdown(sections=0, contact=0, keywords=0, formatting=formatting),
        keyword_match=KeywordMatchResult(match_percentage=match_percentage),
        feature_flags=flags or FeatureFlags(),
    )


class FeedbackRulesTests(unittest.TestCase):
    RULES = FeedbackRules()

    def test_sparse_resume_gets_fallback_strength_and_improvements(self):
        analysis = ATSEngine(ScoringConfig()).analyze({}, "")
        feedback = generate_ats_summary(analysis, job_description_provided=False, rules=self.RULES)

        self.assertEqual(feedback.strengths, [FALLBACK_STRENGTH])
        self.assertEqual(
            feedback.improvements,
            [IMPROVEMENT_RULES[0][1], IMPROVEMENT_RULES[1][1], IMPROVEMENT_RULES[3][1]],
        )
        self.assertEqual(feedback.readability, READABILITY_WEAK)

    def test_complete_resume_lists_all_strengths(self):
        analysis = ATSEngine(ScoringConfig()).analyze(FULL_RESUME, FULL_JD)
        feedback = generate_ats_summary(analysis, job_description_provided=True, rules=self.RULES)

        self.assertEqual(feedback.strengths, [message for _, message in STRENGTH_RULES])
        # The formatting breakdown is the weighted value, so it stays under the threshold.
        self.assertEqual(feedback.improvements, [IMPROVEMENT_RULES[3][1]])
        self.assertEqual(feedback.readability, READABILITY_STRONG)

    def test_improvements_are_capped_at_three(self):
        analysis = _analysis(match_percentage=10)
        feedback = generate_ats_summary(analysis, job_description_provided=True, rules=self.RULES)
        self.assertEqual(
            feedback.improvements,
            [IMPROVEMENT_RULES[0][1], IMPROVEMENT_RULES[1][1], IMPROVEMENT_RULES[2][1]],
        )

    def test_keyword_gap_only_counts_with_job_description(self):
        flags = FeatureFlags(has_summary=True, has_skills=True)
        without_jd = generate_ats_summary(_analysis(flags=flags, formatting=80), False, self.RULES)
        with_jd = generate_ats_summary(_analysis(flags=flags, formatting=80), True, self.RULES)

        self.assertEqual(without_jd.improvements, [FALLBACK_IMPROVEMENT])
        self.assertEqual(with_jd.improvements, [IMPROVEMENT_RULES[2][1]])

    def test_readability_thresholds(self):
        self.assertEqual(build_readability_comment(90, 70, self.RULES), READABILITY_STRONG)
        self.assertEqual(build_readability_comment(90, 69, self.RULES), READABILITY_GOOD)
        self.assertEqual(build_readability_comment(70, 0, self.RULES), READABILITY_GOOD)
        self.assertEqual(build_readability_comment(69, 100, self.RULES), READABILITY_WEAK)
        self.assertEqual(build_readability_comment(None, None, self.RULES), READABILITY_WEAK)


class ImprovementSuggestionTests(unittest.TestCase):
    def test_target_title_prefers_profile_job_title(self):
        self.assertEqual(infer_target_title({"jobTitle": "Data Analyst"}, "Senior Backend Engineer"), "Data Analyst")

    def test_target_title_from_first_jd_line(self):
        jd = "Senior Backend Engineer\nWe build payment infrastructure."
        self.assertEqual(infer_target_title({}, jd), "Senior Backend Engineer")

    def test_target_title_absent(self):
        self.assertIsNone(infer_target_title({}, ""))
        self.assertIsNone(infer_target_title({}, "Join our team today"))

    def test_summary_suggestion_uses_profile(self):
        personal = {"fullName": "Jane Doe", "totalExperience": 5}
        suggestion = build_summary_suggestion(personal, "Backend Engineer", "Python role")
        self.assertTrue(suggestion.startswith("Jane Doe is a Backend Engineer with 5+ years of experience"))
        self.assertIn("collaboration tailored to this role,", suggestion)

    def test_summary_suggestion_renders_whole_float_years_as_integer(self):
        suggestion = build_summary_suggestion({"fullName": "Jane Doe", "yearsOfExperience": 5.0}, "Engineer", "")
        self.assertIn("with 5+ years of experience", suggestion)
        fractional = build_summary_suggestion({"totalExperience": 2.5}, "Engineer", "")
        self.assertIn("with 2.5+ years of experience", fractional)

    def test_summary_suggestion_defaults(self):
        suggestion = build_summary_suggestion({}, None, "")
        self.assertTrue(suggestion.startswith("this candidate is a experienced professional with solid experience"))
        self.assertNotIn("tailored to this role", suggestion)

    def test_experience_suggestions_cover_first_three_entries(self):
        document = {"experience": [{"jobTitle": "SRE", "company": "Acme"}, {}, "junk", {"role": "Dev"}]}
        suggestions = build_experience_suggestions(document, "Kubernetes")

        self.assertEqual([item.index for item in suggestions], [0, 1, 2])
        self.assertTrue(suggestions[0].bullets[0].startswith("Led initiatives as SRE at Acme,"))
        self.assertTrue(suggestions[1].bullets[0].startswith("Led initiatives as your role at the organization,"))
        self.assertTrue(all(len(item.bullets) == 3 for item in suggestions))
        self.assertIn("job description", suggestions[0].bullets[2])

    def test_experience_suggestions_without_jd(self):
        suggestions = build_experience_suggestions({"experience": [{"role": "Dev"}]}, None)
        self.assertTrue(suggestions[0].bullets[2].startswith("Grouped related responsibilities"))

    def test_no_experience_no_suggestions(self):
        self.assertEqual(build_experience_suggestions({}, "Python"), [])


class GenerateFeedbackTests(unittest.TestCase):
    def test_always_returns_non_empty_lists(self):
        for resume in (None, {}, {"resumeData": None}, {"data": {"skills": "odd"}}, FULL_RESUME):
            for jd in ("", "Python Kubernetes"):
                feedback = generate_feedback(resume, jd)
                self.assertGreaterEqual(len(feedback.strengths), 1)
                self.assertGreaterEqual(len(feedback.improvements), 1)
                self.assertLessEqual(len(feedback.strengths), 3)
                self.assertLessEqual(len(feedback.improvements), 3)
                self.assertTrue(feedback.readability)

    def test_uses_supplied_analysis(self):
        analysis = _analysis(score=90, match_percentage=80)
        feedback = generate_feedback({}, "Python", analysis=analysis)
        self.assertEqual(feedback.readability, READABILITY_STRONG)

    def test_includes_suggestions(self):
        feedback = generate_feedback(FULL_RESUME, FULL_JD)
        self.assertEqual(feedback.suggestions.target_title, "Backend Engineer")
        self.assertEqual(feedback.suggestions.action_verbs, list(ACTION_VERBS))
        self.assertEqual(len(feedback.suggestions.experience_suggestions), 1)
        payload = feedback.model_dump(by_alias=True)
        self.assertIn("summarySuggestion", payload["suggestions"])

    def test_non_string_job_description_raises(self):
        with self.assertRaises(TypeError):
            generate_feedback({}, 3.5)


if __name__ == "__main__":
    unittest.main()
