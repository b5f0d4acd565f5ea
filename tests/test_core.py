import pytest

from data_designer_post_quality.core import (
    Hyperparameters,
    analyze_input,
    detect_intent,
    get_quality_label,
    should_analyze,
)
from data_designer_post_quality.models import GenerationSettings


STRONG_ANNOUNCEMENT = (
    "Looking for 5-10 beta testers for StoryScale, an AI tool that helps founders "
    "write LinkedIn posts 10x faster. Comment below or DM me!"
)

WEAK_ANNOUNCEMENT = "Looking for test users soon"

STORY_INPUT = "I just shipped a feature after three failed attempts — here's what I learned."

QUESTION_INPUT = "What is the one tool your team could not live without this year?"

HOW_TO_INPUT = "Here's how to cut your onboarding time in half with three small changes"

ANNOUNCEMENT_SETTINGS = {"style": "list_format", "purpose": "network_building", "length": "short"}


class TestDetectIntent:
    def test_announcement(self):
        assert detect_intent(STRONG_ANNOUNCEMENT) == "announcement"
        assert detect_intent("We are launching our new analytics dashboard next week") == "announcement"

    def test_story_arc(self):
        assert detect_intent(STORY_INPUT) == "story"
        assert detect_intent("Two years ago I quit my job to start a bakery") == "story"

    def test_how_to(self):
        assert detect_intent(HOW_TO_INPUT) == "how-to"

    def test_question(self):
        assert detect_intent(QUESTION_INPUT) == "question"
        assert detect_intent("However you slice it, remote work changed hiring") != "question"

    def test_list(self):
        assert detect_intent("5 mistakes that slowed down our sales team") == "list"

    def test_insight(self):
        assert detect_intent("I noticed our best clients all came from referrals") == "insight"

    def test_unknown(self):
        assert detect_intent("Coffee with the team on Friday afternoon") == "unknown"


class TestAnalyzeInput:
    def test_strong_announcement_scores_high(self):
        result = analyze_input(STRONG_ANNOUNCEMENT, ANNOUNCEMENT_SETTINGS)
        assert result.score == 100
        assert result.detected_intent == "announcement"
        assert result.recommended_settings is None
        assert result.suggestions == []
        assert result.feedback[0] == "Includes specific numbers"
        assert "Settings match your input type" in result.feedback
        assert result.has_numbers and result.has_call_to_action and result.has_unique_details
        assert result.is_specific

    def test_weak_announcement_scores_low(self):
        result = analyze_input(WEAK_ANNOUNCEMENT)
        assert result.score == 10
        assert result.feedback == []
        assert len(result.suggestions) == 5
        assert get_quality_label(result.score).label == "Poor"

    def test_story_input_recommends_story_style(self):
        result = analyze_input(STORY_INPUT, {"style": "direct"})
        assert result.detected_intent == "story"
        assert result.recommended_settings == {"style": "story"}
        assert "Settings may not match your input type; see the recommended settings" in result.suggestions

    def test_matching_settings_give_no_recommendation(self):
        result = analyze_input(STORY_INPUT, {"style": "story", "purpose": "personal_sharing", "length": "short"})
        assert result.recommended_settings is None

    def test_accepts_generation_settings_model(self):
        settings = GenerationSettings(
            tone="casual", style="direct", length="very_short", language="en",
            purpose="engagement", audience="founders", emojiUsage="none", includeCTA=False,
        )
        result = analyze_input(STORY_INPUT, settings)
        assert result.recommended_settings == {"style": "story", "length": "short"}

    def test_question_recommends_question_style(self):
        result = analyze_input(QUESTION_INPUT, {"style": "direct"})
        assert result.recommended_settings == {"style": "question_based"}

    def test_how_to_recommends_list_format(self):
        result = analyze_input(HOW_TO_INPUT, {"style": "story"})
        assert result.recommended_settings == {"style": "list_format"}

    def test_announcement_with_story_style(self):
        result = analyze_input(STRONG_ANNOUNCEMENT, {"style": "story", "purpose": "engagement", "length": "long"})
        assert result.recommended_settings == {
            "style": "list_format",
            "purpose": "network_building",
            "length": "short",
        }

    def test_unknown_setting_values_are_ignored(self):
        result = analyze_input(STORY_INPUT, {"style": "quirky", "length": "epic"})
        assert result.recommended_settings is None

    def test_setting_values_are_case_insensitive(self):
        result = analyze_input(STORY_INPUT, {"style": "Story-Based"})
        assert result.recommended_settings is None

    def test_unknown_style_is_not_reported_as_a_match(self):
        result = analyze_input(STORY_INPUT, {"style": "quirky"})
        assert "Settings match your input type" not in result.feedback
        assert result.feedback == ["Good length for a focused post"]

    def test_tone_only_settings_are_not_reported_as_a_match(self):
        result = analyze_input(STORY_INPUT, {"tone": "casual"})
        assert "Settings match your input type" not in result.feedback

    def test_known_matching_style_is_reported_as_a_match(self):
        result = analyze_input(STORY_INPUT, {"style": "story", "tone": "casual"})
        assert "Settings match your input type" in result.feedback

    def test_no_settings_no_recommendation(self):
        assert analyze_input(STORY_INPUT).recommended_settings is None
        assert analyze_input(QUESTION_INPUT, {}).recommended_settings is None

    def test_missing_cta_penalized_for_network_building(self):
        text = "Our team spent the quarter rebuilding the reporting pipeline from scratch"
        plain = analyze_input(text, {"purpose": "engagement"})
        networking = analyze_input(text, {"purpose": "network_building"})
        assert networking.score == plain.score - 10
        assert any("call-to-action" in s for s in networking.suggestions)

    def test_exclamation_advice_follows_tone(self):
        text = "We hit 1000 users this week!!! Thanks to everyone who joined the beta program early on."
        professional = analyze_input(text, {"tone": "professional"})
        casual = analyze_input(text, {"tone": "casual"})
        assert any("professional tone" in s for s in professional.suggestions)
        assert not any("professional tone" in s for s in casual.suggestions)
        assert professional.score == casual.score

    def test_long_input_suggests_concision(self):
        text = " ".join(["word"] * 120)
        result = analyze_input(text)
        assert "Input is quite long; consider being more concise" in result.suggestions

    def test_score_range_outside_0_100_is_rejected(self):
        with pytest.raises(ValueError):
            Hyperparameters(score_max=120)
        with pytest.raises(ValueError):
            Hyperparameters(score_min=-5)
        with pytest.raises(ValueError):
            Hyperparameters(score_min=60, score_max=40)

    def test_narrower_score_range_is_honoured(self):
        result = analyze_input(STRONG_ANNOUNCEMENT, hyperparameters=Hyperparameters(score_min=20, score_max=80))
        assert result.score == 80

    def test_score_is_clamped(self):
        high = analyze_input(STRONG_ANNOUNCEMENT, hyperparameters=Hyperparameters(base_score=95))
        low = analyze_input(WEAK_ANNOUNCEMENT, hyperparameters=Hyperparameters(base_score=0))
        assert high.score == 100
        assert low.score == 0

    def test_deterministic(self):
        assert analyze_input(STORY_INPUT, {"style": "direct"}) == analyze_input(STORY_INPUT, {"style": "direct"})

    def test_empty_text_does_not_raise(self):
        result = analyze_input("")
        assert 0 <= result.score <= 100
        assert result.word_count == 0
        assert result.detected_intent == "unknown"

    def test_payload_uses_camel_case(self):
        payload = analyze_input(STORY_INPUT, {"style": "direct"}).to_payload()
        assert payload["recommendedSettings"] == {"style": "story"}
        assert payload["detectedIntent"] == "story"
        assert "recommendedSettings" not in analyze_input(STORY_INPUT).to_payload()


class TestShouldAnalyze:
    def test_threshold(self):
        assert not should_analyze("x" * 19)
        assert should_analyze("x" * 20)


class TestQualityLabel:
    def test_boundaries_belong_to_upper_tier(self):
        assert get_quality_label(100).label == "Excellent"
        assert get_quality_label(90).label == "Excellent"
        assert get_quality_label(89).label == "Good"
        assert get_quality_label(70).label == "Good"
        assert get_quality_label(69).label == "Fair"
        assert get_quality_label(50).label == "Fair"
        assert get_quality_label(49).label == "Needs Work"
        assert get_quality_label(30).label == "Needs Work"
        assert get_quality_label(29).label == "Poor"
        assert get_quality_label(0).label == "Poor"

    def test_every_score_has_one_label(self):
        labels = {get_quality_label(score).label for score in range(0, 101)}
        assert labels == {"Excellent", "Good", "Fair", "Needs Work", "Poor"}

    def test_colors(self):
        assert [get_quality_label(s).color for s in (95, 75, 55, 35, 5)] == ["green", "blue", "yellow", "orange", "red"]
