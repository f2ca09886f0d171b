import dataclasses
import re

import pytest
from app.services.nlp.lexicon import (
    NEGATIVE_INDICATORS,
    POSITIVE_INDICATORS,
    IndicatorRule,
    count_matches,
)

RULES = {r.theme: r for r in NEGATIVE_INDICATORS + POSITIVE_INDICATORS}


def test_weights_sign_convention():
    """Risk rules weigh positive, protective rules weigh negative"""
    assert len(NEGATIVE_INDICATORS) == 10
    assert len(POSITIVE_INDICATORS) == 5
    assert all(r.weight > 0 for r in NEGATIVE_INDICATORS)
    assert all(r.weight < 0 for r in POSITIVE_INDICATORS)
    assert len(RULES) == 15  # themes are unique


def test_rule_weights():
    assert RULES["hopelessness"].weight == 1.5
    assert RULES["self_harm"].weight == 2.5
    assert RULES["hope"].weight == -1.2
    assert RULES["connection"].weight == -0.9


def test_rule_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        RULES["sadness"].weight = 10.0


def test_count_matches_case_insensitive():
    assert count_matches("Sad, SAD and sad", RULES["sadness"].pattern) == 3


def test_count_matches_multiword_patterns():
    text = "I can't sleep. No energy. Looking forward to nothing."
    assert count_matches(text, RULES["sleep_disturbance"].pattern) == 1
    assert count_matches(text, RULES["fatigue"].pattern) == 1
    assert count_matches(text, RULES["hope"].pattern) == 1


def test_count_matches_substrings():
    """Patterns have no word boundaries"""
    assert count_matches("downloading the follow-up", RULES["sadness"].pattern) == 2
    # 'unhappy' hits sadness and also happiness through 'happy'
    assert count_matches("unhappy", RULES["sadness"].pattern) == 1
    assert count_matches("unhappy", RULES["happiness"].pattern) == 1


def test_count_matches_non_overlapping():
    pattern = re.compile("aa", re.IGNORECASE)
    assert count_matches("aaaa", pattern) == 2
    assert count_matches("aaa", pattern) == 1


@pytest.mark.parametrize("text", ["", None, "12345 !!! ...", "😢 ñandú über café"])
def test_count_matches_no_hits(text):
    for rule in RULES.values():
        assert count_matches(text, rule.pattern) == 0


def test_custom_rule():
    rule = IndicatorRule(theme="test", pattern=re.compile("grey", re.IGNORECASE), weight=0.3)
    assert count_matches("Grey skies, GREY days", rule.pattern) == 2
