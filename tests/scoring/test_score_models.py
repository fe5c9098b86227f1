# ABOUTME: Tests for scoring models and the recommendation structure
# ABOUTME: Validates score range checks and display helpers

import pytest

from dawn_patrol.scoring.models import Activity, CycleScore, PhotoScore, Recommendation, SurfScore


def test_surf_score_stores_breakdown():
    score = SurfScore(
        score=8,
        details="3.2ft @ 9s NE",
        wave_height_ft=3.2,
        period_s=9,
        direction_deg=45,
        height_score=7,
        period_score=8,
        wind_score=10,
    )

    assert score.breakdown == "Height: 7/10 | Period: 8/10 | Wind: 10/10"


def test_zero_is_a_valid_no_data_score():
    assert SurfScore(score=0, details="No data available").score == 0
    assert PhotoScore(score=0, verdict="No data available").score == 0
    assert CycleScore(score=0).direction is None


@pytest.mark.parametrize("bad", [-1, 11])
def test_scores_outside_range_are_rejected(bad):
    with pytest.raises(ValueError):
        SurfScore(score=bad, details="")
    with pytest.raises(ValueError):
        PhotoScore(score=bad, verdict="")
    with pytest.raises(ValueError):
        CycleScore(score=bad)


def test_scores_are_immutable():
    score = PhotoScore(score=9, verdict="Good")
    with pytest.raises(AttributeError):
        score.score = 3


def test_recommendation_string():
    rec = Recommendation(
        activity=Activity.SURF,
        label="GO SURF",
        detail="3.2ft @ 9s NE",
        icon="\U0001F3C4",
        score=8,
    )
    assert str(rec) == "\U0001F3C4 GO SURF: 3.2ft @ 9s NE"
