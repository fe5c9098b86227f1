# ABOUTME: Picks tomorrow morning's activity from the three scores
# ABOUTME: Falls back to sleeping in when nothing scores well enough

from dawn_patrol.config import Config
from dawn_patrol.scoring.models import Activity, CycleScore, PhotoScore, Recommendation, SurfScore

LABELS = {
    Activity.SURF: "GO SURF",
    Activity.PHOTO: "SUNRISE PHOTOS",
    Activity.CYCLE: "GO CYCLING",
    Activity.SLEEP: "SLEEP IN",
}

ICONS = {
    Activity.SURF: "\U0001F3C4",   # surfer
    Activity.PHOTO: "\U0001F4F7",  # camera
    Activity.CYCLE: "\U0001F6B2",  # bicycle
    Activity.SLEEP: "\U0001F634",  # sleeping face
}

PHOTO_DETAIL = "Get up early and find your spot"
SLEEP_DETAIL = "Nothing looks great tomorrow"


class ActivityRecommender:
    """Recommends the best morning activity"""

    def __init__(self, min_score: int = Config.MIN_RECOMMEND_SCORE):
        self.min_score = min_score

    def rank(self, surf: SurfScore, photo: PhotoScore, cycle: CycleScore) -> list[tuple[Activity, int]]:
        """Activities by score, best first; ties keep surf, photo, cycle order"""
        ranked = [
            (Activity.SURF, surf.score),
            (Activity.PHOTO, photo.score),
            (Activity.CYCLE, cycle.score),
        ]
        return sorted(ranked, key=lambda entry: entry[1], reverse=True)

    def recommend(self, surf: SurfScore, photo: PhotoScore, cycle: CycleScore) -> Recommendation:
        """
        Recommend an activity for tomorrow morning

        Args:
            surf: Surf score, its details become the recommendation detail
            photo: Sunrise photo score
            cycle: Cycling score, its direction text becomes the detail

        Returns:
            Recommendation for the top-ranked activity, or SLEEP IN
            when even the best score is below min_score
        """
        best, score = self.rank(surf, photo, cycle)[0]

        if score < self.min_score:
            return Recommendation(
                activity=Activity.SLEEP,
                label=LABELS[Activity.SLEEP],
                detail=SLEEP_DETAIL,
                icon=ICONS[Activity.SLEEP],
                score=score,
            )

        if best is Activity.SURF:
            detail = surf.details
        elif best is Activity.CYCLE:
            detail = cycle.direction_text or ""
        else:
            detail = PHOTO_DETAIL

        return Recommendation(
            activity=best,
            label=LABELS[best],
            detail=detail,
            icon=ICONS[best],
            score=score,
        )
