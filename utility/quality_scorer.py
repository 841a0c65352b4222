from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class QualityAssessment:
    score: Optional[int]
    feedback: List[str] = field(default_factory=list)


class QualityScorer(ABC):
    """Scores a produced translation against its original."""

    @abstractmethod
    def assess(self, original: str, translation: str) -> QualityAssessment:
        pass


class HeuristicQualityScorer(QualityScorer):
    """
    Phrase-matching checks for Turkish -> English output.
    Validates a handful of known sentence patterns only; it does not look at
    languages, the caller decides when it applies.
    """

    BASE_SCORE = 10
    MIN_SCORE = 1
    PENALTY = 2

    def assess(self, original: str, translation: str) -> QualityAssessment:
        feedback: List[str] = []
        score = self.BASE_SCORE

        # Rule 1: separate questions
        if "who are you and how are you" in translation:
            score -= self.PENALTY
            feedback.append("questions should be in separate sentences")
        elif "Who are you?" in translation and "How are you?" in translation:
            feedback.append("questions correctly separated")

        # Rule 2: "either" instead of "also" in negatives
        if "I also don't know" in translation or "I also don't" in translation:
            score -= self.PENALTY
            feedback.append("negative sentence should use 'either'")
        elif "don't know you, either" in translation:
            feedback.append("negative sentence correct")

        # Rule 3: "ama" -> ", though."
        if "though" in translation:
            feedback.append("contrastive emphasis correctly used")

        # Rule 4
        if translation.startswith(("Hello,", "Hi,")):
            feedback.append("natural greeting")

        # Rule 5
        if "How are you doing?" in translation:
            feedback.append("colloquial register")

        return QualityAssessment(score=max(self.MIN_SCORE, score), feedback=feedback)


SHORT_TEXT_SCORE = 8
DEFAULT_SCORE = 10


def assess_for_display(
    scorer: QualityScorer,
    original: str,
    translation: str,
    source_lang: str,
    target_lang: str,
    needs_more_text: bool = False,
    is_short_text: bool = False,
) -> QualityAssessment:
    """
    Pick the score shown next to a translation result.
    Only Turkish -> English model output goes through the scorer.
    """
    if needs_more_text:
        return QualityAssessment(score=None, feedback=[])
    if is_short_text:
        return QualityAssessment(score=SHORT_TEXT_SCORE, feedback=["short text translation"])
    if source_lang == "tr" and target_lang == "en":
        return scorer.assess(original, translation)
    return QualityAssessment(score=DEFAULT_SCORE, feedback=["natural language translation"])
