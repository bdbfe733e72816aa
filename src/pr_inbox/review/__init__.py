"""
Review Engagement Layer

Latest-interaction tracking and pull request classification.
"""

from .interaction import Interaction, NO_INTERACTION, latest_interaction
from .classifier import ClassificationResult, EngagementStatus, InteractionClassifier

__all__ = [
    'Interaction',
    'NO_INTERACTION',
    'latest_interaction',
    'ClassificationResult',
    'EngagementStatus',
    'InteractionClassifier',
]
