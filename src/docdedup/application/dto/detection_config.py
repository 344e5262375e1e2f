"""Detection configuration DTO."""

from dataclasses import dataclass


@dataclass
class DetectionConfig:
    """Knobs for the duplicate detector."""

    candidate_limit: int = 100
    similarity_threshold: int = 70
    similar_limit: int = 5
