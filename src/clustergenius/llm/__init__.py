"""LLM classification module."""
from .models import ClusterDefinition, Assignment, AnalysisResult, AnalysisResponse
from .classifier import Classifier, StaticClassifier, sample_records, build_prompt, parse_response
from .gemini_classifier import GeminiClassifier
from .validation import AssignmentReport, validate_assignments

__all__ = [
    "ClusterDefinition",
    "Assignment",
    "AnalysisResult",
    "AnalysisResponse",
    "Classifier",
    "StaticClassifier",
    "sample_records",
    "build_prompt",
    "parse_response",
    "GeminiClassifier",
    "AssignmentReport",
    "validate_assignments"
]
