"""Data models for cluster classification."""
from dataclasses import dataclass
from typing import List

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class ClusterDefinition:
    """A behavioral segment defined by the classifier."""
    name: str
    description: str
    color: str  # hex color, format not checked


@dataclass(frozen=True)
class Assignment:
    """BA identifier to cluster name mapping."""
    identifier: str
    cluster_name: str


@dataclass(frozen=True)
class AnalysisResult:
    """Cluster definitions plus assignments returned by the classifier."""
    clusters: List[ClusterDefinition]
    assignments: List[Assignment]


class ClusterSchema(BaseModel):
    """Pydantic schema for one cluster in the LLM response."""
    name: str
    description: str
    color: str = Field(description="A hex color code suitable for charts (e.g., #FF5733)")


class AssignmentSchema(BaseModel):
    """Pydantic schema for one assignment in the LLM response."""
    baId: str
    clusterName: str


class AnalysisResponse(BaseModel):
    """Pydantic schema for the LLM response."""
    clusters: List[ClusterSchema] = Field(description="The defined clusters")
    assignments: List[AssignmentSchema] = Field(description="Assignment of each BA ID to a cluster name")

    def to_result(self) -> AnalysisResult:
        return AnalysisResult(
            clusters=[ClusterDefinition(c.name, c.description, c.color) for c in self.clusters],
            assignments=[Assignment(a.baId, a.clusterName) for a in self.assignments]
        )
