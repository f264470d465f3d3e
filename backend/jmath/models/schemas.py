from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List


class TutorModel(BaseModel):
    """Base for per-request records; they are never mutated after construction"""
    model_config = ConfigDict(frozen=True)


class SolveRequest(TutorModel):
    """Request for a step-by-step solution"""
    problem: str = Field(..., min_length=1, description="Problem statement (natural language / LaTeX)")


class ExplainRequest(TutorModel):
    """Request for a concept explanation"""
    concept: str = Field(..., min_length=1, description="Name of the concept to explain")


class SimilarRequest(TutorModel):
    """Request for practice problems similar to an original problem"""
    problem: str = Field(..., min_length=1, description="Original problem text")


class VisualizeRequest(TutorModel):
    """Request for a concept-relationship diagram"""
    concepts: List[str] = Field(..., min_length=1, description="Concepts to relate, usually the core concepts of a solution")


class SolutionStep(TutorModel):
    """Individual step in a generated solution"""
    step_number: int = Field(..., ge=1, description="Step number in solving order")
    description: str = Field(..., description="What is done in this step; may contain $inline$ or $$block$$ LaTeX")
    core_concept: str = Field(..., description="Short label of the concept used in this step")


class SolveResponse(TutorModel):
    solution: List[SolutionStep]


class ExplainResponse(TutorModel):
    explanation: str


class SimilarProblemsResponse(TutorModel):
    similar_problems: List[str]


class DiagramResponse(TutorModel):
    diagramSyntax: str = Field(..., description="Mermaid graph definition")


class ErrorResponse(TutorModel):
    error: str


class ChatMessage(TutorModel):
    """Single message sent to the chat-completion API"""
    role: str = "user"
    content: str


class ChatCompletionRequest(TutorModel):
    """Body of an upstream chat-completion call"""
    model: str
    messages: List[ChatMessage]
    response_format: Any = None
