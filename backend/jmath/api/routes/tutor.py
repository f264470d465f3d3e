from fastapi import APIRouter, Depends

from jmath.agents.tutor_agent import TutorAgent
from jmath.api.deps import get_tutor_agent, validated_body
from jmath.models.schemas import (
    DiagramResponse, ErrorResponse, ExplainRequest, ExplainResponse,
    SimilarProblemsResponse, SimilarRequest, SolveRequest, SolveResponse,
    VisualizeRequest
)

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request body"},
    500: {"model": ErrorResponse, "description": "Configuration, AI response or internal error"},
}


@router.post("/solve", responses={200: {"model": SolveResponse}, **ERROR_RESPONSES})
async def solve_problem(
    payload: SolveRequest = Depends(validated_body(SolveRequest, "잘못된 문제 형식입니다.")),
    agent: TutorAgent = Depends(get_tutor_agent)
):
    """
    Solve a math problem step by step.

    - **problem**: problem statement, natural language or LaTeX
    """
    return await agent.solve(payload.problem)


@router.post("/explain", responses={200: {"model": ExplainResponse}, **ERROR_RESPONSES})
async def explain_concept(
    payload: ExplainRequest = Depends(validated_body(ExplainRequest, "잘못된 개념 요청입니다.")),
    agent: TutorAgent = Depends(get_tutor_agent)
):
    """Explain a single concept in plain Korean Markdown/LaTeX"""
    return await agent.explain(payload.concept)


@router.post("/generate-similar", responses={200: {"model": SimilarProblemsResponse}, **ERROR_RESPONSES})
async def generate_similar_problems(
    payload: SimilarRequest = Depends(validated_body(SimilarRequest, "유효하지 않은 원본 문제입니다.")),
    agent: TutorAgent = Depends(get_tutor_agent)
):
    """Generate three practice problems testing the same concepts"""
    return await agent.generate_similar(payload.problem)


@router.post("/visualize-concepts", responses={200: {"model": DiagramResponse}, **ERROR_RESPONSES})
async def visualize_concepts(
    payload: VisualizeRequest = Depends(validated_body(VisualizeRequest, "유효하지 않은 개념 목록입니다.")),
    agent: TutorAgent = Depends(get_tutor_agent)
):
    """Generate a Mermaid graph relating the given concepts"""
    return await agent.visualize_concepts(list(payload.concepts))
