import logging
from typing import Any, Dict, List

from jmath.core.errors import EmptyCompletionError, MalformedResponseError
from jmath.services.llm_service import OpenRouterClient
from jmath.services.prompts import (
    build_concept_map_prompt,
    build_explanation_prompt,
    build_similar_problems_prompt,
    build_solution_prompt,
)
from jmath.services.response_parser import extract_json

logger = logging.getLogger(__name__)

NO_ANSWER_MESSAGE = "AI로부터 유효한 답변을 받지 못했습니다."
NO_EXPLANATION_MESSAGE = "AI로부터 유효한 설명을 받지 못했습니다."
NO_DIAGRAM_MESSAGE = "AI로부터 유효한 다이어그램을 받지 못했습니다."


class TutorAgent:
    """Orchestrates prompt -> completion -> reshaping for each tutor capability"""

    def __init__(self, client: OpenRouterClient):
        self.client = client

    async def solve(self, problem: str) -> Dict[str, Any]:
        """
        Solve a problem step by step.

        Returns {"solution": [...]} with the model's steps exactly as produced.
        """
        logger.info(f"📝 Solve request: {problem[:100]}")
        raw_content = await self.client.complete(build_solution_prompt(problem), json_mode=True)
        return {"solution": self._extract_key(raw_content, "solution")}

    async def explain(self, concept: str) -> Dict[str, str]:
        logger.info(f"📝 Explain request: {concept[:100]}")
        explanation = await self.client.complete(build_explanation_prompt(concept), title="Explanation")
        if not explanation:
            raise EmptyCompletionError(NO_EXPLANATION_MESSAGE)
        return {"explanation": explanation}

    async def generate_similar(self, problem: str) -> Dict[str, Any]:
        logger.info(f"📝 Similar problems request: {problem[:100]}")
        raw_content = await self.client.complete(
            build_similar_problems_prompt(problem),
            title="Similar Problems",
            json_mode=True
        )
        return {"similar_problems": self._extract_key(raw_content, "similar_problems")}

    async def visualize_concepts(self, concepts: List[str]) -> Dict[str, str]:
        """Mermaid text is passed through untouched; the browser renders it."""
        logger.info(f"📝 Concept map request: {len(concepts)} concepts")
        diagram_syntax = await self.client.complete(build_concept_map_prompt(concepts), title="Concept Map")
        if not diagram_syntax:
            raise EmptyCompletionError(NO_DIAGRAM_MESSAGE)
        return {"diagramSyntax": diagram_syntax}

    def _extract_key(self, raw_content: Any, key: str) -> Any:
        if not raw_content:
            raise EmptyCompletionError(NO_ANSWER_MESSAGE)

        parsed = extract_json(raw_content)
        # both JSON capabilities answer with an array under their key
        if not isinstance(parsed, dict) or not isinstance(parsed.get(key), list):
            logger.error(f"Failed to parse JSON with '{key}' from AI response: {raw_content}")
            raise MalformedResponseError()

        return parsed[key]
