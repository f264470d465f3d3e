from typing import Callable, Type, TypeVar

import httpx
from fastapi import Depends, Request
from pydantic import BaseModel, ValidationError

from jmath.agents.tutor_agent import TutorAgent
from jmath.core.config import Settings, get_settings
from jmath.core.errors import InvalidRequestError
from jmath.services.llm_service import OpenRouterClient

RequestModel = TypeVar("RequestModel", bound=BaseModel)


def validated_body(model: Type[RequestModel], error_message: str) -> Callable:
    """
    Dependency that parses the JSON body into `model`.

    Any body that is not JSON or does not fit the model is rejected with 400
    and the capability's own message, before anything else runs.
    """
    async def dependency(request: Request) -> RequestModel:
        try:
            payload = await request.json()
        except ValueError:
            raise InvalidRequestError(error_message)
        try:
            return model.model_validate(payload)
        except ValidationError:
            raise InvalidRequestError(error_message)

    return dependency


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def get_completion_client(
    settings: Settings = Depends(get_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client)
) -> OpenRouterClient:
    return OpenRouterClient(settings, http_client)


def get_tutor_agent(client: OpenRouterClient = Depends(get_completion_client)) -> TutorAgent:
    return TutorAgent(client)
