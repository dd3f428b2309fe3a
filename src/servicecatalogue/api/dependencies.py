"""FastAPI dependencies: shared state and environment → base URL resolution."""

from typing import Annotated

from fastapi import Depends, Request

from servicecatalogue.state import AppState


def get_state(request: Request) -> AppState:
    return request.app.state.catalogue


State = Annotated[AppState, Depends(get_state)]


def get_registry_base_url(environment: str, state: State) -> str:
    return state.registry_environments.resolve(environment)


def get_metadata_base_url(environment: str, state: State) -> str:
    return state.metadata_environments.resolve(environment)


RegistryBaseUrl = Annotated[str, Depends(get_registry_base_url)]
MetadataBaseUrl = Annotated[str, Depends(get_metadata_base_url)]
