"""LLM client data models.

This module defines request/response models for the Ollama generate API.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from dinner_decider.schemas.base import DownstreamResponse


class OllamaGenerateRequest(BaseModel):
    """Request body for Ollama /api/generate endpoint."""

    model: str = Field(..., description="Model name (e.g., 'llama2')")
    prompt: str = Field(..., description="Input prompt text")
    stream: bool = Field(default=False, description="Whether to stream response")
    format: str | dict[str, Any] | None = Field(
        default="json",
        description="Response format: 'json' or JSON schema dict",
    )


class OllamaGenerateResponse(DownstreamResponse):
    """Response from Ollama /api/generate endpoint."""

    model: str = Field(..., description="Model that generated response")
    created_at: str = Field(..., description="Timestamp of generation")
    response: str = Field(..., description="Generated text response")
    done: bool = Field(..., description="Whether generation is complete")
    total_duration: int | None = Field(
        default=None,
        description="Total time in nanoseconds",
    )
    prompt_eval_count: int | None = Field(
        default=None,
        description="Number of tokens in prompt",
    )
    eval_count: int | None = Field(
        default=None,
        description="Number of tokens generated",
    )
