"""
Training Templates API endpoints.
"""
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from volleycoach.templates import get_template, list_templates

router = APIRouter()


class TemplateResponse(BaseModel):
    """Built-in training template."""
    id: str
    title: str
    duration: str
    level: str
    goals: list[str]
    description: str
    phases: list[dict[str, Any]]


@router.get("", response_model=list[TemplateResponse])
async def get_templates():
    """
    List the built-in training templates.
    """
    return list_templates()


@router.get("/{template_id}", response_model=TemplateResponse)
async def get_template_by_id(template_id: str):
    """
    Get a built-in training template by ID.
    """
    template = get_template(template_id)
    if template is None:
        raise HTTPException(status_code=404, detail="Template not found")
    return template
