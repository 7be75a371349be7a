"""Analysis routes."""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from code_analyzer.api.deps import AppSettings, Engine
from code_analyzer.schemas.analysis import AnalysisReport, Category
from code_analyzer.services.file_service import FileService

router = APIRouter()

MAX_CONTENT_CHARS = 1_000_000


class AnalysisRunRequest(BaseModel):
    """Analysis request model."""

    content: str = Field(..., max_length=MAX_CONTENT_CHARS)
    language: str | None = Field(default=None, min_length=1, max_length=50)
    path: str | None = Field(default=None, min_length=1, max_length=1000)
    categories: list[Category] | None = None


class CategoriesResponse(BaseModel):
    """Available and default categories."""

    categories: list[Category]
    default: list[Category]


@router.get("/categories", response_model=CategoriesResponse)
async def list_categories(settings: AppSettings):
    """List analysis categories and the configured default set."""
    return CategoriesResponse(
        categories=list(Category),
        default=settings.default_categories,
    )


@router.post("/run", response_model=AnalysisReport)
async def run_analysis(request: AnalysisRunRequest, engine: Engine):
    """Analyze one file's content.

    Unknown categories are rejected by request validation before any
    analysis starts.
    """
    if request.path and not FileService.should_analyze_file(request.path):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="File type not supported for analysis",
        )

    language = request.language
    if not language:
        language = (
            FileService.get_file_language(request.path)
            if request.path
            else FileService.DEFAULT_LANGUAGE
        )

    return await engine.run(
        request.content,
        language,
        categories=request.categories,
    )
