"""API dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends

from code_analyzer.config import Settings, get_settings
from code_analyzer.services.analysis_engine import AnalysisEngine, get_analysis_engine

# Type aliases for cleaner signatures
AppSettings = Annotated[Settings, Depends(get_settings)]
Engine = Annotated[AnalysisEngine, Depends(get_analysis_engine)]
