"""
Rendering Context

Responsibilities:
- Converts the resume LaTeX dialect to styled HTML for the live preview
- Runs the ordered rewrite pipeline with per-pass fault isolation
- Loads renderer options
- Builds on-disk previews (.tex + standalone .html) from record files

Owns: LaTeX -> HTML conversion, preview output
Never: Modifies the LaTeX source it is given
"""

from resumetex.contexts.rendering.config import RenderConfig, load_render_config
from resumetex.contexts.rendering.preview import PreviewResult, build_preview
from resumetex.contexts.rendering.renderer import (
    RenderResult,
    build_pipeline,
    render,
    render_with_diagnostics,
)

__all__ = [
    # Rendering
    "render",
    "render_with_diagnostics",
    "build_pipeline",
    "RenderResult",
    # Configuration
    "RenderConfig",
    "load_render_config",
    # Preview orchestration
    "build_preview",
    "PreviewResult",
]
