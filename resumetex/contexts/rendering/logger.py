"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from resumetex.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, record_path: Path = None) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session
        record_path: Resume record being previewed, if any

    Returns:
        Path to log file

    Example:
        from resumetex.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir)
        _log_info("Rendering preview...")
    """
    extra = {"Record": str(record_path)} if record_path is not None else None
    return _setup_logger(context_name="render", log_dir=log_dir, extra_provenance=extra)


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_result(result) -> None:  # RenderResult
    """
    Log per-render diagnostics.

    Everything goes to DEBUG since a render runs on every preview request,
    except passes that failed, which are worth a warning.
    """
    _log_debug(
        f"Rendered {len(result.html)} chars in {result.time_s * 1000:.1f}ms "
        f"({len(result.changed_passes)} passes changed the text)"
    )
    if result.changed_passes:
        _log_debug(f"  Changed: {', '.join(result.changed_passes)}")
    if result.leftover_commands:
        _log_debug(f"  Stripped unknown commands: {', '.join(sorted(set(result.leftover_commands)))}")
    if result.failed_passes:
        _log_warning(f"Skipped failed passes: {', '.join(result.failed_passes)}")


def log_preview_start(record_path: Path, output_dir: Path, log_file: Path) -> None:
    """Log start of a preview build with context."""
    _log_info(f"Building preview: {record_path.name}")
    _log_debug(f"  Record: {record_path}")
    _log_debug(f"  Output: {output_dir}")
    _log_debug(f"  Log: {log_file}")


def log_preview_result(result) -> None:  # PreviewResult
    """Log the outcome of a preview build."""
    if result.success:
        _log_success(f"Preview built ({result.time_s:.2f}s)")
        _log_info(f"  LaTeX: {result.tex_path}")
        _log_info(f"  HTML: {result.html_path}")
    else:
        _log_error(f"Preview failed ({result.time_s:.2f}s)")
        for line in str(result.error).splitlines():
            _log_error(f"  {line}")
