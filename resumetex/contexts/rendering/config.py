"""
Render Configuration

Options for the LaTeX -> HTML renderer, loaded from an optional YAML file and
merged over the defaults with OmegaConf.
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

from resumetex.contexts.rendering.html_styles import PageStyles

load_dotenv()
RENDER_CONFIG_PATH = os.getenv("RENDER_CONFIG_PATH")


@dataclass
class RenderConfig:
    """
    Renderer options.

    Attributes:
        escape_html: Escape < > " ' typed into the source so it can never become
                     live markup (off by default, changes the output of sources
                     containing those characters)
        page_padding: CSS length for the page wrapper's padding
        placeholder_text: Message shown when there is nothing to render
    """

    escape_html: bool = False
    page_padding: str = PageStyles.DEFAULT_PADDING
    placeholder_text: str = PageStyles.DEFAULT_PLACEHOLDER_TEXT


def load_render_config(config_path: Optional[Path] = None) -> RenderConfig:
    """
    Load renderer options from YAML, falling back to defaults.

    Args:
        config_path: YAML file with any subset of RenderConfig fields. Defaults to
                     RENDER_CONFIG_PATH from environment; with neither set, the
                     defaults are returned.

    Returns:
        RenderConfig with file values merged over the defaults

    Raises:
        ValueError: If the file is not a mapping, has unknown keys, or has
                    values of the wrong type
    """
    if config_path is None:
        if not RENDER_CONFIG_PATH:
            return RenderConfig()
        config_path = RENDER_CONFIG_PATH

    loaded = OmegaConf.load(Path(config_path))
    if not isinstance(loaded, DictConfig):
        raise ValueError(f"Render config must be a mapping: {config_path}")

    known = {config_field.name for config_field in fields(RenderConfig)}
    unknown = sorted(set(loaded.keys()) - known)
    if unknown:
        raise ValueError(
            f"Unknown render config keys in {config_path}: {unknown}. Valid keys: {sorted(known)}"
        )

    # Structured merge validates value types against the dataclass
    merged = OmegaConf.merge(OmegaConf.structured(RenderConfig), loaded)
    return OmegaConf.to_object(merged)
