"""Unit tests for TemplateRegistry class."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from resumetex.contexts.templating.registries import TemplateRegistry


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert registry.templates_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
@pytest.mark.parametrize("type_name", ["experience", "education", "project", "text_section"])
def test_get_template_for_each_type(type_name):
    registry = TemplateRegistry()
    template = registry.get_template(type_name)

    assert template is not None
    assert registry.is_cached(type_name)


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    template1 = registry.get_template("experience")
    template2 = registry.get_template("experience")
    assert template1 is template2

    registry.clear_cache()
    assert not registry.is_cached("experience")


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound):
        registry.get_template("nonexistent_type")


@pytest.mark.unit
def test_get_template_path():
    """Test getting template file path."""
    registry = TemplateRegistry()
    path = registry.get_template_path("experience")

    assert isinstance(path, Path)
    assert path.name == "template.tex.jinja"
    assert path.parent.name == "experience"


@pytest.mark.unit
def test_latex_safe_delimiters():
    """LaTeX braces and # pass through; <<< >>> and <%% %%> are Jinja syntax."""
    registry = TemplateRegistry()
    template = registry.env.from_string(
        r"\newcommand{\x}[1]{#1} <%% if flag %%><<< value >>><%% endif %%>"
    )

    assert template.render(flag=True, value="ok") == r"\newcommand{\x}[1]{#1} ok"
    assert template.render(flag=False, value="ok") == r"\newcommand{\x}[1]{#1} "


@pytest.mark.unit
def test_structural_template():
    registry = TemplateRegistry()
    rendered = registry.get_structure("wrappers/section").render(
        label="SKILLS", title="Skills", content="  \\small{Go}\n"
    )

    assert rendered.startswith("%-----------SKILLS-----------------\n\\section{Skills}\n")


@pytest.mark.unit
def test_custom_templates_path(tmp_path):
    """Test a registry rooted at a different template directory."""
    type_dir = tmp_path / "types" / "custom"
    type_dir.mkdir(parents=True)
    (type_dir / "template.tex.jinja").write_text(r"\textbf{<<< text >>>}")

    registry = TemplateRegistry(tmp_path)
    assert registry.get_template("custom").render(text="hi") == r"\textbf{hi}"
    assert registry.read_source("types/custom/template.tex.jinja") == r"\textbf{<<< text >>>}"
