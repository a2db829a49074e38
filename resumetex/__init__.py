"""
resumetex - LaTeX resume generation and live HTML preview

Turns a structured resume record into LaTeX source built on a fixed resume
template, and renders that LaTeX dialect (or hand-edited variants of it) into
styled HTML for on-screen preview and PDF export.

Architecture:
- Templating Context: resume record model and LaTeX source generation
- Rendering Context: LaTeX-to-HTML rewrite pipeline and preview output
"""

__version__ = "0.1.0"
