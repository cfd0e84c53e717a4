"""Formatters for different report output formats."""

from .base_formatter import BaseFormatter
from .json_formatter import JSONFormatter
from .mermaid_formatter import MermaidFormatter
from .plantuml_formatter import PlantUMLFormatter

__all__ = [
    "BaseFormatter",
    "JSONFormatter",
    "MermaidFormatter",
    "PlantUMLFormatter",
]
