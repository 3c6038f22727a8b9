"""Exporter strategies and registry."""

from .base import ExporterRegistryInst
from .html_exporter import HtmlExporter
from .markdown_exporter import MarkdownExporter

__all__ = ["ExporterRegistryInst", "HtmlExporter", "MarkdownExporter"]
