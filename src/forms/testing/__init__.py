from __future__ import annotations

from .corpus import generate_source_files, generate_sources

__all__ = ["generate_source_files", "generate_sources"]
