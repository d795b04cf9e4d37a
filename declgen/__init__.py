"""Synthesis of merged ambient TypeScript declarations."""

from .config import ConfigurationError, load_config
from .engine import DeclarationEngine, merge_results
from .generator import DeclarationGenerator
from .parser import ParseFailure, TypeScriptParser

__all__ = [
    "ConfigurationError",
    "DeclarationEngine",
    "DeclarationGenerator",
    "ParseFailure",
    "TypeScriptParser",
    "load_config",
    "merge_results",
]
