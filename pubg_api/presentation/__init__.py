"""Presentation layer - command line interface."""
from .cli import APICommand, build_parser

__all__ = [
    "APICommand",
    "build_parser",
]
