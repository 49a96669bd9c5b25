"""Presentation CLI exports."""
from .api_command import APICommand, build_parser

__all__ = [
    "APICommand",
    "build_parser",
]
