"""Karnaugh-map simplification of Boolean functions of two to four inputs."""

__version__ = "0.1.0"