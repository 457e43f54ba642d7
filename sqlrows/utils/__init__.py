"""Logging and record classification helpers."""

from sqlrows.utils import logging, type_guards

__all__ = ("logging", "type_guards")
