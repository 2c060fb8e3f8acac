"""Pydantic schemas for API request/response."""

from .requests import ContactCreate

__all__ = ["ContactCreate"]
