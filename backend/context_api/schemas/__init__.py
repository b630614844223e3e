"""Schemas — Pydantic models shared by handlers, collaborators and routes."""
