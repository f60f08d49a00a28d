"""Shared cross-cutting helpers: logging and tracing. No business logic."""
