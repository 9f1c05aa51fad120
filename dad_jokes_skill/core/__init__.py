"""Core configuration, models, and cross-cutting helpers."""
