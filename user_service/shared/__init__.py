"""Shared cross-cutting helpers (logging). No business logic."""
