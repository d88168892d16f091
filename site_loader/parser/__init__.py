"""Markup extraction helpers."""
