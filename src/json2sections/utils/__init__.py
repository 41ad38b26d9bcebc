"""Utility helpers for json2sections."""
