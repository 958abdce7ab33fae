"""Configuration loading helpers."""
