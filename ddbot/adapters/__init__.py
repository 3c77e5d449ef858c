"""Adapters for DeepL and Discord."""
