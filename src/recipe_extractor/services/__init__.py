"""Extraction services: tokenizer, ingredient parser and extraction strategies."""
