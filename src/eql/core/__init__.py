"""Tokenizer, parser, diagnostics and operation model."""
