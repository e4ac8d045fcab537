"""loctok CLI - Count LOC (lines of code) & TOK (LLM tokens)."""

__version__ = "0.1.0"
