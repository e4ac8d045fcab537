"""
Package core.tokenization - Pipeline dem LOC/TOK.

Modules:
- types: ScanOptions, FileCount, CountResult, LanguageSummary
- errors: ScanError hierarchy
- chunking: Cat text dai thanh chunk (gioi han chi phi tokenize)
- counter: Dem LOC + TOK cho 1 file
- progress: ScanProgress observer (thread-safe)
- batch: Scan song song ca directory (scan = count_tokens_in_path)

Tong hop theo ngon ngu nam o core.language_utils (aggregate = aggregate_by_language).
"""
