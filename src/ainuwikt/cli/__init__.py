"""
Command-line interface entry points for ainuwikt.

Entry points:
- ainuwikt: Render entry files as Wiktionary wikitext
- ainuwikt-examples: Look up corpus example sentences for a term
"""
