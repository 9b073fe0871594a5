"""Localized Markdown text pages and the commodity catalog that references them."""
