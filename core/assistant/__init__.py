"""
Assistant-side helpers: run polling, reply extraction, summary parsing,
input formatting and assistant definitions.
"""
