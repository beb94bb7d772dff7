"""Domain layer — items, rules, and the daily update.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
