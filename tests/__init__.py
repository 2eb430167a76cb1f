"""Test package for the simple math game.

The tests drive the game headlessly: scripted stdin, an in-memory output
stream, a fake clock and a seeded or scripted random source.  To run them,
execute ``pytest`` from the project root.
"""
