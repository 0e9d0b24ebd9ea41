"""
Super Trunfo game engine.

Card model, derived attributes, the attribute table, the comparator and the
per-tier scoring. No terminal I/O happens here; see cli.py for that.
"""
