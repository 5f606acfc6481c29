"""Flash AVR boards through avrdude and look up AVR chip tables."""

__version__ = "0.1.0"