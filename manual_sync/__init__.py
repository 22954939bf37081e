"""
manual-sync - Game manual linker for ES-DE gamelist.xml files

Scans ROM sub-directories for gamelist.xml files and adds (or removes)
<manual> tags pointing at scraped manuals in each system's media/manuals folder.
"""

__version__ = "1.0.0"
__author__ = "Steve Simpson"
