"""
Rich text link resolution.

Rewrites internal links in DocBook rich text documents into absolute,
siteaccess aware URLs.
"""

__version__ = "0.1.0"
