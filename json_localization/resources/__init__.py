"""
JSON resource tables and their cache
"""

from .table_cache import ResourceTable, ResourceTableCache, parse_resource_table

__all__ = ["ResourceTable", "ResourceTableCache", "parse_resource_table"]
