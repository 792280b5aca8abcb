# stockcount/api/__init__.py
"""
API package bootstrap.

- no re-exports here; routers are mounted by `stockcount.router_mount`
"""

__all__ = []
