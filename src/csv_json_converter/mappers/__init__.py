"""Mappers between tables and JSON documents."""

from .table_to_document import TableToDocumentMapper
from .document_to_table import DocumentToTableMapper

__all__ = ["TableToDocumentMapper", "DocumentToTableMapper"]
