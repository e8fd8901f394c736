"""Intermediate representation: the diagram graph model."""

from mdmermaid.ir.graph import EdgeData, GraphModel, NodeData

__all__ = [
    "EdgeData",
    "GraphModel",
    "NodeData",
]
