"""Asynchronous client for the SAP ABAP Development Tools (ADT) REST services."""

__version__ = "0.1.0"