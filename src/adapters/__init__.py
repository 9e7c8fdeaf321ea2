"""Adaptadores de I/O: HTTP hacia el LMS y almacén de tokens en disco."""
