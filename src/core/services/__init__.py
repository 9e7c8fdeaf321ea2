"""Servicios del Core: parser, nombres, sesión y orquestación de la sincronización."""
