"""Document output layer.

This module renders assembled timeline documents into widget JSON.
It owns file writes so transforms stay free of I/O.
"""
