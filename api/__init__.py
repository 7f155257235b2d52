"""
HTTP API for Raster Tone
"""
