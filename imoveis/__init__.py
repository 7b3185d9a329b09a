"""
Imoveis
Property listing search core: filter & rank engine, listing store,
search service and HTTP API.
"""

__version__ = "0.1.0"
