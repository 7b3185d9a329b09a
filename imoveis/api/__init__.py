"""
Imoveis API package
"""
