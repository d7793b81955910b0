"""
Domain layer: модели каталога и порты для внешних коллабораторов.
"""
