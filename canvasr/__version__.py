__title__ = "canvasr"
__description__ = "Canvas LMS API client with lazy Link-header pagination."
__version__ = "0.1.0"
