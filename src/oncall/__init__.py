"""On-call shift scheduler: monthly rota from availability declarations."""
__version__ = "0.3.0"
