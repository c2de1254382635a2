from signataire.di.container import DIContainer

__all__ = ["DIContainer"]
