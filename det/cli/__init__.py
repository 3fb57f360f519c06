from det.cli.reference import SupportsCliCommand


__all__ = [
    "SupportsCliCommand",
]
