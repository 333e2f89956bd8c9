"""
Cake shop domain errors
"""


class CakeShopError(Exception):
    """Base for every error raised by the cake shop"""


class InvalidRequest(CakeShopError, ValueError):
    """Missing or unrecognized cake kind, size or decoration list"""


class UnknownCombination(CakeShopError, LookupError):
    """The price table has no row for a kind/size pair"""

    def __init__(self, kind, size):
        self.kind = kind
        self.size = size
        super().__init__(f"No price for {kind} / {size}")


class UnknownDecoration(CakeShopError, ValueError):
    """Decoration outside the fixed menu"""

    def __init__(self, decoration):
        self.decoration = decoration
        super().__init__(f"Unknown decoration type: {decoration!r}")


class NullSink(CakeShopError, ValueError):
    """Sink registration misuse"""
