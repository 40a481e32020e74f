"""In-memory runtime modules with signed origins, events, dispatch weights and fees."""

__version__ = "0.1.0"
__all__ = [
    "fees",
    "rpc",
    "runtime",
    "runtimes",
    "storage_cache",
    "struct_storage",
    "sum_storage",
    "vec_set",
    "weights",
]