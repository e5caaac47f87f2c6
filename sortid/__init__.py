from sortid.generator import Generator
from sortid.options import Base, Precision
from sortid.radix import encode, decode

__all__ = [
    "Generator",
    "Base",
    "Precision",
    "encode",
    "decode",
]
